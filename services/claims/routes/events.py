"""
Event Routes
============

Read access to the authorization record stream.
"""

from fastapi import APIRouter, Query
from pydantic import BaseModel

from heat.core.events import EventRecord, EventType
from heat.system import get_system


router = APIRouter()


class EventListResponse(BaseModel):
    """Newest records first."""

    total: int
    chain_valid: bool
    records: list[EventRecord]


@router.get("", response_model=EventListResponse)
async def list_events(
    event_type: EventType | None = None,
    limit: int = Query(default=100, ge=1, le=1000),
) -> EventListResponse:
    """List records, optionally filtered by type."""
    events = get_system().events
    return EventListResponse(
        total=len(events),
        chain_valid=events.verify_chain(),
        records=events.records(event_type, limit=limit),
    )

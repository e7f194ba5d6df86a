"""
Authorization Record Stream
===========================

Append-only, hash-chained record of everything the core authorizes:
claims, mints, burns, transfers, fee collections, role and state changes.

Each record stores the SHA-256 hash of the previous record, so the stream
can be checked end to end with ``verify_chain()``.

Version: 0.1.0
"""

import hashlib
import json
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from heat.logging import get_logger

logger = get_logger(__name__)


class EventType(str, Enum):
    """Types of authorization records."""

    CLAIM_AUTHORIZED = "claim_authorized"
    MINTED = "minted"
    BURNED = "burned"
    TRANSFER = "transfer"
    APPROVAL = "approval"
    FEES_COLLECTED = "fees_collected"
    TREASURY_BURNED = "treasury_burned"
    ROLE_CHANGED = "role_changed"
    SYSTEM_STATE_CHANGED = "system_state_changed"


class EventRecord(BaseModel):
    """One entry of the record stream."""

    sequence: int = Field(..., ge=0, description="Position in the stream")
    event_type: EventType
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    payload: dict[str, Any] = Field(default_factory=dict)
    previous_hash: str | None = Field(default=None, description="Hash of previous record")
    record_hash: str = Field(default="", description="SHA-256 of this record")

    def compute_hash(self) -> str:
        """Hash the record content together with the previous hash."""
        body = json.dumps(
            {
                "sequence": self.sequence,
                "event_type": self.event_type.value,
                "timestamp": self.timestamp.isoformat(),
                "payload": self.payload,
                "previous_hash": self.previous_hash,
            },
            sort_keys=True,
            default=str,
        )
        return hashlib.sha256(body.encode()).hexdigest()


class EventStream:
    """
    In-memory append-only record stream.

    Usage:
        events = EventStream()
        events.emit(EventType.MINTED, account="0x...", amount=8_000_000)
        latest = events.records(EventType.MINTED, limit=10)
    """

    def __init__(self) -> None:
        self._records: list[EventRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def emit(self, event_type: EventType, **payload: Any) -> EventRecord:
        """Append a record and log it."""
        previous_hash = self._records[-1].record_hash if self._records else None
        record = EventRecord(
            sequence=len(self._records),
            event_type=event_type,
            payload=payload,
            previous_hash=previous_hash,
        )
        record.record_hash = record.compute_hash()
        self._records.append(record)

        logger.info(event_type.value, sequence=record.sequence, **payload)
        return record

    def records(
        self,
        event_type: EventType | None = None,
        limit: int = 100,
    ) -> list[EventRecord]:
        """Return the newest records first, optionally filtered by type."""
        selected = [
            r for r in reversed(self._records)
            if event_type is None or r.event_type == event_type
        ]
        return selected[:limit]

    def latest(self, event_type: EventType | None = None) -> EventRecord | None:
        """Return the newest record (of a type), if any."""
        found = self.records(event_type, limit=1)
        return found[0] if found else None

    def verify_chain(self) -> bool:
        """Check every record hash and back-link."""
        previous_hash = None
        for record in self._records:
            if record.previous_hash != previous_hash:
                return False
            if record.compute_hash() != record.record_hash:
                return False
            previous_hash = record.record_hash
        return True

"""
Admin Routes
============

API endpoints for role assignment and halting the system. Owner only.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from heat.auth import Caller, require_owner
from heat.core.access import Role, SystemState
from heat.logging import get_logger
from heat.system import get_system


logger = get_logger(__name__)
router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class RolesResponse(BaseModel):
    """Current role holders and system state."""

    roles: dict[Role, str]
    state: SystemState


class SetRoleRequest(BaseModel):
    """Assign a role to a new holder."""

    holder: str = Field(..., description="New holder account")


class RoleChangeResponse(BaseModel):
    """Result of a role assignment."""

    role: Role
    previous_holder: str
    holder: str


class StateResponse(BaseModel):
    """System state after a halt or resume."""

    state: SystemState


# ============================================================================
# Endpoints
# ============================================================================


@router.get("/roles", response_model=RolesResponse)
async def get_roles() -> RolesResponse:
    """Role holders and system state."""
    access = get_system().access
    return RolesResponse(roles=access.holders(), state=access.state)


@router.put("/roles/{role}", response_model=RoleChangeResponse)
async def set_role(
    role: Role,
    request: SetRoleRequest,
    caller: Annotated[Caller, Depends(require_owner)],
) -> RoleChangeResponse:
    """Assign a role."""
    access = get_system().access
    previous = await access.set_role(caller.address, role, request.holder)
    return RoleChangeResponse(role=role, previous_holder=previous, holder=access.holder(role))


@router.post("/halt", response_model=StateResponse)
async def halt(caller: Annotated[Caller, Depends(require_owner)]) -> StateResponse:
    """Halt every state-changing operation except administration."""
    access = get_system().access
    await access.halt(caller.address)
    return StateResponse(state=access.state)


@router.post("/resume", response_model=StateResponse)
async def resume(caller: Annotated[Caller, Depends(require_owner)]) -> StateResponse:
    """Resume normal operation."""
    access = get_system().access
    await access.resume(caller.address)
    return StateResponse(state=access.state)

"""
Fee Routes
==========

API endpoints for fee collection and treasury burns.

Collection splits an amount 8 / 2 / 90 into burn, treasury and distribution
shares. Callers must hold the collector (or treasury) role.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from heat.auth import Caller, require_collector, require_treasury
from heat.fees.splitter import FeeShares
from heat.logging import get_logger
from heat.system import get_system


logger = get_logger(__name__)
router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class CollectRequest(BaseModel):
    """Collect fees from an account."""

    account: str = Field(..., description="Account the fee is collected from")
    total: int = Field(..., description="Fee amount in base units")


class CollectFromRequest(CollectRequest):
    """Collect fees against a spender's allowance."""

    spender: str = Field(..., description="Account whose allowance is consumed")


class TreasuryBurnRequest(BaseModel):
    """Burn from the treasury's balance."""

    amount: int = Field(..., description="Amount in base units")


class CollectResponse(BaseModel):
    """Applied fee split."""

    success: bool = True
    shares: FeeShares


class TreasuryBurnResponse(BaseModel):
    """Result of a treasury burn."""

    success: bool = True
    amount: int
    total_supply: int


# ============================================================================
# Collection Endpoints
# ============================================================================


@router.post("/collect", response_model=CollectResponse)
async def collect(
    request: CollectRequest,
    caller: Annotated[Caller, Depends(require_collector)],
) -> CollectResponse:
    """Collect and split a fee from an account's balance."""
    shares = await get_system().fees.collect(caller.address, request.account, request.total)
    return CollectResponse(shares=shares)


@router.post("/collect-from", response_model=CollectResponse)
async def collect_from(
    request: CollectFromRequest,
    caller: Annotated[Caller, Depends(require_collector)],
) -> CollectResponse:
    """Collect and split a fee, consuming a spender's allowance."""
    shares = await get_system().fees.collect_from(
        caller.address,
        request.account,
        request.spender,
        request.total,
    )
    return CollectResponse(shares=shares)


@router.post("/treasury-burn", response_model=TreasuryBurnResponse)
async def treasury_burn(
    request: TreasuryBurnRequest,
    caller: Annotated[Caller, Depends(require_treasury)],
) -> TreasuryBurnResponse:
    """Burn from the treasury's own balance."""
    total_supply = await get_system().fees.burn_from_treasury(caller.address, request.amount)
    return TreasuryBurnResponse(amount=request.amount, total_supply=total_supply)


@router.get("/stats")
async def get_fee_stats() -> dict[str, Any]:
    """Fee counters and treasury balance."""
    return get_system().fees.stats()

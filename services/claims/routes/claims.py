"""
Claim Routes
============

API endpoints for submitting burn-proof claims and querying claim state.

Claims are authorized by their proof, not by the caller: submission needs no
bearer token. The processor mints under its own minter identity.
"""

from typing import Any

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from heat.logging import get_logger
from heat.models.claim import Claim, MintReceipt, MintTier
from heat.nullifiers.store import nullifier_key
from heat.system import get_system


logger = get_logger(__name__)
router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class ClaimResponse(BaseModel):
    """Response for an authorized claim."""

    success: bool = True
    receipt: MintReceipt


class NullifierStatusResponse(BaseModel):
    """Response for a nullifier lookup."""

    nullifier: str
    used: bool


class TierInfo(BaseModel):
    """Burn and mint amounts for one tier."""

    tier: MintTier
    large: bool
    burn_amount: int = Field(..., description="XFG atomic units burned")
    mint_amount: int = Field(..., description="HEAT base units minted")


# ============================================================================
# Claim Endpoints
# ============================================================================


@router.post("", response_model=ClaimResponse, status_code=status.HTTP_201_CREATED)
async def submit_claim(claim: Claim) -> ClaimResponse:
    """
    Submit a burn-proof claim.

    The nullifier is consumed as soon as the claim passes the shape checks,
    so a rejected proof cannot be resubmitted.
    """
    logger.info("claim_received", recipient=claim.recipient, large=claim.tier)

    receipt = await get_system().claims.submit_claim(claim)
    return ClaimResponse(receipt=receipt)


@router.get("/nullifiers/{nullifier}", response_model=NullifierStatusResponse)
async def get_nullifier_status(nullifier: str) -> NullifierStatusResponse:
    """Check whether a nullifier (0x hex or decimal) has been consumed."""
    try:
        value = int(nullifier, 16) if nullifier.lower().startswith("0x") else int(nullifier)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Nullifier must be a 0x hex string or a decimal integer",
        ) from e

    key = nullifier_key(value)
    used = await get_system().claims.is_nullifier_used(value)
    return NullifierStatusResponse(nullifier=key, used=used)


@router.get("/tiers", response_model=list[TierInfo])
async def list_tiers() -> list[TierInfo]:
    """List the admissible burn/mint pairings."""
    return [
        TierInfo(
            tier=tier,
            large=tier is MintTier.LARGE,
            burn_amount=tier.burn_amount,
            mint_amount=tier.mint_amount,
        )
        for tier in MintTier
    ]


@router.get("/stats")
async def get_stats() -> dict[str, Any]:
    """Claim, fee and supply counters."""
    return await get_system().stats()

"""
Token Routes
============

API endpoints for the HEAT fungible token interface.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from heat.auth import Caller, get_current_caller
from heat.core.accounts import normalize_account
from heat.logging import get_logger
from heat.system import get_system


logger = get_logger(__name__)
router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class BalanceResponse(BaseModel):
    """Balance of one account."""

    account: str
    balance: int


class SupplyResponse(BaseModel):
    """Token supply figures."""

    name: str
    symbol: str
    decimals: int
    total_supply: int
    total_burned: int
    max_supply: int
    remaining_mintable: int


class TransferRequest(BaseModel):
    """Move tokens from the caller."""

    recipient: str = Field(..., description="Destination account")
    amount: int = Field(..., description="Amount in base units")


class ApproveRequest(BaseModel):
    """Set an allowance from the caller."""

    spender: str = Field(..., description="Account allowed to spend")
    amount: int = Field(..., description="Allowance in base units")


class TokenActionResponse(BaseModel):
    """Result of a transfer or approval."""

    success: bool
    caller: str
    balance: int


# ============================================================================
# Read Endpoints
# ============================================================================


@router.get("/balances/{account}", response_model=BalanceResponse)
async def get_balance(account: str) -> BalanceResponse:
    """Balance of an account."""
    address = normalize_account(account, allow_zero=True)
    return BalanceResponse(account=address, balance=get_system().token.balance_of(address))


@router.get("/supply", response_model=SupplyResponse)
async def get_supply() -> SupplyResponse:
    """Total, burned and remaining mintable supply."""
    system = get_system()
    return SupplyResponse(
        name=system.token.name,
        symbol=system.token.symbol,
        decimals=system.token.decimals,
        total_supply=system.token.total_supply,
        total_burned=system.token.total_burned,
        max_supply=system.ledger.max_supply,
        remaining_mintable=system.ledger.remaining_mintable,
    )


# ============================================================================
# Mutating Endpoints
# ============================================================================


@router.post("/transfer", response_model=TokenActionResponse)
async def transfer(
    request: TransferRequest,
    caller: Annotated[Caller, Depends(get_current_caller)],
) -> TokenActionResponse:
    """Transfer from the authenticated caller."""
    token = get_system().token
    ok = await token.transfer(caller.address, request.recipient, request.amount)
    return TokenActionResponse(success=ok, caller=caller.address, balance=token.balance_of(caller.address))


@router.post("/approve", response_model=TokenActionResponse)
async def approve(
    request: ApproveRequest,
    caller: Annotated[Caller, Depends(get_current_caller)],
) -> TokenActionResponse:
    """Approve a spender for the authenticated caller."""
    token = get_system().token
    ok = await token.approve(caller.address, request.spender, request.amount)
    return TokenActionResponse(success=ok, caller=caller.address, balance=token.balance_of(caller.address))

"""
Fee Splitter
============

Collector-gated fee collection with a deterministic three-way split.

For a collected total ``T``:

    burn         = floor(T * 8 / 100)
    treasury     = floor(T * 2 / 100)
    distribution = T - burn - treasury

The distribution share absorbs the rounding remainder, so the shares
always add up to ``T`` exactly. The burn share is destroyed, the treasury
share moves to the treasury, and the distribution share stays with the
collected account for the external distribution process.

Version: 0.1.0
"""

from typing import Any

from pydantic import BaseModel, Field

from heat.constants import FEE_BURN_PERCENT, FEE_TREASURY_PERCENT
from heat.core.access import AccessControl, Role
from heat.core.accounts import normalize_account
from heat.core.events import EventStream, EventType
from heat.core.guard import TransactionGuard
from heat.errors import InsufficientBalance, InvalidAmount
from heat.ledger.token import HeatToken
from heat.logging import get_logger

logger = get_logger(__name__)


class FeeShares(BaseModel):
    """Split of a collected total."""

    total: int = Field(..., ge=0)
    burn: int = Field(..., ge=0)
    treasury: int = Field(..., ge=0)
    distribution: int = Field(..., ge=0)


def compute_shares(total: int) -> FeeShares:
    """
    Split ``total`` into burn / treasury / distribution shares.

    Raises:
        InvalidAmount: for negative or non-integer totals
    """
    if isinstance(total, bool) or not isinstance(total, int) or total < 0:
        raise InvalidAmount(f"Fee total must be a non-negative integer: {total!r}")

    burn = total * FEE_BURN_PERCENT // 100
    treasury = total * FEE_TREASURY_PERCENT // 100
    return FeeShares(
        total=total,
        burn=burn,
        treasury=treasury,
        distribution=total - burn - treasury,
    )


class FeeSplitter:
    """
    Applies fee splits to the ledger.

    Usage:
        splitter = FeeSplitter(token, access, guard, events)
        shares = await splitter.collect(collector, account, 1000)
        assert (shares.burn, shares.treasury, shares.distribution) == (80, 20, 900)
    """

    def __init__(
        self,
        token: HeatToken,
        access: AccessControl,
        guard: TransactionGuard,
        events: EventStream,
    ) -> None:
        self._token = token
        self._access = access
        self._guard = guard
        self._events = events

        self._total_collected_for_fees = 0
        self._total_burned_for_fees = 0
        self._total_distributed_for_fees = 0
        self._total_burned_by_treasury = 0

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def total_collected_for_fees(self) -> int:
        return self._total_collected_for_fees

    @property
    def total_burned_for_fees(self) -> int:
        return self._total_burned_for_fees

    @property
    def total_distributed_for_fees(self) -> int:
        return self._total_distributed_for_fees

    @property
    def total_burned_by_treasury(self) -> int:
        return self._total_burned_by_treasury

    def stats(self) -> dict[str, Any]:
        """Aggregate fee counters."""
        return {
            "total_collected_for_fees": self._total_collected_for_fees,
            "total_burned_for_fees": self._total_burned_for_fees,
            "total_distributed_for_fees": self._total_distributed_for_fees,
            "total_burned_by_treasury": self._total_burned_by_treasury,
            "total_burned": self._token.total_burned,
            "treasury": self._access.holder(Role.TREASURY),
            "treasury_balance": self._token.balance_of(self._access.holder(Role.TREASURY)),
        }

    # =========================================================================
    # Collection
    # =========================================================================

    async def collect(self, caller: str, account: str, total: int) -> FeeShares:
        """
        Collect ``total`` from ``account`` (collector only).

        Raises:
            SystemHalted, Unauthorized, InvalidAmount, InsufficientBalance
        """
        async with self._guard.transaction("collect"):
            self._access.ensure_active()
            self._access.require(Role.COLLECTOR, caller)
            return self._apply_collection(account, total, spender=None)

    async def collect_from(self, caller: str, account: str, spender: str, total: int) -> FeeShares:
        """
        Collect ``total`` from ``account`` against ``spender``'s allowance.

        The allowance is checked and consumed in full before the split.

        Raises:
            SystemHalted, Unauthorized, InvalidAmount, InsufficientAllowance,
            InsufficientBalance
        """
        async with self._guard.transaction("collect_from"):
            self._access.ensure_active()
            self._access.require(Role.COLLECTOR, caller)

            ledger = self._token.ledger
            ledger.check_allowance(account, spender, total)
            self._check_balance(account, total)
            ledger.spend_allowance(account, spender, total)
            return self._apply_collection(account, total, spender=normalize_account(spender))

    async def burn_from_treasury(self, caller: str, amount: int) -> int:
        """
        Burn ``amount`` from the treasury's own balance (treasury only).

        Returns:
            The new total supply.
        """
        async with self._guard.transaction("burn_from_treasury"):
            self._access.ensure_active()
            treasury = self._access.require(Role.TREASURY, caller)

            new_supply = self._token.apply_burn(treasury, amount, reason="treasury")
            self._total_burned_by_treasury += amount

            self._events.emit(
                EventType.TREASURY_BURNED,
                treasury=treasury,
                amount=amount,
                total_burned_by_treasury=self._total_burned_by_treasury,
            )
            return new_supply

    def _check_balance(self, account: str, total: int) -> None:
        balance = self._token.balance_of(account)
        if balance < total:
            raise InsufficientBalance(
                "Collection exceeds account balance",
                account=account,
                balance=balance,
                amount=total,
            )

    def _apply_collection(self, account: str, total: int, spender: str | None) -> FeeShares:
        """Split and apply; all checks happen before the first mutation."""
        account = normalize_account(account)
        shares = compute_shares(total)
        self._check_balance(account, total)
        treasury = self._access.holder(Role.TREASURY)

        self._token.apply_burn(account, shares.burn, reason="fees")
        self._token.apply_transfer(account, treasury, shares.treasury)

        self._total_collected_for_fees += shares.total
        self._total_burned_for_fees += shares.burn
        self._total_distributed_for_fees += shares.distribution

        self._events.emit(
            EventType.FEES_COLLECTED,
            account=account,
            spender=spender,
            treasury=treasury,
            total=shares.total,
            burn=shares.burn,
            treasury_share=shares.treasury,
            distribution=shares.distribution,
        )
        logger.debug(
            "fee_split_applied",
            account=account,
            burn=shares.burn,
            treasury_share=shares.treasury,
            distribution=shares.distribution,
        )
        return shares

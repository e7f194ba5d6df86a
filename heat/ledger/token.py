"""
HEAT Token
==========

Standard fungible-balance interface over the ``Ledger``.

Every public mutating call is halt-gated, runs inside the shared
``TransactionGuard`` and emits a record on the event stream. The
``apply_*`` methods perform the same ledger update and record without
taking the guard; they exist for components (claim processor, fee
splitter) that already hold it.

Version: 0.1.0
"""

from heat.constants import HEAT_DECIMALS
from heat.core.access import AccessControl, Role
from heat.core.accounts import normalize_account
from heat.core.events import EventStream, EventType
from heat.core.guard import TransactionGuard
from heat.ledger.ledger import Ledger
from heat.logging import get_logger

logger = get_logger(__name__)


class HeatToken:
    """
    HEAT fungible token.

    Usage:
        token = HeatToken(ledger, access, guard, events)
        await token.transfer(caller="0xabc...", recipient="0xdef...", amount=10**18)
        token.balance_of("0xdef...")
    """

    name = "Fuego HEAT"
    symbol = "HEAT"
    decimals = HEAT_DECIMALS

    def __init__(
        self,
        ledger: Ledger,
        access: AccessControl,
        guard: TransactionGuard,
        events: EventStream,
    ) -> None:
        self._ledger = ledger
        self._access = access
        self._guard = guard
        self._events = events

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def total_supply(self) -> int:
        return self._ledger.total_supply

    @property
    def total_burned(self) -> int:
        return self._ledger.total_burned

    def balance_of(self, account: str) -> int:
        return self._ledger.balance_of(account)

    def allowance(self, owner: str, spender: str) -> int:
        return self._ledger.allowance(owner, spender)

    # =========================================================================
    # Public mutating interface
    # =========================================================================

    async def transfer(self, caller: str, recipient: str, amount: int) -> bool:
        """Move ``amount`` from the caller to ``recipient``."""
        async with self._guard.transaction("transfer"):
            self._access.ensure_active()
            self.apply_transfer(caller, recipient, amount)
            return True

    async def approve(self, caller: str, spender: str, amount: int) -> bool:
        """Allow ``spender`` to move up to ``amount`` of the caller's balance."""
        async with self._guard.transaction("approve"):
            self._access.ensure_active()
            self._ledger.approve_internal(caller, spender, amount)
            self._events.emit(
                EventType.APPROVAL,
                owner=normalize_account(caller),
                spender=normalize_account(spender),
                amount=amount,
            )
            return True

    async def transfer_from(self, caller: str, owner: str, recipient: str, amount: int) -> bool:
        """Move ``amount`` from ``owner`` to ``recipient`` using the caller's allowance."""
        async with self._guard.transaction("transfer_from"):
            self._access.ensure_active()
            owner = normalize_account(owner)
            caller = normalize_account(caller)
            # Allowance is checked first and spent only once the transfer applied
            self._ledger.check_allowance(owner, caller, amount)
            self.apply_transfer(owner, recipient, amount)
            self._ledger.spend_allowance(owner, caller, amount)
            return True

    async def burn(self, caller: str, amount: int) -> int:
        """Destroy ``amount`` of the caller's own balance."""
        async with self._guard.transaction("burn"):
            self._access.ensure_active()
            return self.apply_burn(caller, amount)

    async def mint(self, caller: str, account: str, amount: int) -> int:
        """Mint new units (minter only)."""
        async with self._guard.transaction("mint"):
            self._access.ensure_active()
            return self.apply_mint(caller, account, amount)

    # =========================================================================
    # Unguarded primitives (caller holds the transaction guard)
    # =========================================================================

    def apply_mint(self, caller: str, account: str, amount: int) -> int:
        """Mint with a minter check and a ``minted`` record."""
        self._access.require(Role.MINTER, caller)
        new_supply = self._ledger.mint(account, amount)
        self._events.emit(
            EventType.MINTED,
            account=normalize_account(account),
            amount=amount,
            total_supply=new_supply,
        )
        return new_supply

    def apply_burn(self, account: str, amount: int, reason: str = "holder") -> int:
        """Burn with a ``burned`` record."""
        new_supply = self._ledger.burn(account, amount)
        self._events.emit(
            EventType.BURNED,
            account=normalize_account(account),
            amount=amount,
            reason=reason,
            total_supply=new_supply,
        )
        return new_supply

    def apply_transfer(self, sender: str, recipient: str, amount: int) -> None:
        """Transfer with a ``transfer`` record."""
        self._ledger.transfer_internal(sender, recipient, amount)
        self._events.emit(
            EventType.TRANSFER,
            sender=normalize_account(sender),
            recipient=normalize_account(recipient),
            amount=amount,
        )

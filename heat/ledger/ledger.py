"""
Ledger
======

Balances, allowances, total supply and the backstop ceiling.

The ledger is a pure in-memory state holder: every primitive validates
completely before it mutates anything, so a failed call leaves no trace and
``total_supply == sum(balances)`` holds after every call. Serialization,
halt gating and event emission belong to the callers (``HeatToken``,
``ClaimProcessor``, ``FeeSplitter``).

Version: 0.1.0
"""

from heat.constants import MAX_SUPPLY
from heat.core.accounts import normalize_account
from heat.errors import (
    InsufficientAllowance,
    InsufficientBalance,
    InvalidAmount,
    SupplyCeilingExceeded,
    ZeroAmount,
)


def _check_amount(amount: int) -> int:
    """Reject non-integer and negative amounts."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmount(f"Amount must be an integer, got {type(amount).__name__}")
    if amount < 0:
        raise InvalidAmount(f"Amount must not be negative: {amount}", amount=amount)
    return amount


class Ledger:
    """
    Fungible balance ledger with a supply ceiling.

    Usage:
        ledger = Ledger()
        ledger.mint("0xabc...", 8_000_000 * 10**18)
        ledger.transfer_internal("0xabc...", "0xdef...", 10**18)
        ledger.burn("0xdef...", 10**18)
    """

    def __init__(self, max_supply: int = MAX_SUPPLY) -> None:
        self._max_supply = _check_amount(max_supply)
        self._balances: dict[str, int] = {}
        self._allowances: dict[tuple[str, str], int] = {}
        self._total_supply = 0
        self._total_burned = 0

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def total_supply(self) -> int:
        return self._total_supply

    @property
    def total_burned(self) -> int:
        return self._total_burned

    @property
    def max_supply(self) -> int:
        return self._max_supply

    @property
    def remaining_mintable(self) -> int:
        """Units that can still be minted before the ceiling."""
        return self._max_supply - self._total_supply

    def balance_of(self, account: str) -> int:
        return self._balances.get(normalize_account(account, allow_zero=True), 0)

    def allowance(self, owner: str, spender: str) -> int:
        key = (normalize_account(owner, allow_zero=True), normalize_account(spender, allow_zero=True))
        return self._allowances.get(key, 0)

    def holder_count(self) -> int:
        """Number of accounts with a non-zero balance."""
        return sum(1 for balance in self._balances.values() if balance > 0)

    def check_invariant(self) -> bool:
        """Verify supply accounting against the individual balances."""
        return (
            sum(self._balances.values()) == self._total_supply
            and self._total_supply <= self._max_supply
            and all(balance >= 0 for balance in self._balances.values())
        )

    # =========================================================================
    # Supply primitives
    # =========================================================================

    def mint(self, account: str, amount: int) -> int:
        """
        Credit ``amount`` new units to ``account``.

        Returns:
            The new total supply.

        Raises:
            InvalidAccount: zero or malformed account.
            ZeroAmount: amount is 0.
            SupplyCeilingExceeded: supply would pass the ceiling.
        """
        account = normalize_account(account)
        _check_amount(amount)
        if amount == 0:
            raise ZeroAmount("Cannot mint zero units")

        new_supply = self._total_supply + amount
        if new_supply > self._max_supply:
            raise SupplyCeilingExceeded(
                "Mint would exceed the supply ceiling",
                amount=amount,
                total_supply=self._total_supply,
                max_supply=self._max_supply,
            )

        self._balances[account] = self._balances.get(account, 0) + amount
        self._total_supply = new_supply
        return new_supply

    def burn(self, account: str, amount: int) -> int:
        """
        Destroy ``amount`` units held by ``account``.

        Returns:
            The new total supply.
        """
        account = normalize_account(account)
        _check_amount(amount)
        balance = self._balances.get(account, 0)
        if balance < amount:
            raise InsufficientBalance(
                "Burn amount exceeds balance",
                account=account,
                balance=balance,
                amount=amount,
            )

        self._balances[account] = balance - amount
        self._total_supply -= amount
        self._total_burned += amount
        return self._total_supply

    def transfer_internal(self, sender: str, recipient: str, amount: int) -> None:
        """Move ``amount`` from ``sender`` to ``recipient``; supply unchanged."""
        sender = normalize_account(sender)
        recipient = normalize_account(recipient)
        _check_amount(amount)
        balance = self._balances.get(sender, 0)
        if balance < amount:
            raise InsufficientBalance(
                "Transfer amount exceeds balance",
                account=sender,
                balance=balance,
                amount=amount,
            )

        self._balances[sender] = balance - amount
        self._balances[recipient] = self._balances.get(recipient, 0) + amount

    # =========================================================================
    # Allowances
    # =========================================================================

    def approve_internal(self, owner: str, spender: str, amount: int) -> None:
        """Set the allowance of ``spender`` over ``owner``'s balance."""
        key = (normalize_account(owner), normalize_account(spender))
        self._allowances[key] = _check_amount(amount)

    def check_allowance(self, owner: str, spender: str, amount: int) -> None:
        """Raise InsufficientAllowance unless ``spender`` may move ``amount``."""
        _check_amount(amount)
        current = self.allowance(owner, spender)
        if current < amount:
            raise InsufficientAllowance(
                "Amount exceeds allowance",
                owner=owner,
                spender=spender,
                allowance=current,
                amount=amount,
            )

    def spend_allowance(self, owner: str, spender: str, amount: int) -> None:
        """Consume ``amount`` of the allowance."""
        self.check_allowance(owner, spender, amount)
        key = (normalize_account(owner), normalize_account(spender))
        self._allowances[key] -= amount

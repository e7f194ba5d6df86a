"""
Account Identifiers
===================

Accounts are EVM addresses. They are normalized to checksum form so that
balances, allowances and role holders never split across spellings of the
same address. The zero address is the null account.
"""

from web3 import Web3

from heat.config import ZERO_ADDRESS
from heat.errors import InvalidAccount


def is_zero_account(account: str | None) -> bool:
    """Return True for a missing or zero account."""
    if not account:
        return True
    try:
        return int(account, 16) == 0
    except ValueError:
        return False


def normalize_account(account: str | None, *, allow_zero: bool = False) -> str:
    """
    Validate an account address and return its checksum form.

    Raises:
        InvalidAccount: for malformed addresses, or for the zero address
            unless ``allow_zero`` is set.
    """
    if account is None or not Web3.is_address(account):
        raise InvalidAccount(f"Not an account address: {account!r}", account=account)
    if is_zero_account(account) and not allow_zero:
        raise InvalidAccount("Zero account is not allowed", account=account)
    return Web3.to_checksum_address(account)


__all__ = ["ZERO_ADDRESS", "is_zero_account", "normalize_account"]

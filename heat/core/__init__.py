"""
Core Module
===========

Cross-cutting machinery used by every mutating entry point:

- accounts: address validation and normalization
- guard: serialized, non-reentrant transactions
- access: role capability table and system state
- events: hash-chained authorization record stream
- hashing: keccak commitments shared with the proof circuit
"""

from heat.core.access import AccessControl, Role, SystemState
from heat.core.accounts import ZERO_ADDRESS, is_zero_account, normalize_account
from heat.core.events import EventRecord, EventStream, EventType
from heat.core.guard import TransactionGuard
from heat.core.hashing import claim_hash, recipient_hash, to_bytes32

__all__ = [
    "AccessControl",
    "Role",
    "SystemState",
    "ZERO_ADDRESS",
    "is_zero_account",
    "normalize_account",
    "EventRecord",
    "EventStream",
    "EventType",
    "TransactionGuard",
    "claim_hash",
    "recipient_hash",
    "to_bytes32",
]

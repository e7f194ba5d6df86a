"""
Nullifier Module
================

Replay protection for burn proofs.

Usage:
    from heat.nullifiers import InMemoryNullifierStore, NullifierStatus

    store = InMemoryNullifierStore()
    status = await store.check_and_mark(nullifier)
    if status == NullifierStatus.ALREADY_USED:
        ...
"""

from heat.nullifiers.redis_store import RedisNullifierStore
from heat.nullifiers.store import (
    InMemoryNullifierStore,
    NullifierStatus,
    NullifierStore,
    nullifier_key,
)

__all__ = [
    "NullifierStore",
    "NullifierStatus",
    "InMemoryNullifierStore",
    "RedisNullifierStore",
    "nullifier_key",
]

"""
Transaction Guard
=================

Serializes every state-mutating operation of the core and rejects
re-entry.

One ``asyncio.Lock`` is held for the whole duration of a public mutating
operation, so independent callers queue up and never observe a partially
applied update. A context variable marks the code running inside a
transaction; it is inherited by tasks and threads started from that code
(``asyncio.create_task``, ``asyncio.to_thread``), so a verifier callback
that tries to call back into the core is rejected with ``ReentrantCall``
instead of deadlocking on the lock.

The inherited marker only counts while the transaction it names still holds
the guard. A task that outlives the operation that spawned it is an
ordinary caller again.

Usage:
    guard = TransactionGuard()

    async with guard.transaction("submit_claim"):
        ...
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from contextvars import ContextVar

from heat.errors import ReentrantCall
from heat.logging import get_logger

logger = get_logger(__name__)


class _Transaction:
    """Marker for one running transaction."""

    __slots__ = ("operation",)

    def __init__(self, operation: str) -> None:
        self.operation = operation


_active_transaction: ContextVar[_Transaction | None] = ContextVar(
    "heat_active_transaction", default=None
)


class TransactionGuard:
    """Mutual-exclusion lock shared by all mutating entry points."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._transaction: _Transaction | None = None

    @property
    def locked(self) -> bool:
        """Whether a transaction is in progress."""
        return self._lock.locked()

    @property
    def current_operation(self) -> str | None:
        """Name of the operation holding the lock, if any."""
        return self._transaction.operation if self._transaction else None

    @asynccontextmanager
    async def transaction(self, operation: str) -> AsyncIterator[None]:
        """
        Hold the lock for one operation.

        Raises:
            ReentrantCall: if called from inside a transaction of this guard
                that is still running.
        """
        inherited = _active_transaction.get()
        if inherited is not None and inherited is self._transaction:
            logger.warning(
                "reentrant_call_rejected",
                operation=operation,
                outer=inherited.operation,
            )
            raise ReentrantCall(
                f"{operation} called while {inherited.operation} is in progress",
                operation=operation,
                outer=inherited.operation,
            )

        async with self._lock:
            current = _Transaction(operation)
            token = _active_transaction.set(current)
            self._transaction = current
            try:
                yield
            finally:
                self._transaction = None
                _active_transaction.reset(token)

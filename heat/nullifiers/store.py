"""
Nullifier Store
===============

Append-only set of consumed burn-proof nullifiers.

A nullifier moves from unseen to consumed exactly once and never back.
``check_and_mark`` performs the lookup and the insert as one indivisible
step, so two racing claims with the same nullifier can never both observe
``NEWLY_MARKED``.

Version: 0.1.0
"""

import asyncio
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from heat.constants import UINT256_LIMIT
from heat.errors import InvalidPublicInputs
from heat.logging import get_logger

logger = get_logger(__name__)


class NullifierStatus(str, Enum):
    """Outcome of a check-and-mark."""

    ALREADY_USED = "already_used"
    NEWLY_MARKED = "newly_marked"


def nullifier_key(nullifier: int) -> str:
    """Canonical bytes32 hex form of a nullifier."""
    if isinstance(nullifier, bool) or not isinstance(nullifier, int):
        raise InvalidPublicInputs(f"Nullifier must be an integer, got {type(nullifier).__name__}")
    if not 0 <= nullifier < UINT256_LIMIT:
        raise InvalidPublicInputs("Nullifier is not a bytes32 value")
    return "0x" + format(nullifier, "064x")


class NullifierStore(ABC):
    """Abstract base class for nullifier stores."""

    @abstractmethod
    async def check_and_mark(self, nullifier: int) -> NullifierStatus:
        """Atomically mark a nullifier, reporting whether it was already used."""
        ...

    @abstractmethod
    async def is_used(self, nullifier: int) -> bool:
        """Check whether a nullifier has been consumed."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Number of consumed nullifiers."""
        ...

    async def health_check(self) -> dict[str, Any]:
        """Report store health."""
        return {"status": "healthy", "backend": type(self).__name__}


class InMemoryNullifierStore(NullifierStore):
    """
    Process-local nullifier set.

    Suitable for a single worker; data is lost on restart.
    """

    def __init__(self) -> None:
        self._used: set[str] = set()
        self._lock = asyncio.Lock()

    async def check_and_mark(self, nullifier: int) -> NullifierStatus:
        key = nullifier_key(nullifier)
        async with self._lock:
            if key in self._used:
                return NullifierStatus.ALREADY_USED
            self._used.add(key)

        logger.debug("nullifier_marked", nullifier=key)
        return NullifierStatus.NEWLY_MARKED

    async def is_used(self, nullifier: int) -> bool:
        return nullifier_key(nullifier) in self._used

    async def count(self) -> int:
        return len(self._used)

    async def health_check(self) -> dict[str, Any]:
        return {
            "status": "healthy",
            "backend": "memory",
            "nullifiers": len(self._used),
        }

"""
Redis Nullifier Store
=====================

Nullifier set shared by several worker processes.

``SET key value NX`` is a single atomic Redis command: exactly one of any
number of concurrent writers creates the key, which is the check-and-mark
transaction. Keys are written without expiry.

Version: 0.1.0
"""

from datetime import UTC, datetime
from typing import Any

from redis.asyncio import Redis

from heat.config import settings
from heat.database import RedisClient
from heat.logging import get_logger
from heat.nullifiers.store import NullifierStatus, NullifierStore, nullifier_key

logger = get_logger(__name__)


class RedisNullifierStore(NullifierStore):
    """Nullifier store backed by Redis keys ``<prefix><bytes32 hex>``."""

    def __init__(
        self,
        client: Redis | None = None,  # type: ignore[type-arg]
        key_prefix: str | None = None,
    ) -> None:
        self._client = client
        self._prefix = key_prefix if key_prefix is not None else settings.nullifiers.key_prefix

    @property
    def client(self) -> Redis:  # type: ignore[type-arg]
        if self._client is None:
            self._client = RedisClient.get_client()
        return self._client

    def _key(self, nullifier: int) -> str:
        return f"{self._prefix}{nullifier_key(nullifier)}"

    async def check_and_mark(self, nullifier: int) -> NullifierStatus:
        key = self._key(nullifier)
        created = await self.client.set(key, datetime.now(UTC).isoformat(), nx=True)
        if not created:
            return NullifierStatus.ALREADY_USED

        logger.debug("nullifier_marked", key=key)
        return NullifierStatus.NEWLY_MARKED

    async def is_used(self, nullifier: int) -> bool:
        return await self.client.exists(self._key(nullifier)) > 0

    async def count(self) -> int:
        total = 0
        async for _ in self.client.scan_iter(match=f"{self._prefix}*"):
            total += 1
        return total

    async def health_check(self) -> dict[str, Any]:
        try:
            pong = await self.client.ping()
        except Exception as e:
            logger.error("nullifier_store_unhealthy", error=str(e))
            return {"status": "unhealthy", "backend": "redis", "error": str(e)}
        return {"status": "healthy" if pong else "unhealthy", "backend": "redis"}

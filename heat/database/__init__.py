"""
Database Module
===============

Async clients for external data stores.

Clients:
- Redis (redis.asyncio)

Usage:
    from heat.database import RedisClient

    client = RedisClient.get_client()
"""

from heat.database.redis import RedisClient


__all__ = [
    "RedisClient",
]

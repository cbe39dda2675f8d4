# src/cache/redis_store.py - v2
"""Redis-based cache store (CACHE_BACKEND=redis).

Suitable for multi-instance deployments. Keys are flat
``<prefix><fingerprint>`` strings holding the annotated HTML as-is.
"""

from __future__ import annotations

import logging

import redis.asyncio as redis

from redflags.cache.base_cache_store import BaseCacheStore

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "redflags:"


class RedisCacheStore(BaseCacheStore):
    """Redis-backed cache store for distributed deployments."""

    def __init__(
        self,
        redis_url: str | None = None,
        key_prefix: str = DEFAULT_KEY_PREFIX,
        client: redis.Redis | None = None,
    ) -> None:
        if client is None:
            if not redis_url:
                raise ValueError("redis_url or client is required")
            client = redis.Redis.from_url(redis_url, decode_responses=True)
        self._client = client
        self._prefix = key_prefix

    async def get(self, key: str) -> str | None:
        """Retrieve cached value by key."""
        value = await self._client.get(self._redis_key(key))
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    async def put(self, key: str, value: str) -> None:
        """Store a value."""
        await self._client.set(self._redis_key(key), value)

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._client.aclose()

    @property
    def backend_name(self) -> str:
        return "redis"

    def _redis_key(self, key: str) -> str:
        return f"{self._prefix}{key}"

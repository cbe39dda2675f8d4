# src/cache/cache_factory.py - v3
"""Factory for cache store instantiation from CACHE_BACKEND."""

from __future__ import annotations

import logging

from redflags.cache.base_cache_store import BaseCacheStore
from redflags.config.settings import Settings

logger = logging.getLogger(__name__)


def create_cache_store(settings: Settings | None = None) -> BaseCacheStore:
    """Instantiate the configured cache backend.

    Args:
        settings: Application settings. Defaults to the in-memory backend.

    Returns:
        Configured BaseCacheStore implementation.

    Raises:
        ValueError: If the backend is unknown or lacks required settings.
    """
    backend = "memory" if settings is None else settings.cache_backend
    logger.debug("Creating cache store: backend=%s", backend)

    if backend == "memory":
        from redflags.cache.memory_store import MemoryCacheStore
        return MemoryCacheStore()

    if backend == "json":
        from redflags.cache.json_store import JsonCacheStore
        return JsonCacheStore(cache_root=settings.cache_root)

    if backend == "sqlite":
        from redflags.cache.sqlite_store import SqliteCacheStore
        db_path = settings.cache_root.expanduser() / "redflags_cache.db"
        return SqliteCacheStore(db_path=db_path)

    if backend == "redis":
        from redflags.cache.redis_store import RedisCacheStore
        if not settings.cache_redis_url:
            raise ValueError(
                "CACHE_REDIS_URL must be set when CACHE_BACKEND=redis"
            )
        return RedisCacheStore(
            redis_url=settings.cache_redis_url,
            key_prefix=settings.cache_key_prefix,
        )

    raise ValueError(f"Unsupported cache backend: {backend!r}")

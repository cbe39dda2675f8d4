# src/cache/base_cache_store.py - v2
"""Abstract cache store interface.

Maps a fingerprint to previously produced annotated HTML. Stores define no
expiry, eviction or capacity bound; whatever the backend enforces is opaque
to callers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseCacheStore(ABC):
    """Unified interface for cache storage backends."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value for ``key``, or None on a miss."""

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, overwriting any previous value."""

    async def close(self) -> None:
        """Release backend resources."""
        return None

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """Backend identifier (memory, json, sqlite, redis)."""

# src/cache/memory_store.py - v1
"""In-process cache store (default CACHE_BACKEND=memory).

Entries live for the lifetime of the process.
"""

from __future__ import annotations

from redflags.cache.base_cache_store import BaseCacheStore


class MemoryCacheStore(BaseCacheStore):
    """Dict-backed cache store."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._entries.get(key)

    async def put(self, key: str, value: str) -> None:
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def backend_name(self) -> str:
        return "memory"

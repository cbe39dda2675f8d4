# src/cache/json_store.py - v2
"""JSON file-based cache store (CACHE_BACKEND=json).

Stores each entry as an individual JSON file under CACHE_ROOT, named after
the fingerprint.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from pathlib import Path

from pydantic import ValidationError

from redflags.cache.base_cache_store import BaseCacheStore
from redflags.cache.models import CacheEntry

logger = logging.getLogger(__name__)


class JsonCacheStore(BaseCacheStore):
    """File-based cache store using JSON files."""

    def __init__(self, cache_root: Path | str) -> None:
        self._root = Path(cache_root).expanduser()
        self._root.mkdir(parents=True, exist_ok=True)

    async def get(self, key: str) -> str | None:
        """Retrieve cached value by key."""
        return await asyncio.to_thread(self._read, key)

    async def put(self, key: str, value: str) -> None:
        """Store a value."""
        entry = CacheEntry(key=key, value=value)
        await asyncio.to_thread(self._write, entry)

    @property
    def backend_name(self) -> str:
        return "json"

    def _read(self, key: str) -> str | None:
        path = self._entry_path(key)
        if not path.exists():
            return None
        try:
            return CacheEntry.model_validate_json(path.read_text(encoding="utf-8")).value
        except ValidationError as e:
            logger.warning("Failed to read cache entry %s: %s", key, e)
            return None

    def _write(self, entry: CacheEntry) -> None:
        path = self._entry_path(entry.key)
        tmp = path.with_name(f"{path.stem}.{uuid.uuid4().hex}.tmp")
        tmp.write_text(entry.model_dump_json(indent=2), encoding="utf-8")
        tmp.replace(path)

    def _entry_path(self, key: str) -> Path:
        """Return file path for a cache key."""
        safe_key = key.replace("/", "_").replace("\\", "_")
        return self._root / f"{safe_key}.json"

# src/cache/sqlite_store.py - v2
"""SQLite-based cache store (CACHE_BACKEND=sqlite).

Uses stdlib sqlite3, no external dependency. One flat table of
fingerprint -> annotated HTML rows.
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from pathlib import Path

from redflags.cache.base_cache_store import BaseCacheStore

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS cache_entries (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    created_at TEXT DEFAULT CURRENT_TIMESTAMP
);
"""


class SqliteCacheStore(BaseCacheStore):
    """SQLite-backed cache store."""

    def __init__(self, db_path: Path | str) -> None:
        self._db_path = Path(db_path).expanduser()
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.executescript(_SCHEMA)
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> str | None:
        """Retrieve cached value by key."""
        async with self._lock:
            return await asyncio.to_thread(self._select, key)

    async def put(self, key: str, value: str) -> None:
        """Store a value (upsert)."""
        async with self._lock:
            await asyncio.to_thread(self._upsert, key, value)

    async def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    @property
    def backend_name(self) -> str:
        return "sqlite"

    def _select(self, key: str) -> str | None:
        cursor = self._conn.execute(
            "SELECT value FROM cache_entries WHERE key = ?", (key,)
        )
        row = cursor.fetchone()
        return None if row is None else row[0]

    def _upsert(self, key: str, value: str) -> None:
        self._conn.execute(
            "INSERT OR REPLACE INTO cache_entries (key, value) VALUES (?, ?)",
            (key, value),
        )
        self._conn.commit()

# tests/unit/cache/test_unit_sqlite_store.py - v2
"""Tests for cache/sqlite_store.py - full functional tests (stdlib sqlite3)."""

from __future__ import annotations

import sqlite3

import pytest

from redflags.cache.sqlite_store import SqliteCacheStore


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test_cache.db"


class TestSqliteCacheStore:
    @pytest.mark.asyncio
    async def test_put_and_get(self, db_path):
        store = SqliteCacheStore(db_path=db_path)
        await store.put("key1", "<p>annotated</p>")
        assert await store.get("key1") == "<p>annotated</p>"
        await store.close()

    @pytest.mark.asyncio
    async def test_get_missing(self, db_path):
        store = SqliteCacheStore(db_path=db_path)
        assert await store.get("nonexistent") is None
        await store.close()

    @pytest.mark.asyncio
    async def test_overwrite(self, db_path):
        store = SqliteCacheStore(db_path=db_path)
        await store.put("key1", "first")
        await store.put("key1", "second")
        assert await store.get("key1") == "second"
        await store.close()

    @pytest.mark.asyncio
    async def test_persists_across_connections(self, db_path):
        store = SqliteCacheStore(db_path=db_path)
        await store.put("key1", "value")
        await store.close()

        reopened = SqliteCacheStore(db_path=db_path)
        assert await reopened.get("key1") == "value"
        await reopened.close()

    @pytest.mark.asyncio
    async def test_flat_table_layout(self, db_path):
        store = SqliteCacheStore(db_path=db_path)
        await store.put("key1", "value")
        await store.close()

        conn = sqlite3.connect(str(db_path))
        rows = conn.execute("SELECT key, value FROM cache_entries").fetchall()
        conn.close()
        assert rows == [("key1", "value")]

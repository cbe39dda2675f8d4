# tests/unit/cache/test_unit_json_store.py - v1
"""Tests for cache/json_store.py - file-per-key JSON store."""

from __future__ import annotations

import asyncio
import json

import pytest

from redflags.cache.fingerprint import compute_fingerprint
from redflags.cache.json_store import JsonCacheStore


class TestJsonCacheStore:
    @pytest.mark.asyncio
    async def test_put_and_get(self, tmp_path):
        store = JsonCacheStore(cache_root=tmp_path)
        key = compute_fingerprint("<p>x</p>")
        await store.put(key, "<p><span>x</span></p>")
        assert await store.get(key) == "<p><span>x</span></p>"

    @pytest.mark.asyncio
    async def test_get_missing(self, tmp_path):
        store = JsonCacheStore(cache_root=tmp_path)
        assert await store.get("nonexistent") is None

    @pytest.mark.asyncio
    async def test_persists_across_instances(self, tmp_path):
        await JsonCacheStore(cache_root=tmp_path).put("key1", "value")
        assert await JsonCacheStore(cache_root=tmp_path).get("key1") == "value"

    @pytest.mark.asyncio
    async def test_file_layout(self, tmp_path):
        store = JsonCacheStore(cache_root=tmp_path)
        await store.put("key1", "value")
        data = json.loads((tmp_path / "key1.json").read_text(encoding="utf-8"))
        assert data["key"] == "key1"
        assert data["value"] == "value"
        assert not list(tmp_path.glob("*.tmp"))

    @pytest.mark.asyncio
    async def test_concurrent_puts_same_key(self, tmp_path):
        store = JsonCacheStore(cache_root=tmp_path)
        values = [f"<p>annotation {i}</p>" for i in range(20)]
        results = await asyncio.gather(
            *(store.put("key1", v) for v in values), return_exceptions=True
        )
        assert [r for r in results if isinstance(r, Exception)] == []
        assert await store.get("key1") in values
        assert not list(tmp_path.glob("*.tmp"))

    @pytest.mark.asyncio
    async def test_corrupt_entry_is_a_miss(self, tmp_path):
        (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
        store = JsonCacheStore(cache_root=tmp_path)
        assert await store.get("bad") is None

    @pytest.mark.asyncio
    async def test_key_sanitized(self, tmp_path):
        store = JsonCacheStore(cache_root=tmp_path)
        await store.put("a/b", "value")
        assert (tmp_path / "a_b.json").exists()
        assert await store.get("a/b") == "value"

    def test_creates_root(self, tmp_path):
        root = tmp_path / "nested" / "cache"
        JsonCacheStore(cache_root=root)
        assert root.is_dir()

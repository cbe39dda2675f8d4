# src/cache/models.py - v2
"""Cache domain model: CacheEntry as persisted by file-based stores."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class CacheEntry(BaseModel):
    """Single cache entry linking a fingerprint to annotated HTML."""

    key: str
    value: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

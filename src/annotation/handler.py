# src/annotation/handler.py - v1
"""Request handler: fingerprint, cache lookup, annotate on miss, populate.

States: received -> validated -> (cache-hit | cache-miss) -> (responded |
errored). Concurrent first requests for the same input may both miss and
both call the model; no de-duplication is attempted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from redflags.annotation.models import (
    Annotated,
    AnnotationResult,
    FailureReason,
    Rejected,
)
from redflags.annotation.requester import AnnotationRequester
from redflags.cache.base_cache_store import BaseCacheStore
from redflags.cache.fingerprint import compute_fingerprint
from redflags.logging.context import set_fingerprint_context

logger = logging.getLogger(__name__)


class AnnotationHandler:
    """Orchestrates one annotation request against explicit collaborators."""

    def __init__(self, cache: BaseCacheStore, requester: AnnotationRequester) -> None:
        self._cache = cache
        self._requester = requester

    @property
    def cache(self) -> BaseCacheStore:
        return self._cache

    async def handle(self, payload: Any) -> AnnotationResult:
        """Handle a decoded request body.

        A body that is not an object, or whose ``html`` member is missing or
        not a string, is rejected with ``FailureReason.NO_HTML``.
        """
        if not isinstance(payload, Mapping):
            logger.info("Rejected request: body is not an object")
            return Rejected(reason=FailureReason.NO_HTML)
        html = payload.get("html")
        if not isinstance(html, str):
            logger.info("Rejected request: no html field")
            return Rejected(reason=FailureReason.NO_HTML)
        return await self.annotate(html)

    async def annotate(self, html: str) -> AnnotationResult:
        """Annotate validated HTML, serving from cache when possible.

        Cache read failures propagate. A failing cache write is logged and
        the fresh annotation is returned anyway.
        """
        fingerprint = compute_fingerprint(html)
        set_fingerprint_context(fingerprint)

        cached = await self._cache.get(fingerprint)
        if cached is not None:
            logger.info("Cache hit")
            return Annotated(html=cached, fingerprint=fingerprint, cache_hit=True)

        logger.info("Cache miss, requesting annotation (%d chars)", len(html))
        try:
            annotated = await self._requester.request(html)
        except Exception:
            logger.exception("Annotation request failed")
            return Rejected(reason=FailureReason.NO_CONTENT, fingerprint=fingerprint)

        if not annotated:
            logger.warning("Annotation response had no content")
            return Rejected(reason=FailureReason.NO_CONTENT, fingerprint=fingerprint)

        try:
            await self._cache.put(fingerprint, annotated)
        except Exception:
            logger.exception("Failed to store annotation in %s cache", self._cache.backend_name)

        return Annotated(html=annotated, fingerprint=fingerprint, cache_hit=False)

    async def close(self) -> None:
        await self._requester.close()
        await self._cache.close()

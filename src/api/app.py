# src/api/app.py - v1
"""FastAPI application factory.

``create_app`` wires the handler from explicit collaborators. Tests pass
stub cache and LLM clients; production builds them from Settings.

Routes:
    POST /         annotate ``{"html": "..."}``, plain-text reply
    GET  /healthz  liveness probe
Every successful GET response carries the public edge-cache header.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from redflags.annotation.handler import AnnotationHandler
from redflags.annotation.models import FailureReason, Rejected, render_text
from redflags.annotation.requester import AnnotationRequester
from redflags.cache.base_cache_store import BaseCacheStore
from redflags.cache.cache_factory import create_cache_store
from redflags.config.settings import Settings, load_settings
from redflags.llm.base_client import BaseLLMClient
from redflags.llm.client_factory import create_llm_client
from redflags.logging.context import clear_context, set_request_context
from redflags.version import __version__

logger = logging.getLogger(__name__)


def build_handler(
    settings: Settings,
    cache: BaseCacheStore | None = None,
    llm_client: BaseLLMClient | None = None,
) -> AnnotationHandler:
    """Assemble the annotation handler, creating missing collaborators from settings."""
    if cache is None:
        cache = create_cache_store(settings)
    if llm_client is None:
        llm_client = create_llm_client(
            settings.llm_provider, settings.llm_model, settings=settings
        )
    requester = AnnotationRequester(
        llm_client,
        max_tokens=settings.llm_max_tokens,
        temperature=settings.llm_temperature,
    )
    return AnnotationHandler(cache=cache, requester=requester)


def create_app(
    settings: Settings | None = None,
    *,
    handler: AnnotationHandler | None = None,
    cache: BaseCacheStore | None = None,
    llm_client: BaseLLMClient | None = None,
) -> FastAPI:
    """Build the HTTP application.

    Args:
        settings: Application settings; loaded from the environment if None.
        handler: Pre-built handler. Takes precedence over ``cache``/``llm_client``.
        cache: Cache store to use instead of the configured backend.
        llm_client: LLM client to use instead of the configured provider.
    """
    resolved = settings or load_settings()
    annotation_handler = handler or build_handler(
        resolved, cache=cache, llm_client=llm_client
    )
    cache_control = resolved.edge_cache_control

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.handler = annotation_handler
        app.state.settings = resolved
        logger.info(
            "Starting red flags detector",
            extra={
                "data": {
                    "version": __version__,
                    "cache_backend": annotation_handler.cache.backend_name,
                    "model": resolved.llm_model,
                }
            },
        )
        try:
            yield
        finally:
            logger.info("Shutting down red flags detector")
            await annotation_handler.close()

    app = FastAPI(
        title="Job Posting Red Flags Detector",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.handler = annotation_handler
    app.state.settings = resolved

    app.add_middleware(
        CORSMiddleware,
        allow_origins=resolved.cors_allow_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        set_request_context(request_id)
        started = time.perf_counter()
        logger.info("--> %s %s", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "<-- %s %s failed after %.1fms",
                request.method,
                request.url.path,
                (time.perf_counter() - started) * 1000,
            )
            clear_context()
            raise
        logger.info(
            "<-- %s %s %d %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        response.headers["x-request-id"] = request_id
        clear_context()
        return response

    @app.middleware("http")
    async def edge_cache_middleware(request: Request, call_next):
        response = await call_next(request)
        if request.method == "GET" and response.status_code == 200:
            response.headers.setdefault("cache-control", cache_control)
        return response

    @app.post("/", response_class=PlainTextResponse)
    async def annotate(request: Request) -> PlainTextResponse:
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.info("Rejected request: body is not valid JSON")
            result = Rejected(reason=FailureReason.NO_HTML)
        else:
            result = await request.app.state.handler.handle(payload)
        return PlainTextResponse(render_text(result))

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    return app

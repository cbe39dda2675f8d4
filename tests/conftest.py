# tests/conftest.py - v2
"""Shared test fixtures: stub LLM client, in-memory cache, handler, HTTP client.

No external dependencies: the OpenAI API and Redis are never contacted.
"""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient
from pydantic import BaseModel

from redflags.annotation.handler import AnnotationHandler
from redflags.annotation.models import AnnotatedHtml
from redflags.annotation.requester import AnnotationRequester
from redflags.api.app import create_app
from redflags.cache.memory_store import MemoryCacheStore
from redflags.config.settings import Settings
from redflags.llm.base_client import BaseLLMClient
from redflags.llm.models import LLMResponse, Message

SAMPLE_HTML = "<p>wear many hats</p>"
SAMPLE_ANNOTATED = (
    '<p><span data-highlight data-type="negative" '
    'data-description="Wearing many hats often means the role is not well defined." '
    'class="highlight-negative">wear many hats</span></p>'
)


class StubLLMClient(BaseLLMClient):
    """Scripted LLM client that records every call.

    ``parsed`` is returned as the structured result; ``error`` is raised
    instead when set.
    """

    def __init__(
        self,
        parsed: BaseModel | None = None,
        error: Exception | None = None,
        model: str = "stub-model",
    ) -> None:
        self.model = model
        self.parsed = parsed
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def complete(
        self,
        messages: list[Message],
        system: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        response_format: type[BaseModel] | None = None,
    ) -> LLMResponse:
        self.calls.append(
            {
                "messages": messages,
                "system": system,
                "max_tokens": max_tokens,
                "temperature": temperature,
                "response_format": response_format,
            }
        )
        if self.error is not None:
            raise self.error
        return LLMResponse(
            content=self.parsed.model_dump_json() if self.parsed else "",
            parsed=self.parsed,
            model=self.model,
            provider="stub",
        )

    async def close(self) -> None:
        self.closed = True

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def provider_name(self) -> str:
        return "stub"


# === FIXTURES: Collaborators ===


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, openai_api_key="sk-test", log_format="text")


@pytest.fixture
def stub_llm() -> StubLLMClient:
    """Stub client answering with the sample annotation."""
    return StubLLMClient(parsed=AnnotatedHtml(html=SAMPLE_ANNOTATED))


@pytest.fixture
def memory_cache() -> MemoryCacheStore:
    return MemoryCacheStore()


@pytest.fixture
def handler(memory_cache: MemoryCacheStore, stub_llm: StubLLMClient) -> AnnotationHandler:
    return AnnotationHandler(cache=memory_cache, requester=AnnotationRequester(stub_llm))


@pytest.fixture
def client(
    test_settings: Settings,
    memory_cache: MemoryCacheStore,
    stub_llm: StubLLMClient,
) -> TestClient:
    """HTTP client against an app wired with the stub collaborators."""
    app = create_app(test_settings, cache=memory_cache, llm_client=stub_llm)
    return TestClient(app)

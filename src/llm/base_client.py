# src/llm/base_client.py - v2
"""Abstract LLM client interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from redflags.llm.models import LLMResponse, Message


class BaseLLMClient(ABC):
    """Unified interface for LLM providers."""

    @abstractmethod
    async def complete(
        self,
        messages: list[Message],
        system: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        response_format: type[BaseModel] | None = None,
    ) -> LLMResponse:
        """Text completion, optionally validated against ``response_format``."""

    async def close(self) -> None:
        """Release HTTP resources held by the client."""
        return None

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Provider identifier (openai, ...)."""

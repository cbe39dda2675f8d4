# src/llm/models.py - v2
"""LLM-specific types: Message, LLMResponse."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel


class Message(BaseModel):
    """Single message in a conversation."""

    role: Literal["user", "assistant", "system"]
    content: str


class LLMResponse(BaseModel):
    """Normalized response from any LLM provider.

    ``parsed`` holds the schema-validated object when a ``response_format``
    was requested and the provider produced conforming output, else None.
    """

    content: str
    parsed: BaseModel | None = None
    refusal: str | None = None
    input_tokens: int = 0
    output_tokens: int = 0
    model: str
    provider: str
    latency_ms: int = 0
    raw_response: Any = None

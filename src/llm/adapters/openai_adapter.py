# src/llm/adapters/openai_adapter.py - v2
"""OpenAI GPT adapter implementing BaseLLMClient.

Uses the official openai SDK. Structured output goes through
``chat.completions.parse`` so the SDK validates the reply against the
pydantic schema. SDK-level retries are disabled: a failed call surfaces
to the caller once.
"""

from __future__ import annotations

import time
from typing import Any

import openai
from pydantic import BaseModel

from redflags.llm.base_client import BaseLLMClient
from redflags.llm.models import LLMResponse, Message


class OpenAIAdapter(BaseLLMClient):
    """OpenAI GPT adapter."""

    def __init__(
        self,
        model: str = "gpt-4o",
        api_key: str = "",
        client: openai.AsyncOpenAI | None = None,
        **kwargs: Any,
    ):
        self._model = model
        self._client = client or openai.AsyncOpenAI(
            api_key=api_key or None, max_retries=0, **kwargs
        )

    async def complete(
        self,
        messages: list[Message],
        system: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        response_format: type[BaseModel] | None = None,
    ) -> LLMResponse:
        oai_messages: list[dict[str, Any]] = []
        if system:
            oai_messages.append({"role": "system", "content": system})
        for m in messages:
            oai_messages.append({"role": m.role, "content": m.content})

        kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": oai_messages,
        }
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        if temperature is not None:
            kwargs["temperature"] = temperature

        t0 = time.monotonic()
        if response_format is not None:
            resp = await self._client.chat.completions.parse(
                response_format=response_format, **kwargs
            )
        else:
            resp = await self._client.chat.completions.create(**kwargs)
        latency = int((time.monotonic() - t0) * 1000)

        choice = resp.choices[0]
        usage = resp.usage
        return LLMResponse(
            content=choice.message.content or "",
            parsed=getattr(choice.message, "parsed", None),
            refusal=getattr(choice.message, "refusal", None),
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            model=self._model,
            provider="openai",
            latency_ms=latency,
            raw_response=resp,
        )

    async def close(self) -> None:
        await self._client.close()

    @property
    def provider_name(self) -> str:
        return "openai"

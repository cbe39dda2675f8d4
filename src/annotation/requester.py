# src/annotation/requester.py - v1
"""Annotation requester: one structured completion per input document."""

from __future__ import annotations

import logging

from redflags.annotation.models import AnnotatedHtml
from redflags.annotation.prompts import SYSTEM_PROMPT
from redflags.llm.base_client import BaseLLMClient
from redflags.llm.models import Message

logger = logging.getLogger(__name__)


class AnnotationRequester:
    """Sends the annotation policy plus the caller's HTML to the LLM.

    Remote failures propagate to the caller. A reply without a usable
    ``html`` field (refusal, schema mismatch, empty string) yields None.
    """

    def __init__(
        self,
        client: BaseLLMClient,
        system_prompt: str = SYSTEM_PROMPT,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> None:
        self._client = client
        self._system_prompt = system_prompt
        self._max_tokens = max_tokens
        self._temperature = temperature

    async def request(self, html: str) -> str | None:
        response = await self._client.complete(
            messages=[Message(role="user", content=html)],
            system=self._system_prompt,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            response_format=AnnotatedHtml,
        )
        logger.info(
            "Annotation completed",
            extra={
                "data": {
                    "provider": response.provider,
                    "model": response.model,
                    "input_tokens": response.input_tokens,
                    "output_tokens": response.output_tokens,
                    "latency_ms": response.latency_ms,
                }
            },
        )

        parsed = response.parsed
        if response.refusal:
            logger.warning("Model refused to annotate: %s", response.refusal)
        if parsed is None:
            return None
        html_out = getattr(parsed, "html", None)
        if not isinstance(html_out, str) or not html_out:
            return None
        return html_out

    async def close(self) -> None:
        await self._client.close()

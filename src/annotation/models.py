# src/annotation/models.py - v1
"""Annotation types: the structured-output schema and the handler result.

The handler never signals failure with sentinel strings internally. It
returns either ``Annotated`` or ``Rejected``; ``render_text`` turns both
into the plain-text body at the boundary.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, Field


class AnnotatedHtml(BaseModel):
    """Schema the model's reply is validated against."""

    html: str = Field(description="Output HTML")


class FailureReason(str, Enum):
    """Named failure branches; values are the user-visible bodies."""

    NO_HTML = "no html"
    NO_CONTENT = "no content in response"


class Annotated(BaseModel):
    """Annotated HTML, freshly generated or served from cache."""

    kind: Literal["annotated"] = "annotated"
    html: str
    fingerprint: str
    cache_hit: bool = False


class Rejected(BaseModel):
    """Request that produced no annotation."""

    kind: Literal["rejected"] = "rejected"
    reason: FailureReason
    fingerprint: str | None = None


AnnotationResult = Union[Annotated, Rejected]


def render_text(result: AnnotationResult) -> str:
    """Plain-text body for a handler result."""
    if isinstance(result, Annotated):
        return result.html
    return result.reason.value

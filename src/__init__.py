# src/__init__.py - v1
"""Job posting red flags detector: LLM-annotated job-posting HTML with a content-addressed cache."""

from redflags.version import __version__

__all__ = ["__version__"]

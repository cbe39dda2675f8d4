# src/cache/fingerprint.py - v2
"""Content fingerprint used as the response cache key.

The fingerprint is a SHA-256 digest of the exact UTF-8 bytes of the input
HTML, rendered as 64 lowercase hex characters. It identifies content for
caching only and carries no security meaning.
"""

from __future__ import annotations

import hashlib
import re

FINGERPRINT_LENGTH = 64

_FINGERPRINT_RE = re.compile(r"^[0-9a-f]{64}$")


def compute_fingerprint(html: str) -> str:
    """Return the SHA-256 hex digest of ``html`` encoded as UTF-8.

    Any string is accepted, including the empty string.
    """
    return hashlib.sha256(html.encode("utf-8")).hexdigest()


def is_fingerprint(value: str) -> bool:
    """Whether ``value`` has the shape of a fingerprint."""
    return bool(_FINGERPRINT_RE.match(value))

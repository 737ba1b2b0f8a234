# src/cache/fingerprint.py — v1
"""Content versioning: 64-bit text digest and summary cache keys.

The digest detects edits; it is not meant to resist deliberate collisions.
"""

from __future__ import annotations

import hashlib


def content_hash(text: str) -> str:
    """64-bit BLAKE2b digest of the exact text, as 16 hex chars."""
    # Lone UTF-16 surrogates are valid str content and must hash too
    data = (text or "").encode("utf-8", "surrogatepass")
    return hashlib.blake2b(data, digest_size=8).hexdigest()


def make_cache_key(file_id: str, version: str) -> str:
    """Summary cache key for one document version."""
    return f"summary-{file_id}-{version}"

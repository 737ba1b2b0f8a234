# src/core/tokens.py — v1
"""Character-based token estimation shared by every component.

A token is approximated as four characters of English text.
"""

from __future__ import annotations

import math

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Estimate the token count of text (ceil of chars / 4)."""
    if not text:
        return 0
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def tokens_to_chars(tokens: float) -> int:
    """Convert a token budget into a character budget."""
    return max(0, int(tokens * CHARS_PER_TOKEN))

# src/retrieval/chunk_selector.py — v1
"""Fit ranked chunks into the semantic share of the token budget."""

from __future__ import annotations

import logging

from smartcontext.core.tokens import tokens_to_chars

logger = logging.getLogger(__name__)

# A truncated tail shorter than this is not worth including.
MIN_PARTIAL_CHARS = 100


def select_chunks(chunks: list[str], max_tokens: float) -> list[str]:
    """Greedily keep chunks in rank order until the budget is spent.

    The first chunk that does not fit is truncated (with "...") when more
    than MIN_PARTIAL_CHARS remain, and selection stops there.
    """
    budget_chars = tokens_to_chars(max_tokens)
    selected: list[str] = []
    used_chars = 0

    for chunk in chunks:
        if not chunk:
            continue
        if used_chars + len(chunk) > budget_chars:
            remaining = budget_chars - used_chars
            if remaining > MIN_PARTIAL_CHARS:
                selected.append(chunk[: remaining - 3] + "...")
            break
        selected.append(chunk)
        used_chars += len(chunk)

    if len(selected) < len(chunks):
        logger.debug(
            "Kept %d of %d retrieved chunks within %d chars",
            len(selected), len(chunks), budget_chars,
        )
    return selected

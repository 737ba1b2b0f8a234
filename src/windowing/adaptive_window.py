# src/windowing/adaptive_window.py — v1
"""Adaptive windowing around a selection.

Document length picks a strategy; the strategy scales how much of the
immediate-context budget is spent on raw text around the selection. Long
documents get a narrower window and lean on the summary instead.
"""

from __future__ import annotations

import logging
import math

from smartcontext.core.models import ContextConfig, ImmediateContext, Strategy
from smartcontext.core.tokens import estimate_tokens, tokens_to_chars

logger = logging.getLogger(__name__)

CHARS_PER_WORD = 5
SHORT_DOC_MAX_WORDS = 1000
MEDIUM_DOC_MAX_WORDS = 5000

WINDOW_FRACTIONS: dict[str, float] = {
    "short-doc": 0.8,
    "medium-doc": 0.6,
    "long-doc": 0.4,
}
# Used when adaptive_window_size is off: the whole immediate budget.
FIXED_WINDOW_FRACTION = 1.0


def strategy_for_words(words: float) -> Strategy:
    """Map an estimated word count to a strategy."""
    if words < SHORT_DOC_MAX_WORDS:
        return "short-doc"
    if words < MEDIUM_DOC_MAX_WORDS:
        return "medium-doc"
    return "long-doc"


def determine_strategy(content_length: int) -> Strategy:
    """Strategy for a document of `content_length` characters (~5 chars/word)."""
    return strategy_for_words(content_length / CHARS_PER_WORD)


def clamp_selection(length: int, start: int, end: int) -> tuple[int, int]:
    """Clamp offsets into [0, length] and order them."""
    start = min(max(start, 0), length)
    end = min(max(end, 0), length)
    if start > end:
        start, end = end, start
    return start, end


def window_chars(config: ContextConfig, strategy: Strategy) -> float:
    """Total character window (before + after) for a strategy."""
    max_chars = tokens_to_chars(config.max_tokens * config.immediate_context_ratio)
    fraction = WINDOW_FRACTIONS[strategy] if config.adaptive_window_size else FIXED_WINDOW_FRACTION
    return max_chars * fraction


def calculate_immediate_context(
    content: str,
    selection_start: int,
    selection_end: int,
    strategy: Strategy,
    config: ContextConfig,
) -> ImmediateContext:
    """Extract symmetric before/after text around a selection.

    Out-of-range or inverted offsets are clamped, so reads never go past
    the document bounds.

    Args:
        content: Full document text.
        selection_start: Selection start offset (inclusive).
        selection_end: Selection end offset (exclusive).
        strategy: Sizing strategy from determine_strategy().
        config: Budget policy.

    Returns:
        ImmediateContext with trimmed before/after text and the estimated
        token count of the untrimmed pair.
    """
    content = content or ""
    start, end = clamp_selection(len(content), selection_start, selection_end)
    if (start, end) != (selection_start, selection_end):
        logger.debug(
            "Clamped selection [%d, %d) to [%d, %d) for %d chars",
            selection_start, selection_end, start, end, len(content),
        )

    half_window = math.floor(window_chars(config, strategy) / 2)

    before = content[max(0, start - half_window):start]
    after = content[end:min(len(content), end + half_window)]

    return ImmediateContext(
        before=before.strip(),
        after=after.strip(),
        tokens=estimate_tokens(before + after),
    )

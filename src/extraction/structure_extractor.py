# src/extraction/structure_extractor.py — v1
"""Short structural digest: markdown headings, else list items.

Operates line by line on raw document text. Deterministic and
order-preserving.
"""

from __future__ import annotations

import re

NO_STRUCTURE = "No clear structure detected"
STRUCTURE_LABEL = "STRUCTURE:"
KEY_POINTS_LABEL = "KEY POINTS:"

MAX_HEADINGS = 10
MAX_LIST_ITEMS = 8

# Markdown headings: "# Title", "## Subtitle", ...
_HEADING_RE = re.compile(r"^#{1,6}\s")
# Numbered ("1. ") or bulleted ("- ", "* ", "• ") items, optionally indented
_LIST_ITEM_RE = re.compile(r"^\s*(?:\d+\.|[•\-*])\s")


def extract_structure(text: str) -> str:
    """Build a labeled structure block for the document.

    Args:
        text: Raw document text.

    Returns:
        "STRUCTURE:" followed by up to 10 headings, or "KEY POINTS:" followed
        by up to 8 list items when there are no headings, or the
        NO_STRUCTURE sentinel.
    """
    lines = (text or "").split("\n")

    headings = _first_matching(lines, _HEADING_RE, MAX_HEADINGS)
    if headings:
        return "\n".join([STRUCTURE_LABEL, *headings])

    items = _first_matching(lines, _LIST_ITEM_RE, MAX_LIST_ITEMS)
    if items:
        return "\n".join([KEY_POINTS_LABEL, *items])

    return NO_STRUCTURE


def _first_matching(lines: list[str], pattern: re.Pattern[str], limit: int) -> list[str]:
    """Return the first `limit` stripped lines matching pattern."""
    found: list[str] = []
    for line in lines:
        if pattern.match(line):
            found.append(line.strip())
            if len(found) >= limit:
                break
    return found

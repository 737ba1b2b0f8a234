# src/extraction/entity_extractor.py — v1
"""Content-type dependent entity extraction.

fiction    -> dialogue count + capitalized names
technical  -> fenced code block count + inline code terms
otherwise  -> frequency-ranked key terms

All extractors are deterministic: ties and de-duplication keep order of
first appearance.
"""

from __future__ import annotations

import re
from collections import Counter

from smartcontext.core.models import ContentType

NO_ENTITIES = "No key entities identified"

MAX_DIALOGUE_REPORTED = 5
MAX_NAMES = 10
MAX_TECHNICAL_TERMS = 8
MAX_KEY_TERMS = 10

_DIALOGUE_RE = re.compile(r'"[^"]*"')
_PROPER_NOUN_RE = re.compile(r"\b[A-Z][a-z]+\b")
_CODE_BLOCK_RE = re.compile(r"```[\s\S]*?```")
_INLINE_CODE_RE = re.compile(r"`[^`]+`")
_WORD_RE = re.compile(r"\b[a-z]{3,}\b")

# Capitalized function words that are not names
_NAME_STOPWORDS = frozenset({"The", "And", "But", "For", "Yet", "So", "Or", "Nor", "I"})

_STOPWORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might",
    "can", "shall", "must", "this", "that", "these", "those", "i", "you", "he",
    "she", "it", "we", "they", "me", "him", "her", "us", "them", "my", "your",
    "his", "our", "their",
})


def extract_entities(text: str, content_type: ContentType) -> str:
    """Dispatch on content type and render the entity digest.

    Returns:
        Newline-joined entity lines, or the NO_ENTITIES sentinel.
    """
    text = text or ""
    if content_type == "fiction":
        lines = extract_fiction_entities(text)
    elif content_type == "technical":
        lines = extract_technical_entities(text)
    else:
        lines = extract_key_terms(text)
    return "\n".join(lines) if lines else NO_ENTITIES


def extract_fiction_entities(text: str) -> list[str]:
    """Dialogue exchanges and likely character/place names."""
    lines: list[str] = []

    dialogues = _DIALOGUE_RE.findall(text)
    if dialogues:
        shown = min(len(dialogues), MAX_DIALOGUE_REPORTED)
        lines.append(f"DIALOGUE: {shown} exchanges found")

    names = _unique_in_order(
        noun
        for noun in _PROPER_NOUN_RE.findall(text)
        if len(noun) > 2 and noun not in _NAME_STOPWORDS
    )[:MAX_NAMES]
    if names:
        lines.append(f"KEY NAMES: {', '.join(names)}")

    return lines


def extract_technical_entities(text: str) -> list[str]:
    """Fenced code block count and inline code identifiers."""
    lines: list[str] = []

    code_blocks = _CODE_BLOCK_RE.findall(text)
    if code_blocks:
        lines.append(f"CODE BLOCKS: {len(code_blocks)} examples")

    terms = _unique_in_order(
        span.replace("`", "") for span in _INLINE_CODE_RE.findall(text)
    )[:MAX_TECHNICAL_TERMS]
    if terms:
        lines.append(f"TECHNICAL TERMS: {', '.join(terms)}")

    return lines


def extract_key_terms(text: str) -> list[str]:
    """Most frequent non-stopword terms (3+ letters), highest count first."""
    words = _WORD_RE.findall(text.lower())
    frequency = Counter(word for word in words if word not in _STOPWORDS)
    # sorted() is stable, so equal counts keep first-appearance order
    ranked = sorted(frequency.items(), key=lambda item: item[1], reverse=True)
    top = [f"{word} ({count})" for word, count in ranked[:MAX_KEY_TERMS]]
    return [f"KEY TERMS: {', '.join(top)}"] if top else []


def _unique_in_order(items) -> list[str]:
    return list(dict.fromkeys(items))

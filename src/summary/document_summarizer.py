# src/summary/document_summarizer.py — v1
"""Document summarizer — structural + content overview + entity digests.

Summaries are keyed by (file_id, content hash) in the SummaryCache, so an
unchanged document is summarized once per TTL window and any edit produces
a new version.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from smartcontext.cache.fingerprint import content_hash, make_cache_key
from smartcontext.cache.summary_cache import SummaryCache
from smartcontext.core.models import ContentType, DocumentSummary
from smartcontext.core.tokens import estimate_tokens
from smartcontext.extraction.entity_extractor import extract_entities
from smartcontext.extraction.structure_extractor import extract_structure

logger = logging.getLogger(__name__)

EXCERPT_CHARS = 200


def split_paragraphs(content: str) -> list[str]:
    """Blank-line separated blocks that contain non-whitespace text."""
    return [p for p in (content or "").split("\n\n") if p.strip()]


def build_content_overview(content: str, content_type: ContentType) -> str:
    """Word/section counts plus opening and closing excerpts.

    Example:
        CONTENT OVERVIEW (fiction): 812 words, 14 sections
        OPENING: It was a cold morning...
        CURRENT END: She closed the door.
    """
    paragraphs = split_paragraphs(content)
    words = len((content or "").split())

    lines = [f"CONTENT OVERVIEW ({content_type}): {words} words, {len(paragraphs)} sections"]
    if paragraphs:
        lines.append(f"OPENING: {_excerpt(paragraphs[0])}")
    if len(paragraphs) > 1:
        lines.append(f"CURRENT END: {_excerpt(paragraphs[-1])}")
    return "\n".join(lines)


def _excerpt(paragraph: str) -> str:
    head = paragraph[:EXCERPT_CHARS]
    return f"{head}..." if len(head) >= EXCERPT_CHARS else head


class DocumentSummarizer:
    """Cache-backed producer of DocumentSummary objects.

    Args:
        cache: Summary cache. None disables caching (every call recomputes).
        clock: Epoch-seconds time source for created_at/updated_at.
    """

    def __init__(
        self,
        cache: SummaryCache | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._cache = cache
        self._clock = clock
        self.generated_count = 0
        self._count_lock = threading.Lock()

    @property
    def cache(self) -> SummaryCache | None:
        return self._cache

    def get_document_summary(
        self, file_id: str, content: str, content_type: ContentType
    ) -> DocumentSummary:
        """Return the cached summary for this exact content, or compute it."""
        version = content_hash(content)
        key = make_cache_key(file_id, version)

        if self._cache is not None:
            cached = self._cache.get_summary(key)
            if cached is not None:
                logger.debug("Summary cache hit: %s", key)
                return cached

        summary = self.generate_summary(file_id, content, content_type, version)

        if self._cache is not None:
            self._cache.put_summary(key, summary)
        return summary

    def generate_summary(
        self,
        file_id: str,
        content: str,
        content_type: ContentType,
        version: str | None = None,
    ) -> DocumentSummary:
        """Compute a summary without consulting the cache."""
        structural = extract_structure(content)
        overview = build_content_overview(content, content_type)
        entities = extract_entities(content, content_type)
        now = self._clock()

        with self._count_lock:
            self.generated_count += 1
        summary = DocumentSummary(
            file_id=file_id,
            version=version or content_hash(content),
            structural=structural,
            content=overview,
            entities=entities,
            content_type=content_type,
            token_count=estimate_tokens("\n\n".join([structural, overview, entities])),
            created_at=now,
            updated_at=now,
        )
        logger.info(
            "Summarized %s (%s, version=%s, ~%d tokens)",
            file_id, content_type, summary.version, summary.token_count,
        )
        return summary

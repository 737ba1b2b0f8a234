# src/classification/content_classifier.py — v1
"""Coarse content-type inference from metadata hints and text heuristics.

Explicit metadata takes priority over content analysis, the same way an
explicit language override beats detection.
"""

from __future__ import annotations

import logging

from smartcontext.core.models import ContentType, DocumentContext, ProjectContext

logger = logging.getLogger(__name__)

# Checked in order; first hit wins.
_PURPOSE_KEYWORDS: list[tuple[ContentType, tuple[str, ...]]] = [
    ("technical", ("technical", "documentation")),
    ("fiction", ("story", "novel", "fiction")),
    ("blog", ("blog", "article")),
]

_CODE_MARKERS = ("```", "function", "class ")

# Ten or more double quotes reads as dialogue-heavy prose.
_DIALOGUE_QUOTE_THRESHOLD = 10


def classify_content_type(
    project: ProjectContext | None,
    document: DocumentContext | None,
    content: str,
) -> ContentType:
    """Infer the content type. Never raises; falls back to "other".

    Args:
        project: Project metadata (its genre wins when set and not "other").
        document: Document metadata (its purpose is keyword-matched).
        content: Raw document text.

    Returns:
        One of the ContentType values.
    """
    if project is not None and project.genre and project.genre != "other":
        return project.genre

    if document is not None and document.purpose:
        from_purpose = _classify_purpose(document.purpose)
        if from_purpose is not None:
            return from_purpose

    return _classify_text(content or "")


def _classify_purpose(purpose: str) -> ContentType | None:
    lowered = purpose.lower()
    for content_type, keywords in _PURPOSE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return content_type
    return None


def _classify_text(content: str) -> ContentType:
    if any(marker in content for marker in _CODE_MARKERS):
        return "technical"
    if content.count('"') >= _DIALOGUE_QUOTE_THRESHOLD:
        return "fiction"
    logger.debug("No content-type signal found, defaulting to 'other'")
    return "other"

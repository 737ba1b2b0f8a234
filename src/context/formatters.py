# src/context/formatters.py — v1
"""Pure, total formatters turning metadata and summaries into text blocks.

Every formatter returns "" for absent or blank input instead of raising.
"""

from __future__ import annotations

from smartcontext.core.models import (
    DEFAULT_PROJECT_NAME,
    DocumentContext,
    DocumentSummary,
    ProjectContext,
)
from smartcontext.extraction.entity_extractor import NO_ENTITIES
from smartcontext.extraction.structure_extractor import NO_STRUCTURE

_SENTINELS = frozenset({NO_STRUCTURE, NO_ENTITIES})


def format_project_context(project: ProjectContext | None) -> str:
    if project is None:
        return ""

    sections: list[str] = []
    name = (project.name or "").strip()
    description = (project.description or "").strip()

    if description:
        sections.append(f"PROJECT: {name}\n{description}" if name else f"PROJECT:\n{description}")
    elif name and name != DEFAULT_PROJECT_NAME:
        sections.append(f"PROJECT: {name}")

    profile = _key_value_lines({"STYLE": project.style, "AUDIENCE": project.audience})
    if profile:
        sections.append(profile)

    details = _key_value_lines(project.custom_fields)
    if details:
        sections.append(f"PROJECT DETAILS:\n{details}")

    return "\n\n".join(sections)


def format_document_context(document: DocumentContext | None) -> str:
    if document is None:
        return ""

    sections: list[str] = []
    purpose = (document.purpose or "").strip()
    notes = (document.document_notes or "").strip()

    if purpose:
        sections.append(f"DOCUMENT PURPOSE: {purpose}")
    # draft is the default state and carries no information
    if document.status and document.status != "draft":
        sections.append(f"STATUS: {document.status}")
    if notes:
        sections.append(f"DOCUMENT NOTES:\n{notes}")

    details = _key_value_lines(document.custom_fields)
    if details:
        sections.append(f"DOCUMENT DETAILS:\n{details}")

    return "\n\n".join(sections)


def format_session_context(session: str | None) -> str:
    notes = (session or "").strip()
    return f"SESSION NOTES:\n{notes}" if notes else ""


def format_document_summary(summary: DocumentSummary | None, max_chars: int | None = None) -> str:
    """Join the summary digests, dropping "nothing found" sentinels.

    Args:
        summary: Summary to render.
        max_chars: Optional character budget; longer output is cut and
            suffixed with "...".
    """
    if summary is None:
        return ""
    parts = [
        part
        for part in (summary.structural, summary.content, summary.entities)
        if part and part not in _SENTINELS
    ]
    text = "\n\n".join(parts)
    if max_chars is not None and len(text) > max_chars:
        text = text[: max(0, max_chars - 3)] + "..." if max_chars > 3 else ""
    return text


def _key_value_lines(fields: dict[str, str | None] | None) -> str:
    if not fields:
        return ""
    return "\n".join(
        f"{key}: {value}"
        for key, value in fields.items()
        if value is not None and str(value).strip()
    )

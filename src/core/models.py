# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

No module redefines these types — all imports come from core.models.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from smartcontext.core.tokens import estimate_tokens

logger = logging.getLogger(__name__)

ContentType = Literal[
    "fiction", "non-fiction", "technical", "blog", "academic", "business", "other"
]
Strategy = Literal["short-doc", "medium-doc", "long-doc"]
DocumentStatus = Literal["draft", "review", "final", "archived"]

DEFAULT_PROJECT_NAME = "My Project"


# === CALLER-SUPPLIED METADATA ===


class ProjectContext(BaseModel):
    """Project-level metadata collected by the host application."""

    name: str = DEFAULT_PROJECT_NAME
    description: str | None = None
    genre: ContentType | None = None
    style: str | None = None
    audience: str | None = None
    custom_fields: dict[str, str] = Field(default_factory=dict)


class DocumentContext(BaseModel):
    """Per-document metadata (purpose, status, notes)."""

    file_id: str
    purpose: str | None = None
    status: DocumentStatus | None = None
    document_notes: str | None = None
    custom_fields: dict[str, str] = Field(default_factory=dict)


# === SUMMARY + CACHE MODELS ===


class DocumentSummary(BaseModel):
    """Cacheable digest of one document version.

    Valid only for the exact `version` (content hash) it was derived from.
    """

    file_id: str
    version: str
    structural: str
    content: str
    entities: str
    content_type: ContentType
    token_count: int
    created_at: float
    updated_at: float


class ContextCacheEntry(BaseModel):
    """Persisted cache record. `chunks` is reserved and currently always empty."""

    key: str
    summary: DocumentSummary
    chunks: list[str] = Field(default_factory=list)
    timestamp: float


class CacheStats(BaseModel):
    """Snapshot of summary cache occupancy."""

    size: int
    max_size: int
    total_tokens: int


# === CONFIGURATION ===


class ContextConfig(BaseModel):
    """Token budget policy for one context manager.

    The three ratios are independent soft shares of `max_tokens`. They are
    not renormalized unless `normalized()` is called explicitly.
    """

    model_config = ConfigDict(extra="forbid")

    max_tokens: int = Field(default=3000, ge=0)
    immediate_context_ratio: float = Field(default=0.4, ge=0.0, le=1.0)
    summary_ratio: float = Field(default=0.35, ge=0.0, le=1.0)
    semantic_ratio: float = Field(default=0.25, ge=0.0, le=1.0)
    adaptive_window_size: bool = True

    @model_validator(mode="after")
    def warn_on_oversubscription(self) -> ContextConfig:
        """Ratios summing above 1 are allowed but flagged."""
        if self.ratio_sum > 1.0 + 1e-9:
            logger.warning(
                "Context ratios sum to %.2f (> 1.0); sections may exceed max_tokens=%d",
                self.ratio_sum, self.max_tokens,
            )
        return self

    @property
    def ratio_sum(self) -> float:
        return self.immediate_context_ratio + self.summary_ratio + self.semantic_ratio

    def normalized(self) -> ContextConfig:
        """Return a copy whose ratios sum to 1 when they currently exceed it."""
        total = self.ratio_sum
        if total <= 1.0:
            return self.model_copy()
        return self.model_copy(
            update={
                "immediate_context_ratio": self.immediate_context_ratio / total,
                "summary_ratio": self.summary_ratio / total,
                "semantic_ratio": self.semantic_ratio / total,
            }
        )


# === ENGINE OUTPUT ===


class ImmediateContext(BaseModel):
    """Text window surrounding a selection."""

    before: str = ""
    after: str = ""
    tokens: int = 0


class SmartContextResult(BaseModel):
    """Assembled context payload handed to the prompt layer."""

    project_context: str
    document_context: str
    session_context: str
    document_summary: str
    immediate_context: ImmediateContext = Field(default_factory=ImmediateContext)
    semantic_chunks: list[str] = Field(default_factory=list)
    total_tokens: int
    strategy: Strategy
    content_type: ContentType

    def section_breakdown(self) -> dict[str, int]:
        """Estimated tokens per section, as shown in a context preview."""
        return {
            "project": estimate_tokens(self.project_context),
            "document": estimate_tokens(self.document_context),
            "session": estimate_tokens(self.session_context),
            "summary": estimate_tokens(self.document_summary),
            "immediate": self.immediate_context.tokens,
            "semantic": estimate_tokens("".join(self.semantic_chunks)),
        }

    def ordered_sections(self, focus_text: str = "") -> list[tuple[str, str]]:
        """Non-empty sections in prompt order.

        `focus_text` is the selection (or full content) placed between the
        before/after windows. Rendering into prompt wording is left to the
        caller.
        """
        sections = [
            ("project", self.project_context),
            ("document", self.document_context),
            ("session", self.session_context),
            ("summary", self.document_summary),
            ("before", self.immediate_context.before),
            ("focus", focus_text),
            ("after", self.immediate_context.after),
        ]
        sections.extend(("semantic", chunk) for chunk in self.semantic_chunks)
        return [(label, text) for label, text in sections if text]

# src/context/manager.py — v1
"""SmartContextManager — top-level context assembly entry point.

Usage:
    manager = SmartContextManager(config=ContextConfig(max_tokens=4000))
    result = manager.build_smart_context(project, document, notes, text)

Pipeline per call:
  1. Classify content type
  2. Pick a windowing strategy from document length
  3. Resolve the document summary (cache-backed)
  4. Format project / document / session blocks
  5. Window the selection, if any
  6. Fetch semantic chunks from the plugged retriever
  7. Estimate total tokens and return a SmartContextResult

The build is total: a failing component degrades to an empty section and
is logged; it never aborts assembly.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any, Callable, TypeVar

from smartcontext.cache.summary_cache import SummaryCache
from smartcontext.classification.content_classifier import classify_content_type
from smartcontext.context.formatters import (
    format_document_context,
    format_document_summary,
    format_project_context,
    format_session_context,
)
from smartcontext.core.models import (
    CacheStats,
    ContentType,
    ContextConfig,
    DocumentContext,
    DocumentSummary,
    ImmediateContext,
    ProjectContext,
    SmartContextResult,
)
from smartcontext.core.tokens import estimate_tokens, tokens_to_chars
from smartcontext.logging.context import component_context, request_context
from smartcontext.retrieval.base_chunk_retriever import BaseChunkRetriever, NullChunkRetriever
from smartcontext.retrieval.chunk_selector import select_chunks
from smartcontext.summary.document_summarizer import DocumentSummarizer
from smartcontext.windowing.adaptive_window import (
    calculate_immediate_context,
    determine_strategy,
)

logger = logging.getLogger(__name__)

UNKNOWN_FILE_ID = "unknown"
MAX_SEMANTIC_CHUNKS = 5

T = TypeVar("T")


class SmartContextManager:
    """Assemble budgeted context payloads for language-model requests.

    Each instance owns its config and summary cache; hosts construct one
    explicitly and pass it where needed.

    Args:
        config: Budget policy. Defaults to ContextConfig().
        cache: Summary cache. Defaults to an in-memory SummaryCache.
        retriever: Chunk retriever. Defaults to NullChunkRetriever.
        summarizer: Summarizer override (tests). Built on `cache` if None.
    """

    def __init__(
        self,
        config: ContextConfig | None = None,
        cache: SummaryCache | None = None,
        retriever: BaseChunkRetriever | None = None,
        summarizer: DocumentSummarizer | None = None,
    ) -> None:
        self._config = config.model_copy() if config is not None else ContextConfig()
        self._cache = cache if cache is not None else SummaryCache()
        self._summarizer = summarizer or DocumentSummarizer(cache=self._cache)
        self._retriever = retriever or NullChunkRetriever()

    @property
    def summarizer(self) -> DocumentSummarizer:
        return self._summarizer

    # --- Assembly ---

    def build_smart_context(
        self,
        project_context: ProjectContext | None,
        document_context: DocumentContext | None,
        session_context: str | None,
        full_content: str,
        selected_text: str | None = None,
        selection_start: int | None = None,
        selection_end: int | None = None,
    ) -> SmartContextResult:
        """Build the context payload for one request.

        Args:
            project_context: Project metadata (may be None).
            document_context: Document metadata; its file_id keys the cache.
            session_context: Free-form session notes.
            full_content: Full document text.
            selected_text: Selected substring, if any.
            selection_start: Selection start offset into full_content.
            selection_end: Selection end offset (exclusive).

        Returns:
            A fresh SmartContextResult owned by the caller.
        """
        content = full_content or ""
        file_id = (document_context.file_id if document_context else "") or UNKNOWN_FILE_ID
        with request_context(file_id, uuid.uuid4().hex[:12]):
            return self._assemble(
                project_context, document_context, session_context, content, file_id,
                selected_text, selection_start, selection_end,
            )

    async def abuild_smart_context(self, *args: Any, **kwargs: Any) -> SmartContextResult:
        """Async wrapper: runs build_smart_context in a worker thread."""
        return await asyncio.to_thread(self.build_smart_context, *args, **kwargs)

    def _assemble(
        self,
        project_context: ProjectContext | None,
        document_context: DocumentContext | None,
        session_context: str | None,
        content: str,
        file_id: str,
        selected_text: str | None,
        selection_start: int | None,
        selection_end: int | None,
    ) -> SmartContextResult:
        config = self._config

        content_type: ContentType = self._guarded(
            "classifier",
            lambda: classify_content_type(project_context, document_context, content),
            "other",
        )
        strategy = determine_strategy(len(content))

        summary: DocumentSummary | None = self._guarded(
            "summarizer",
            lambda: self._summarizer.get_document_summary(file_id, content, content_type),
            None,
        )
        document_summary = format_document_summary(
            summary, max_chars=tokens_to_chars(config.max_tokens * config.summary_ratio)
        )

        project_block = self._guarded("formatter", lambda: format_project_context(project_context), "")
        document_block = self._guarded("formatter", lambda: format_document_context(document_context), "")
        session_block = self._guarded("formatter", lambda: format_session_context(session_context), "")

        has_selection = bool(selected_text) and selection_start is not None and selection_end is not None
        immediate = ImmediateContext()
        if has_selection:
            immediate = self._guarded(
                "windower",
                lambda: calculate_immediate_context(
                    content, selection_start, selection_end, strategy, config
                ),
                ImmediateContext(),
            )

        semantic_chunks = self._guarded(
            "retriever",
            lambda: self._retrieve_chunks(file_id, content, selected_text if has_selection else None),
            [],
        )

        total_tokens = estimate_tokens(
            "\n".join([
                project_block,
                document_block,
                session_block,
                document_summary,
                immediate.before,
                immediate.after,
                *semantic_chunks,
            ])
        )

        logger.info(
            "Built context: type=%s strategy=%s ~%d tokens (budget=%d)",
            content_type, strategy, total_tokens, config.max_tokens,
        )

        return SmartContextResult(
            project_context=project_block,
            document_context=document_block,
            session_context=session_block,
            document_summary=document_summary,
            immediate_context=immediate,
            semantic_chunks=semantic_chunks,
            total_tokens=total_tokens,
            strategy=strategy,
            content_type=content_type,
        )

    def _retrieve_chunks(self, file_id: str, content: str, query: str | None) -> list[str]:
        budget = self._config.max_tokens * self._config.semantic_ratio
        if budget <= 0 or not content:
            return []
        chunks = self._retriever.retrieve(file_id, content, query, MAX_SEMANTIC_CHUNKS)
        return select_chunks(list(chunks)[:MAX_SEMANTIC_CHUNKS], budget)

    def _guarded(self, component: str, func: Callable[[], T], fallback: T) -> T:
        """Run one assembly step; on failure log it and return the fallback."""
        with component_context(component):
            try:
                return func()
            except Exception:
                logger.exception("Context component '%s' failed; section left empty", component)
                return fallback

    # --- Configuration and cache management ---

    def update_config(self, **changes: Any) -> ContextConfig:
        """Apply field updates to the budget policy (validated)."""
        self._config = ContextConfig.model_validate({**self._config.model_dump(), **changes})
        logger.debug("Context config updated: %s", changes)
        return self.get_config()

    def get_config(self) -> ContextConfig:
        return self._config.model_copy()

    def clear_cache(self) -> None:
        self._cache.clear()

    def get_cache_stats(self) -> CacheStats:
        return self._cache.stats()

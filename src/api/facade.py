# src/api/facade.py — v1
"""Public API facade — wires settings into a ready SmartContextManager.

Usage:
    from smartcontext.api.facade import create_context_manager
    manager = create_context_manager()
    result = manager.build_smart_context(project, document, notes, text)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from smartcontext.cache.store_factory import create_store
from smartcontext.cache.summary_cache import SummaryCache
from smartcontext.config.settings import Settings
from smartcontext.context.manager import SmartContextManager
from smartcontext.logging.logger import setup_logging_from_settings

if TYPE_CHECKING:
    from smartcontext.cache.base_store import BaseStore
    from smartcontext.retrieval.base_chunk_retriever import BaseChunkRetriever

logger = logging.getLogger(__name__)


def create_context_manager(
    settings: Settings | None = None,
    store: BaseStore | None = None,
    retriever: BaseChunkRetriever | None = None,
    configure_logging: bool = False,
) -> SmartContextManager:
    """Build a SmartContextManager from settings.

    Args:
        settings: Global settings. Loaded from env/.env if None.
        store: Cache persistence override. Built from settings if None;
            ignored when caching is disabled.
        retriever: Semantic chunk retriever. None = no semantic chunks.
        configure_logging: Also apply the settings' logging configuration.

    Returns:
        A manager owning its own config and summary cache.
    """
    settings = settings or Settings()
    if configure_logging:
        setup_logging_from_settings(settings)

    if settings.cache_enabled:
        store = store if store is not None else create_store(settings)
    else:
        store = None

    cache = SummaryCache(
        store=store,
        storage_key=settings.cache_storage_key,
        ttl_seconds=settings.cache_ttl_seconds,
        max_entries=settings.cache_max_entries,
    )

    logger.info(
        "Context manager ready: backend=%s, max_tokens=%d",
        settings.cache_backend if store is not None else "none",
        settings.context_max_tokens,
    )
    return SmartContextManager(
        config=settings.to_context_config(),
        cache=cache,
        retriever=retriever,
    )

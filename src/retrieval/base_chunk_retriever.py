# src/retrieval/base_chunk_retriever.py — v1
"""Extension point for ranked retrieval of relevant document chunks.

The engine ships no retrieval algorithm; a host plugs in its own (vector
search, BM25, ...) by implementing this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseChunkRetriever(ABC):
    """Unified interface for chunk retrieval services."""

    @abstractmethod
    def retrieve(
        self,
        file_id: str,
        content: str,
        query: str | None,
        max_chunks: int,
    ) -> list[str]:
        """Return up to max_chunks chunk texts, most relevant first.

        Args:
            file_id: Identifier of the source document.
            content: Full document text.
            query: Selected text, or None for document-level requests.
            max_chunks: Upper bound on returned chunks.
        """


class NullChunkRetriever(BaseChunkRetriever):
    """Default retriever: never returns chunks."""

    def retrieve(
        self,
        file_id: str,
        content: str,
        query: str | None,
        max_chunks: int,
    ) -> list[str]:
        return []

# src/cache/base_store.py — v1
"""Abstract key-value store interface used to persist the summary cache.

Values are opaque bytes; serialization belongs to the caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class StoreError(Exception):
    """Raised when a store backend fails to read, write or delete a key."""


class BaseStore(ABC):
    """Unified interface for persistence backends (file, sqlite, redis, memory)."""

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    def put(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key. Deleting a missing key is a no-op."""

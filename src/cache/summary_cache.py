# src/cache/summary_cache.py — v1
"""TTL- and size-bounded cache of document summaries, persisted via a BaseStore.

Entry lifecycle:
    absent -> valid (within TTL) -> expired (lazy: a read treats it as absent)
    -> purged or evicted on the next save (oldest timestamp first).

The whole cache is persisted as one flat JSON array under a single storage
key. Store failures and malformed payloads are logged and degrade to an
empty or unchanged cache; they never reach the caller.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from smartcontext.cache.base_store import BaseStore, StoreError
from smartcontext.core.models import CacheStats, ContextCacheEntry, DocumentSummary

logger = logging.getLogger(__name__)

CACHE_DURATION = 30 * 60  # seconds
MAX_CACHE_SIZE = 100
CACHE_KEY = "wordloom-context-cache"

_ENTRIES_ADAPTER = TypeAdapter(list[ContextCacheEntry])


def _dump_entries(entries: list[ContextCacheEntry]) -> bytes:
    """Serialize entries, leaving out any that cannot be encoded as JSON.

    Entries stay usable in memory; only their persisted copy is skipped.
    """
    try:
        return _ENTRIES_ADAPTER.dump_json(entries)
    except PydanticSerializationError as e:
        logger.warning("Skipping unserializable context cache entries: %s", e)

    persistable: list[ContextCacheEntry] = []
    for entry in entries:
        try:
            entry.model_dump_json()
        except PydanticSerializationError:
            continue
        persistable.append(entry)
    return _ENTRIES_ADAPTER.dump_json(persistable)


class SummaryCache:
    """In-memory summary map mirrored to a key-value store.

    Args:
        store: Persistence backend. None keeps the cache purely in memory.
        storage_key: Key under which the entry array is persisted.
        ttl_seconds: Entry lifetime.
        max_entries: Capacity enforced on save.
        clock: Time source returning epoch seconds (injectable for tests).
    """

    def __init__(
        self,
        store: BaseStore | None = None,
        storage_key: str = CACHE_KEY,
        ttl_seconds: float = CACHE_DURATION,
        max_entries: int = MAX_CACHE_SIZE,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store = store
        self._storage_key = storage_key
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, ContextCacheEntry] = {}
        self._lock = threading.RLock()
        self.load()

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def is_fresh(self, entry: ContextCacheEntry, now: float | None = None) -> bool:
        """True while the entry is younger than the TTL."""
        if now is None:
            now = self._clock()
        return now - entry.timestamp < self._ttl

    # --- Reads ---

    def get(self, key: str) -> ContextCacheEntry | None:
        """Return the entry for key if present and within TTL."""
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if not self.is_fresh(entry):
            logger.debug("Cache entry %s expired", key)
            return None
        return entry

    def get_summary(self, key: str) -> DocumentSummary | None:
        entry = self.get(key)
        return entry.summary if entry is not None else None

    # --- Writes ---

    def put(self, entry: ContextCacheEntry) -> None:
        """Insert or overwrite an entry, then persist."""
        with self._lock:
            self._entries[entry.key] = entry
            self.save()

    def put_summary(self, key: str, summary: DocumentSummary) -> ContextCacheEntry:
        """Wrap a freshly computed summary in an entry stamped now and store it."""
        entry = ContextCacheEntry(
            key=key, summary=summary, chunks=[], timestamp=self._clock()
        )
        self.put(entry)
        return entry

    def save(self) -> None:
        """Purge expired entries, enforce capacity, persist the remainder."""
        with self._lock:
            now = self._clock()
            live = [e for e in self._entries.values() if self.is_fresh(e, now)]
            live.sort(key=lambda e: e.timestamp, reverse=True)
            dropped = len(self._entries) - min(len(live), self._max_entries)
            live = live[: self._max_entries]
            self._entries = {e.key: e for e in live}
            if dropped:
                logger.debug("Dropped %d expired or overflow cache entries", dropped)

            if self._store is None:
                return
            try:
                self._store.put(self._storage_key, _dump_entries(live))
            except StoreError as e:
                logger.warning("Failed to save context cache: %s", e)

    def load(self) -> int:
        """Populate from the store, skipping expired entries.

        Returns:
            Number of entries loaded.
        """
        if self._store is None:
            return 0
        try:
            raw = self._store.get(self._storage_key)
        except StoreError as e:
            logger.warning("Failed to load context cache: %s", e)
            return 0
        if not raw:
            return 0

        try:
            entries = _ENTRIES_ADAPTER.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "Discarding malformed context cache (%d errors)", e.error_count()
            )
            return 0

        now = self._clock()
        with self._lock:
            for entry in entries:
                if self.is_fresh(entry, now):
                    self._entries[entry.key] = entry
            loaded = len(self._entries)

        logger.info("Loaded %d of %d cached summaries", loaded, len(entries))
        return loaded

    def clear(self) -> None:
        """Drop every entry in memory and in the store."""
        with self._lock:
            self._entries.clear()
            if self._store is None:
                return
            try:
                self._store.delete(self._storage_key)
            except StoreError as e:
                logger.warning("Failed to clear context cache: %s", e)

    def stats(self) -> CacheStats:
        with self._lock:
            entries = list(self._entries.values())
        return CacheStats(
            size=len(entries),
            max_size=self._max_entries,
            total_tokens=sum(e.summary.token_count for e in entries),
        )

# src/cache/memory_store.py — v1
"""In-process store (CACHE_BACKEND=memory). Nothing survives a restart."""

from __future__ import annotations

from smartcontext.cache.base_store import BaseStore


class MemoryStore(BaseStore):
    """Dict-backed store, mainly for tests and ephemeral hosts."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def put(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)

# src/cache/file_store.py — v1
"""File-based store (default CACHE_BACKEND=file).

One file per key under CACHE_ROOT. Writes go through a temporary file and
an atomic rename so a crash never leaves a half-written payload.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from smartcontext.cache.base_store import BaseStore, StoreError

logger = logging.getLogger(__name__)


class FileStore(BaseStore):
    """Store each key as `<root>/<key>.json`."""

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root).expanduser()
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Cannot create store root {self._root}: {e}") from e

    @property
    def root(self) -> Path:
        return self._root

    def get(self, key: str) -> bytes | None:
        """Read the value for key."""
        path = self._entry_path(key)
        if not path.exists():
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            raise StoreError(f"Failed to read {path}: {e}") from e

    def put(self, key: str, value: bytes) -> None:
        """Write the value for key atomically."""
        path = self._entry_path(key)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            tmp_path.write_bytes(value)
            os.replace(tmp_path, path)
        except OSError as e:
            raise StoreError(f"Failed to write {path}: {e}") from e
        logger.debug("Wrote %d bytes to %s", len(value), path)

    def delete(self, key: str) -> None:
        """Remove the file for key."""
        path = self._entry_path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StoreError(f"Failed to delete {path}: {e}") from e

    def _entry_path(self, key: str) -> Path:
        """Return file path for a key."""
        safe_key = key.replace("/", "_").replace("\\", "_")
        return self._root / f"{safe_key}.json"

# src/cache/sqlite_store.py — v1
"""SQLite-based store (CACHE_BACKEND=sqlite).

Uses stdlib sqlite3 — no external dependency. Suitable for hosts that
already keep an embedded database next to their documents.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from smartcontext.cache.base_store import BaseStore, StoreError

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value BLOB NOT NULL,
    updated_at TEXT DEFAULT CURRENT_TIMESTAMP
);
"""


class SqliteStore(BaseStore):
    """SQLite-backed key-value store."""

    def __init__(self, db_path: Path | str) -> None:
        self._db_path = Path(db_path).expanduser()
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
            self._conn.execute("PRAGMA journal_mode=WAL")
            self._conn.executescript(_SCHEMA)
        except (OSError, sqlite3.Error) as e:
            raise StoreError(f"Cannot open sqlite store {self._db_path}: {e}") from e

    def get(self, key: str) -> bytes | None:
        """Retrieve value by key."""
        try:
            cursor = self._conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            )
            row = cursor.fetchone()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to read key {key!r}: {e}") from e
        if row is None:
            return None
        return bytes(row[0])

    def put(self, key: str, value: bytes) -> None:
        """Store value (upsert)."""
        try:
            self._conn.execute(
                """INSERT OR REPLACE INTO kv_store (key, value, updated_at)
                   VALUES (?, ?, CURRENT_TIMESTAMP)""",
                (key, sqlite3.Binary(value)),
            )
            self._conn.commit()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to write key {key!r}: {e}") from e

    def delete(self, key: str) -> None:
        """Remove a key."""
        try:
            self._conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            self._conn.commit()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to delete key {key!r}: {e}") from e

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

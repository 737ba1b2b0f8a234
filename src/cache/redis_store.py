# src/cache/redis_store.py — v1
"""Redis-based store (CACHE_BACKEND=redis).

Requires 'redis' package: pip install smartcontext[redis].
"""

from __future__ import annotations

import logging

from smartcontext.cache.base_store import BaseStore, StoreError

logger = logging.getLogger(__name__)

_KEY_PREFIX = "smartcontext:"


class RedisStore(BaseStore):
    """Redis-backed key-value store."""

    def __init__(self, redis_url: str) -> None:
        try:
            import redis
        except ImportError as e:
            raise ImportError(
                "redis package required: pip install redis"
            ) from e

        self._redis = redis
        self._client = redis.Redis.from_url(redis_url)

    def get(self, key: str) -> bytes | None:
        """Retrieve value by key."""
        try:
            return self._client.get(f"{_KEY_PREFIX}{key}")
        except self._redis.RedisError as e:
            raise StoreError(f"Redis GET failed for {key!r}: {e}") from e

    def put(self, key: str, value: bytes) -> None:
        """Store value under key."""
        try:
            self._client.set(f"{_KEY_PREFIX}{key}", value)
        except self._redis.RedisError as e:
            raise StoreError(f"Redis SET failed for {key!r}: {e}") from e

    def delete(self, key: str) -> None:
        """Remove a key."""
        try:
            self._client.delete(f"{_KEY_PREFIX}{key}")
        except self._redis.RedisError as e:
            raise StoreError(f"Redis DEL failed for {key!r}: {e}") from e

    def close(self) -> None:
        """Close the Redis connection."""
        self._client.close()

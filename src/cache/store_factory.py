# src/cache/store_factory.py — v1
"""Factory for store instantiation from settings."""

from __future__ import annotations

from smartcontext.cache.base_store import BaseStore
from smartcontext.config.settings import Settings


def create_store(settings: Settings | None = None) -> BaseStore:
    """Instantiate the configured persistence backend.

    Args:
        settings: Application settings. Defaults to an in-memory store.

    Returns:
        Configured BaseStore implementation.
    """
    if settings is None:
        from smartcontext.cache.memory_store import MemoryStore
        return MemoryStore()

    backend = settings.cache_backend

    if backend == "memory":
        from smartcontext.cache.memory_store import MemoryStore
        return MemoryStore()

    if backend == "file":
        from smartcontext.cache.file_store import FileStore
        return FileStore(root=settings.cache_root)

    if backend == "sqlite":
        from smartcontext.cache.sqlite_store import SqliteStore
        return SqliteStore(db_path=settings.cache_root / "smartcontext_cache.db")

    if backend == "redis":
        from smartcontext.cache.redis_store import RedisStore
        if not settings.cache_redis_url:
            raise ValueError(
                "CACHE_REDIS_URL must be set when CACHE_BACKEND=redis"
            )
        return RedisStore(redis_url=settings.cache_redis_url)

    raise ValueError(f"Unsupported cache backend: {backend!r}")

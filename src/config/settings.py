# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for deployment-specific settings: token budget,
summary cache backend and logging.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from smartcontext.core.models import ContextConfig


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Token budget ===
    context_max_tokens: int = 3000
    context_immediate_ratio: float = 0.4
    context_summary_ratio: float = 0.35
    context_semantic_ratio: float = 0.25
    context_adaptive_window: bool = True
    context_normalize_ratios: bool = False

    # === Summary cache ===
    cache_enabled: bool = True
    cache_backend: Literal["memory", "file", "sqlite", "redis"] = "file"
    cache_root: Path = Path("~/.smartcontext/cache")
    cache_redis_url: str = ""
    cache_storage_key: str = "wordloom-context-cache"
    cache_ttl_seconds: float = 30 * 60
    cache_max_entries: int = 100

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator(
        "context_immediate_ratio", "context_summary_ratio", "context_semantic_ratio"
    )
    @classmethod
    def validate_ratio(cls, v: float) -> float:  # noqa: N805
        """Each budget share must lie in [0, 1]."""
        if not 0.0 <= v <= 1.0:
            raise ValueError("context ratios must be within [0, 1]")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.context_max_tokens < 0:
            errors.append("CONTEXT_MAX_TOKENS must be >= 0")

        if self.cache_ttl_seconds <= 0:
            errors.append("CACHE_TTL_SECONDS must be > 0")

        if self.cache_max_entries < 1:
            errors.append("CACHE_MAX_ENTRIES must be >= 1")

        if self.cache_enabled and self.cache_backend == "redis" and not self.cache_redis_url:
            errors.append("CACHE_REDIS_URL must be set when CACHE_BACKEND=redis")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    def to_context_config(self) -> ContextConfig:
        """Build the budget policy described by these settings."""
        config = ContextConfig(
            max_tokens=self.context_max_tokens,
            immediate_context_ratio=self.context_immediate_ratio,
            summary_ratio=self.context_summary_ratio,
            semantic_ratio=self.context_semantic_ratio,
            adaptive_window_size=self.context_adaptive_window,
        )
        if self.context_normalize_ratios:
            return config.normalized()
        return config


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or embedding hosts).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]

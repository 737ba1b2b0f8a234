# tests/unit/config/test_settings.py — v1
"""Tests for config/settings.py — typed Settings and validation rules."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from smartcontext.config.settings import ConfigurationError, Settings, load_settings


class TestSettingsDefaults:
    def test_default_budget(self):
        s = Settings(_env_file=None)
        assert s.context_max_tokens == 3000
        assert s.context_immediate_ratio == 0.4
        assert s.context_summary_ratio == 0.35
        assert s.context_semantic_ratio == 0.25
        assert s.context_adaptive_window is True

    def test_default_cache(self):
        s = Settings(_env_file=None)
        assert s.cache_enabled is True
        assert s.cache_backend == "file"
        assert s.cache_storage_key == "wordloom-context-cache"
        assert s.cache_ttl_seconds == 1800
        assert s.cache_max_entries == 100

    def test_default_logging(self):
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"
        assert s.log_format == "text"
        assert s.log_file is None


class TestSettingsValidation:
    def test_ratio_out_of_range(self):
        with pytest.raises(ValidationError, match="within"):
            Settings(_env_file=None, context_summary_ratio=1.2)

    def test_negative_max_tokens(self):
        with pytest.raises(ConfigurationError, match="CONTEXT_MAX_TOKENS"):
            Settings(_env_file=None, context_max_tokens=-10)

    def test_non_positive_ttl(self):
        with pytest.raises(ConfigurationError, match="CACHE_TTL_SECONDS"):
            Settings(_env_file=None, cache_ttl_seconds=0)

    def test_zero_capacity(self):
        with pytest.raises(ConfigurationError, match="CACHE_MAX_ENTRIES"):
            Settings(_env_file=None, cache_max_entries=0)

    def test_redis_without_url(self):
        with pytest.raises(ConfigurationError, match="CACHE_REDIS_URL"):
            Settings(_env_file=None, cache_backend="redis")

    def test_redis_without_url_ok_when_cache_disabled(self):
        s = Settings(_env_file=None, cache_backend="redis", cache_enabled=False)
        assert s.cache_backend == "redis"

    def test_errors_are_aggregated(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Settings(_env_file=None, context_max_tokens=-1, cache_max_entries=0)
        assert "CONTEXT_MAX_TOKENS" in str(exc_info.value)
        assert "CACHE_MAX_ENTRIES" in str(exc_info.value)


class TestEnvironment:
    def test_reads_env_vars(self, monkeypatch):
        monkeypatch.setenv("CONTEXT_MAX_TOKENS", "1200")
        monkeypatch.setenv("CACHE_BACKEND", "sqlite")
        s = Settings(_env_file=None)
        assert s.context_max_tokens == 1200
        assert s.cache_backend == "sqlite"

    def test_reads_env_file(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("CONTEXT_SEMANTIC_RATIO=0.1\nLOG_FORMAT=json\n")
        s = Settings(_env_file=env_file)
        assert s.context_semantic_ratio == 0.1
        assert s.log_format == "json"


class TestToContextConfig:
    def test_maps_fields(self):
        s = Settings(_env_file=None, context_max_tokens=500, context_adaptive_window=False)
        cfg = s.to_context_config()
        assert cfg.max_tokens == 500
        assert cfg.adaptive_window_size is False
        assert cfg.summary_ratio == 0.35

    def test_keeps_oversubscription_by_default(self):
        s = Settings(_env_file=None, context_immediate_ratio=1.0, context_summary_ratio=1.0)
        assert s.to_context_config().ratio_sum == pytest.approx(2.25)

    def test_normalizes_when_enabled(self):
        s = Settings(
            _env_file=None,
            context_immediate_ratio=1.0,
            context_summary_ratio=1.0,
            context_normalize_ratios=True,
        )
        assert s.to_context_config().ratio_sum == pytest.approx(1.0)


class TestLoadSettings:
    def test_overrides(self):
        s = load_settings(_env_file=None, cache_enabled=False)
        assert s.cache_enabled is False

"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from pipeforge.config import Settings, get_settings


class TestSettings:
    """Test Settings.from_env."""

    def test_defaults(self, monkeypatch):
        for name in (
            "LOG_LEVEL",
            "LOG_FORMAT",
            "ALLOWED_ORIGINS",
            "PIPEFORGE_WORKSPACE_CACHE_SIZE",
            "PIPEFORGE_WORKSPACE_TTL_SECONDS",
        ):
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "detailed"
        assert settings.allowed_origins == ["http://localhost:3000"]
        assert settings.workspace_cache_size == 256
        assert settings.workspace_ttl_seconds == 3600

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test,")
        monkeypatch.setenv("PIPEFORGE_WORKSPACE_CACHE_SIZE", "10")
        settings = Settings.from_env()
        assert settings.log_level == "DEBUG"
        assert settings.allowed_origins == ["http://a.test", "http://b.test"]
        assert settings.workspace_cache_size == 10

    def test_cache_size_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("PIPEFORGE_WORKSPACE_CACHE_SIZE", "0")
        with pytest.raises(ValidationError):
            Settings.from_env()

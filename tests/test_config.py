"""Tests for settings loading."""

import logging

import pytest
from pydantic import ValidationError

from household.audit import configure_logging, configure_structlog
from household.config import AppSettings, get_settings


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self, monkeypatch):
        """Test default values when nothing is configured."""
        for name in ("APP_ENVIRONMENT", "DEBUG_MODE", "LOG_LEVEL", "LOG_FORMAT"):
            monkeypatch.delenv(f"HOUSEHOLD_{name}", raising=False)
        settings = AppSettings(_env_file=None)
        assert settings.app_environment == "development"
        assert settings.debug_mode is False
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"

    def test_env_override(self, monkeypatch):
        """Test HOUSEHOLD_* environment variables are read."""
        monkeypatch.setenv("HOUSEHOLD_LOG_LEVEL", "debug")
        monkeypatch.setenv("HOUSEHOLD_LOG_FORMAT", "console")
        monkeypatch.setenv("HOUSEHOLD_DEBUG_MODE", "true")
        settings = AppSettings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == logging.DEBUG
        assert settings.log_format == "console"
        assert settings.debug_mode is True

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, log_level="LOUD")

    def test_invalid_log_format(self):
        """Test only json and console renderers are accepted."""
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, log_format="xml")

    def test_get_settings_is_cached(self, clean_settings):
        """Test get_settings returns the same instance until cleared."""
        first = get_settings()
        assert get_settings() is first
        get_settings.cache_clear()
        assert get_settings() is not first

    def test_configure_logging_accepts_settings(self):
        """Test logging can be reconfigured with explicit settings."""
        configure_logging(AppSettings(_env_file=None, log_format="console"))
        configure_logging(AppSettings(_env_file=None))

    def test_configure_structlog_leaves_root_logger_alone(self, monkeypatch):
        """Test the import-time setup never touches the stdlib root logger."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        configure_structlog(AppSettings(_env_file=None))

        assert calls == []

    def test_configure_logging_sets_up_root_logger(self, monkeypatch):
        """Test the explicit setup installs a handler at the configured level."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        configure_logging(AppSettings(_env_file=None, log_level="warning"))

        assert len(calls) == 1
        assert calls[0]["level"] == logging.WARNING

"""Unit tests for application settings and logging helpers."""

import logging

import pytest

from app.address_converter.infrastructure.converters import (
    email_address_converter,
    string_converter_registry,
)
from app.core.config import Settings, get_settings
from app.core.logging import get_logger


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self) -> None:
        """Test the default email parsing switches."""
        settings = Settings()

        assert settings.email_allow_smtputf8 is True
        assert settings.email_allow_quoted_local is False
        assert settings.email_globally_deliverable is True
        assert settings.email_allow_display_name is True
        assert settings.converter_entry_point_group == "address_converter.string_converters"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables override defaults case-insensitively."""
        monkeypatch.setenv("EMAIL_ALLOW_DISPLAY_NAME", "false")
        monkeypatch.setenv("converter_entry_point_group", "custom.converters")

        settings = Settings()

        assert settings.email_allow_display_name is False
        assert settings.converter_entry_point_group == "custom.converters"

    def test_only_declares_settings_the_converters_read(self) -> None:
        """Test that every field is an email or converter switch."""
        assert set(Settings.model_fields) == {
            "email_allow_smtputf8",
            "email_allow_quoted_local",
            "email_globally_deliverable",
            "email_allow_display_name",
            "converter_entry_point_group",
        }

    def test_get_settings_is_cached(self) -> None:
        """Test that settings are built once until the cache is cleared."""
        first = get_settings()

        assert get_settings() is first

        get_settings.cache_clear()

        assert get_settings() is not first


class TestLogging:
    """Tests for logging helpers."""

    def test_get_logger_returns_named_logger(self) -> None:
        """Test that loggers are looked up by name."""
        logger = get_logger("app.address_converter")

        assert logger is logging.getLogger("app.address_converter")

    def test_converter_modules_log_under_their_module_name(self) -> None:
        """Test that the converter modules obtain their loggers through get_logger."""
        for module in (email_address_converter, string_converter_registry):
            assert module.logger is get_logger(module.__name__)

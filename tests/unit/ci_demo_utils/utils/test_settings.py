"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from ci_demo_utils.types import InterfaceType
from ci_demo_utils.utils.settings import (
    FetchSettings,
    InterfaceSettings,
    LoggingSettings,
    get_fetch_settings,
    get_interface_settings,
    get_settings,
    reset_settings,
)


class TestLoggingSettings:
    """Logging configuration."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default values when no environment is set."""
        for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE_PATH"):
            monkeypatch.delenv(name, raising=False)

        settings = LoggingSettings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.log_file_path is None

    def test_environment_values_are_normalised(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that level and format are case-insensitive."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "CONSOLE")

        settings = LoggingSettings()

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "console"

    def test_invalid_level_rejected(self) -> None:
        """Test that unknown log levels fail validation."""
        with pytest.raises(ValidationError, match="Invalid log level"):
            LoggingSettings(log_level="LOUD")

    def test_invalid_format_rejected(self) -> None:
        """Test that unknown formats fail validation."""
        with pytest.raises(ValidationError, match="Invalid log format"):
            LoggingSettings(log_format="xml")

    def test_get_settings_is_cached(self) -> None:
        """Test that the accessor returns a singleton until reset."""
        first = get_settings()
        assert get_settings() is first

        reset_settings()

        assert get_settings() is not first


class TestInterfaceSettings:
    """Interface selection."""

    def test_default_is_cli(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default interface type."""
        monkeypatch.delenv("INTERFACE_TYPE", raising=False)

        settings = get_interface_settings()

        assert settings.interface_type == "cli"
        assert settings.interface_type_enum is InterfaceType.CLI

    def test_invalid_type_rejected(self) -> None:
        """Test that unknown interface types fail validation."""
        with pytest.raises(ValidationError, match="Invalid interface type"):
            InterfaceSettings(interface_type="gui")


class TestFetchSettings:
    """Fetch command defaults."""

    def test_prefixed_environment_variable(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that the default URL is read with the CI_DEMO_ prefix."""
        monkeypatch.setenv("CI_DEMO_DEFAULT_URL", "https://example.test/data")

        assert get_fetch_settings().default_url == "https://example.test/data"

    def test_default_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the built-in default URL."""
        monkeypatch.delenv("CI_DEMO_DEFAULT_URL", raising=False)

        settings = FetchSettings(_env_file=None)

        assert settings.default_url.startswith("https://")

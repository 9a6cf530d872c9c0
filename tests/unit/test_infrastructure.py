"""
Unit tests for the default adapters, settings and logging setup.
"""

import logging
from datetime import UTC, datetime
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from accounts.domain.clock import SystemDateTimeProvider
from accounts.domain.encoding import Base64AddressEncoder
from accounts.logging_config import LOG_FORMAT, configure_logging
from config.settings import Settings, get_settings


class TestSystemDateTimeProvider:
    """Test the system clock adapter."""

    def test_utc_now_is_timezone_aware(self) -> None:
        """Test that the returned instant is in UTC."""
        before = datetime.now(UTC)
        now = SystemDateTimeProvider().utc_now()
        after = datetime.now(UTC)

        assert now.tzinfo is UTC
        assert before <= now <= after


class TestBase64AddressEncoder:
    """Test the default address encoder."""

    def test_encode_is_stable(self) -> None:
        """Test that the same address always encodes the same way."""
        encoder = Base64AddressEncoder()

        assert encoder.encode("user@example.com") == encoder.encode("user@example.com")
        assert encoder.encode("user@example.com") != encoder.encode("other@example.com")

    def test_encode_handles_non_ascii_address(self) -> None:
        """Test that non-ASCII addresses are encoded from their UTF-8 bytes."""
        encoder = Base64AddressEncoder()

        assert encoder.encode("josé@example.com") == "am9zw6lAZXhhbXBsZS5jb20="


class TestSettings:
    """Test settings loading."""

    def test_defaults(self) -> None:
        """Test default verification settings."""
        settings = Settings()

        assert settings.verification_code_ttl_seconds == 300
        assert settings.app_name == "accounts"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables override defaults."""
        monkeypatch.setenv("VERIFICATION_CODE_TTL_SECONDS", "45")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = get_settings()

        assert settings.verification_code_ttl_seconds == 45
        assert settings.log_level == "DEBUG"

    def test_rejects_non_positive_lifetime(self) -> None:
        """Test that a zero lifetime is refused."""
        with pytest.raises(ValidationError):
            Settings(verification_code_ttl_seconds=0)

    def test_get_settings_is_cached(self) -> None:
        """Test that get_settings returns the same instance."""
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Test logging setup."""

    def test_configure_logging_sets_level_and_format(self) -> None:
        """Test that the root logger gets the requested level and format."""
        with patch("accounts.logging_config.logging.basicConfig") as basic_config:
            configure_logging("debug")

        basic_config.assert_called_once_with(level="DEBUG", format=LOG_FORMAT, force=True)

    def test_configure_logging_accepts_numeric_level(self) -> None:
        """Test that numeric levels are passed through unchanged."""
        with patch("accounts.logging_config.logging.basicConfig") as basic_config:
            configure_logging(logging.WARNING)

        basic_config.assert_called_once_with(
            level=logging.WARNING, format=LOG_FORMAT, force=True
        )

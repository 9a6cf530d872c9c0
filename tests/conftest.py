"""
Pytest configuration and shared fixtures.

This file provides common fixtures and configuration for all tests.
"""

import os
from collections.abc import Iterator
from datetime import UTC, datetime

import pytest

# Set test environment variables
# Use .setdefault() to respect values already set by the caller
os.environ.setdefault("LOG_LEVEL", "ERROR")
os.environ.setdefault("VERIFICATION_CODE_TTL_SECONDS", "300")

from config.settings import get_settings  # noqa: E402

from tests.mocks.fake_clock import FixedDateTimeProvider  # noqa: E402

NOW = datetime(2024, 6, 1, 9, 30, tzinfo=UTC)


@pytest.fixture
def clock() -> FixedDateTimeProvider:
    """A clock pinned to a known instant."""
    return FixedDateTimeProvider(NOW)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Make every test read settings from the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

"""
Date/time provider interface (Port).

The domain never reads the system clock directly. Every time-dependent rule
asks an injected provider for the current instant, so tests can pin or move
time at will.
"""

from datetime import UTC, datetime
from typing import Protocol


class DateTimeProvider(Protocol):
    """Source of the current UTC instant."""

    def utc_now(self) -> datetime:
        """
        Get the current instant.

        Returns:
            A timezone-aware datetime in UTC
        """
        ...


class SystemDateTimeProvider:
    """Default provider backed by the real system clock."""

    def utc_now(self) -> datetime:
        return datetime.now(UTC)

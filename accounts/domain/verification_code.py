"""
VerificationCode value object.

Represents a 6-character code that proves control of an email address.
The code expires five minutes after creation and can be verified only once.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import NoReturn

from accounts.domain.clock import DateTimeProvider
from accounts.domain.exceptions import (
    InvalidVerificationCodeError,
    VerificationFailureReason,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unverified:
    """The code is waiting to be verified before expires_at_utc."""

    expires_at_utc: datetime


@dataclass(frozen=True)
class Verified:
    """The code was verified at verified_at_utc. Terminal state."""

    verified_at_utc: datetime


VerificationState = Unverified | Verified


class VerificationCode:
    """
    Value object holding a one-shot verification code.

    Lifecycle is a two-state machine: Unverified -> Verified, triggered by a
    successful verify(). Expiry does not change the state; it only makes the
    transition impossible. There is no way back from Verified.
    """

    CODE_LENGTH = 6
    # Upper-case letters and digits without the look-alikes 0/O and 1/I
    ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
    DEFAULT_EXPIRES_IN_SECONDS = 5 * 60

    def __init__(self, code: str, state: VerificationState):
        """
        Initialize a VerificationCode.

        Args:
            code: The code value
            state: Current lifecycle state

        Note: This constructor is primarily for reconstructing codes from storage.
        Use the 'create' class method for issuing new codes.
        """
        self._code = code
        self._state = state

    @classmethod
    def create(
        cls,
        date_time_provider: DateTimeProvider,
        expires_in_seconds: int = DEFAULT_EXPIRES_IN_SECONDS,
    ) -> "VerificationCode":
        """
        Issue a new random code.

        Args:
            date_time_provider: Source of the creation instant
            expires_in_seconds: How long the code is valid (default: 5 minutes)

        Returns:
            A new, unverified VerificationCode
        """
        code = "".join(secrets.choice(cls.ALPHABET) for _ in range(cls.CODE_LENGTH))
        expires_at = date_time_provider.utc_now() + timedelta(seconds=expires_in_seconds)
        return cls(code=code, state=Unverified(expires_at_utc=expires_at))

    def verify(self, code: str | None, date_time_provider: DateTimeProvider) -> None:
        """
        Verify a code submitted by the user and mark this code as verified.

        Checks run in a fixed order: blank input, length, already verified,
        expiry, and finally the value itself (case-insensitive).

        Args:
            code: The code submitted by the user
            date_time_provider: Source of the verification instant

        Raises:
            InvalidVerificationCodeError: If any check fails; the reason
                attribute tells which one
        """
        if code is None or not code.strip():
            self._reject(VerificationFailureReason.EMPTY)

        if len(code) != len(self._code):
            self._reject(VerificationFailureReason.WRONG_LENGTH)

        if not isinstance(self._state, Unverified):
            self._reject(VerificationFailureReason.ALREADY_VERIFIED)

        now = date_time_provider.utc_now()
        if now >= self._state.expires_at_utc:
            self._reject(VerificationFailureReason.EXPIRED)

        if not self._matches(code):
            self._reject(VerificationFailureReason.MISMATCH)

        self._state = Verified(verified_at_utc=now)

    def is_expired(self, date_time_provider: DateTimeProvider) -> bool:
        """
        Check if the code can no longer be verified because time ran out.

        A verified code is never reported as expired.
        """
        if isinstance(self._state, Verified):
            return False
        return date_time_provider.utc_now() >= self._state.expires_at_utc

    def _matches(self, code: str) -> bool:
        # Constant-time to avoid leaking how many leading characters matched
        return secrets.compare_digest(
            code.upper().encode("utf-8"), self._code.upper().encode("utf-8")
        )

    @staticmethod
    def _reject(reason: VerificationFailureReason) -> NoReturn:
        logger.debug("Verification attempt rejected: %s", reason.value)
        raise InvalidVerificationCodeError(reason)

    @property
    def code(self) -> str:
        """Get the code value."""
        return self._code

    @property
    def state(self) -> VerificationState:
        """Get the current lifecycle state."""
        return self._state

    @property
    def expires_at_utc(self) -> datetime | None:
        """When the code expires, or None once verified."""
        if isinstance(self._state, Unverified):
            return self._state.expires_at_utc
        return None

    @property
    def verified_at_utc(self) -> datetime | None:
        """When the code was verified, or None while unverified."""
        if isinstance(self._state, Verified):
            return self._state.verified_at_utc
        return None

    @property
    def is_active(self) -> bool:
        """True once the code has been verified."""
        return isinstance(self._state, Verified)

    def __str__(self) -> str:
        return self._code

    def __eq__(self, other: object) -> bool:
        """
        Compare two verification codes for equality.

        Value objects are equal if their values are equal.
        """
        if not isinstance(other, VerificationCode):
            return False
        return self._code == other._code and self._state == other._state

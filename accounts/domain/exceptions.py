"""
Domain-specific exceptions.

These exceptions represent business rule violations of the account domain.
They are independent of infrastructure concerns.
"""

from enum import Enum


class DomainError(Exception):
    """Base exception for all domain errors."""

    pass


class InvalidEmailError(DomainError):
    """Raised when an email address does not match the accepted format."""

    def __init__(self, email: str | None):
        self.email = email
        super().__init__(f"Invalid email format: '{email}'")


class EmailAddressRequiredError(InvalidEmailError, ValueError):
    """Raised when no email address is supplied at all."""

    def __init__(self, email: str | None = None):
        self.email = email
        DomainError.__init__(self, "Email address cannot be None or empty")


class VerificationFailureReason(str, Enum):
    """
    Why a verification attempt was rejected.

    Carried as auxiliary data on InvalidVerificationCodeError so that logs can
    tell the cases apart. Callers should branch on the exception type only.
    """

    EMPTY = "empty"
    WRONG_LENGTH = "wrong_length"
    ALREADY_VERIFIED = "already_verified"
    EXPIRED = "expired"
    MISMATCH = "mismatch"


class InvalidVerificationCodeError(DomainError):
    """Raised when a verification attempt fails for any reason."""

    def __init__(self, reason: VerificationFailureReason) -> None:
        self.reason = reason
        super().__init__("Invalid verification code provided")

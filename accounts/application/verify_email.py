"""
Email verification use cases.

Coordinates the Email value object with configuration and logging.
Verification codes themselves are never written to the logs.
"""

import logging

from config.settings import Settings, get_settings

from accounts.domain.clock import DateTimeProvider, SystemDateTimeProvider
from accounts.domain.email import Email
from accounts.domain.encoding import AddressEncoder
from accounts.domain.exceptions import InvalidEmailError, InvalidVerificationCodeError

logger = logging.getLogger(__name__)


class CreateEmailUseCase:
    """
    Use case for registering an email address that needs verification.

    Decision: the code lifetime comes from settings so it can be tuned per
    environment without touching the domain defaults.
    """

    def __init__(
        self,
        date_time_provider: DateTimeProvider | None = None,
        settings: Settings | None = None,
        encoder: AddressEncoder | None = None,
    ):
        self.date_time_provider = date_time_provider or SystemDateTimeProvider()
        self.settings = settings or get_settings()
        self.encoder = encoder

    def execute(self, address: str | None) -> Email:
        """
        Create an Email with a fresh verification code.

        Args:
            address: Raw address as typed by the user

        Returns:
            The created Email

        Raises:
            InvalidEmailError: If the address is missing or malformed
        """
        try:
            email = Email.create(
                address,
                self.date_time_provider,
                encoder=self.encoder,
                verification_code_ttl_seconds=self.settings.verification_code_ttl_seconds,
            )
        except InvalidEmailError:
            logger.warning("Rejected email address %r", address)
            raise

        logger.info(
            "Issued verification code for %s, expires at %s",
            email.address,
            email.verification_code.expires_at_utc,
        )
        return email


class VerifyEmailUseCase:
    """Use case for confirming an email with the code the user received."""

    def execute(self, email: Email, code: str | None) -> None:
        """
        Verify the code for the given email.

        Raises:
            InvalidVerificationCodeError: If the code is rejected
        """
        try:
            email.verify(code)
        except InvalidVerificationCodeError as e:
            logger.warning(
                "Verification failed for %s: %s", email.address, e.reason.value
            )
            raise

        logger.info(
            "Email %s verified at %s",
            email.address,
            email.verification_code.verified_at_utc,
        )

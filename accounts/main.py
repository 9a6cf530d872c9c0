"""
Command-line entry point.

Runs the verification flow end to end in a terminal: the issued code is
printed to stdout in place of an email, then read back from stdin.
Logging is configured from settings at startup.
"""

import argparse
import logging

from config.settings import get_settings

from accounts.application.verify_email import CreateEmailUseCase, VerifyEmailUseCase
from accounts.domain.exceptions import DomainError
from accounts.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Issue a verification code for an email address and verify it"
    )
    parser.add_argument("address", help="Email address to verify")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting %s", settings.app_name)

    try:
        email = CreateEmailUseCase(settings=settings).execute(args.address)
        print(f"Verification code for {email}: {email.verification_code.code}")
        VerifyEmailUseCase().execute(email, input("Enter code: "))
    except DomainError as e:
        print(f"Error: {e}")
        return 1

    print(f"{email} verified")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

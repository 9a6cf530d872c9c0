"""
Email value object.

Represents a normalized email address together with the verification code
that proves the account owner controls it.
"""

import re

from accounts.domain.clock import DateTimeProvider
from accounts.domain.encoding import AddressEncoder, Base64AddressEncoder
from accounts.domain.exceptions import EmailAddressRequiredError, InvalidEmailError
from accounts.domain.verification_code import VerificationCode


class Email:
    """
    Email value object.

    The address is trimmed and lower-cased before validation. The only mutable
    part is the state of the owned verification code, changed through verify().

    Attributes:
        address: Normalized email address
        hash: Encoded form of the address
        verification_code: Code issued together with this email
    """

    # Word characters optionally joined by - + . ' in the local part,
    # word segments joined by - or . in the domain, ending in a dot segment
    EMAIL_REGEX = re.compile(r"^\w+([-+.']\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*$")

    def __init__(
        self,
        address: str,
        hash: str,
        verification_code: VerificationCode,
        date_time_provider: DateTimeProvider,
    ):
        """
        Initialize an Email.

        Note: This constructor does not validate. Use the 'create' class method.
        """
        self._address = address
        self._hash = hash
        self._verification_code = verification_code
        self._date_time_provider = date_time_provider

    @classmethod
    def create(
        cls,
        address: str | None,
        date_time_provider: DateTimeProvider,
        encoder: AddressEncoder | None = None,
        verification_code_ttl_seconds: int = VerificationCode.DEFAULT_EXPIRES_IN_SECONDS,
    ) -> "Email":
        """
        Create a validated email and issue its verification code.

        Args:
            address: Raw address as typed by the user
            date_time_provider: Time source, kept for later verification
            encoder: Produces the address hash (default: base64)
            verification_code_ttl_seconds: Lifetime of the issued code

        Returns:
            A new Email with an unverified code

        Raises:
            EmailAddressRequiredError: If address is None or empty
            InvalidEmailError: If the normalized address has an invalid format
        """
        if not address:
            raise EmailAddressRequiredError(address)

        address = address.strip().lower()

        if not cls.EMAIL_REGEX.match(address):
            raise InvalidEmailError(address)

        verification_code = VerificationCode.create(
            date_time_provider, expires_in_seconds=verification_code_ttl_seconds
        )
        encoder = encoder or Base64AddressEncoder()

        return cls(
            address=address,
            hash=encoder.encode(address),
            verification_code=verification_code,
            date_time_provider=date_time_provider,
        )

    @classmethod
    def from_string(cls, address: str | None, date_time_provider: DateTimeProvider) -> "Email":
        """Alias of create() with default encoder and code lifetime."""
        return cls.create(address, date_time_provider)

    def verify(self, code: str | None) -> None:
        """
        Verify the code sent to this address.

        Uses the time source captured at creation.

        Raises:
            InvalidVerificationCodeError: If the code is rejected
        """
        self._verification_code.verify(code, self._date_time_provider)

    @property
    def address(self) -> str:
        return self._address

    @property
    def hash(self) -> str:
        return self._hash

    @property
    def verification_code(self) -> VerificationCode:
        return self._verification_code

    @property
    def is_verified(self) -> bool:
        """True once the verification code was successfully verified."""
        return self._verification_code.is_active

    def __str__(self) -> str:
        """String representation is the normalized address."""
        return self._address

    def __repr__(self) -> str:
        return f"Email('{self._address}')"

    def __eq__(self, other: object) -> bool:
        """
        Compare two emails for equality.

        Equal when address, hash and verification code are equal.
        The time source is not part of the value.
        """
        if not isinstance(other, Email):
            return False
        return (
            self._address == other._address
            and self._hash == other._hash
            and self._verification_code == other._verification_code
        )

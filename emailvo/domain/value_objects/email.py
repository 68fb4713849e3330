"""Email value object.

Immutable wrapper around an email address string with normalization,
format validation, decomposition, exact comparison, obfuscation and
user/domain matching.

Construction:
    Email(value) stores the string verbatim and never validates.
    Email.create_with_validation(value) trims and lower-cases first,
    then raises InvalidEmailError if the format check fails.

Decomposition:
    user is everything before the FIRST "@", domain everything after the
    LAST "@". For values with several "@" the two are computed
    independently. Values without "@" raise MalformedEmailError.

Usage:
    from emailvo import Email

    email = Email.create_with_validation("  John.Doe@Example.com ")
    email.value              # 'john.doe@example.com'
    email.obfuscate()        # 'jo****oe@example.com'
    email.match_domain(["example.com", "example.org"])  # True
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

from email_validator import EmailNotValidError, validate_email

from emailvo.core.config import get_email_format_settings
from emailvo.core.strings import str_equals

SEPARATOR = "@"
MASK_CHAR = "*"


class InvalidEmailError(ValueError):
    """Raised when an address fails the format check."""

    def __init__(self, email: str) -> None:
        """Initialize invalid email error.

        Args:
            email: The address as originally supplied (before normalization).
        """
        super().__init__(f"Invalid email: {email}")
        self.email = email


class MalformedEmailError(ValueError):
    """Raised when an address without "@" is decomposed."""

    def __init__(self, email: str) -> None:
        """Initialize malformed email error.

        Args:
            email: The stored value lacking a separator.
        """
        super().__init__(f"Email has no '{SEPARATOR}' separator: {email}")
        self.email = email


def _check_format(email: str) -> None:
    # Raises EmailNotValidError; deliverability (DNS) is never checked.
    settings = get_email_format_settings()
    validate_email(
        email,
        check_deliverability=False,
        allow_quoted_local=settings.allow_quoted_local,
        allow_domain_literal=settings.allow_domain_literal,
        allow_smtputf8=settings.allow_smtputf8,
        globally_deliverable=settings.globally_deliverable,
        strict=settings.strict,
    )


@dataclass(frozen=True)
class Email:
    """Immutable email address.

    Attributes:
        value: The address exactly as supplied to the constructor.

    Equality:
        equals() and == compare value exactly (case-sensitive). Normalize
        before comparing if case should not matter.

    Example:
        >>> Email("bo@example.com").obfuscate()
        '**@example.com'
        >>> Email("A@b.com").equals(Email("a@b.com"))
        False
    """

    value: str

    @classmethod
    def create_with_validation(cls, email: str) -> Self:
        """Create a normalized, format-checked Email.

        Args:
            email: Raw address; surrounding whitespace and case are ignored.

        Returns:
            Email holding the normalized address.

        Raises:
            InvalidEmailError: If the normalized address fails the format
                check. The error carries the original input.
        """
        normalized = cls.normalize(email)
        try:
            _check_format(normalized)
        except EmailNotValidError as e:
            raise InvalidEmailError(email) from e
        return cls(normalized)

    @staticmethod
    def is_valid(email: str) -> bool:
        """Check address syntax only (no DNS or SMTP lookups).

        Args:
            email: Address to check as-is (not normalized).

        Returns:
            True if the address passes the format check.
        """
        try:
            _check_format(email)
        except EmailNotValidError:
            return False
        return True

    @staticmethod
    def normalize(email: str) -> str:
        """Trim surrounding whitespace and lower-case.

        Args:
            email: Address to normalize.

        Returns:
            Normalized address. Idempotent.
        """
        return email.strip().lower()

    @property
    def user(self) -> str:
        """Local part: everything before the first "@".

        Raises:
            MalformedEmailError: If value contains no "@".
        """
        user, separator, _ = self.value.partition(SEPARATOR)
        if not separator:
            raise MalformedEmailError(self.value)
        return user

    @property
    def domain(self) -> str:
        """Domain part: everything after the last "@".

        Raises:
            MalformedEmailError: If value contains no "@".
        """
        _, separator, domain = self.value.rpartition(SEPARATOR)
        if not separator:
            raise MalformedEmailError(self.value)
        return domain

    def equals(self, other: "Email") -> bool:
        """Exact, case-sensitive comparison of values."""
        return self.value == other.value

    def equals_any(self, others: Iterable["Email"]) -> bool:
        """Check whether any of others equals this email.

        Args:
            others: Emails to compare against; consumed until the first match.

        Returns:
            True on the first match, False if none match or others is empty.
        """
        return any(self.equals(other) for other in others)

    def obfuscate(self) -> str:
        """Mask the local part for display, keeping the domain intact.

        Masking by local part length n:
            n <= 3      every character masked
            n == 4      first character kept
            4 < n < 8   first and last character kept
            n >= 8      first two and last two characters kept

        Returns:
            Masked local part + "@" + domain.

        Raises:
            MalformedEmailError: If value contains no "@".

        Example:
            >>> Email("john.doe@example.com").obfuscate()
            'jo****oe@example.com'
        """
        user = self.user
        length = len(user)

        if length <= 3:
            masked = MASK_CHAR * length
        elif length == 4:
            masked = user[0] + MASK_CHAR * 3
        elif length < 8:
            masked = user[0] + MASK_CHAR * (length - 2) + user[-1]
        else:
            masked = user[:2] + MASK_CHAR * (length - 4) + user[-2:]

        return f"{masked}{SEPARATOR}{self.domain}"

    def match_domain(self, domains: str | Iterable[str]) -> bool:
        """Check the domain part against one domain or several.

        Comparison rules are those of str_equals (exact, no normalization).
        """
        return str_equals(self.domain, domains)

    def match_user(self, users: str | Iterable[str]) -> bool:
        """Check the local part against one user or several.

        Comparison rules are those of str_equals (exact, no normalization).
        """
        return str_equals(self.user, users)

    def __str__(self) -> str:
        """Return email address as string.

        Returns:
            str: The email address.
        """
        return self.value

    def __repr__(self) -> str:
        """Return repr for debugging.

        Returns:
            str: String representation of Email object.
        """
        return f"Email('{self.value}')"

"""Base error value for Result-returning helpers.

DomainError does not inherit from Exception. It is returned inside a
Failure, never raised.

Usage:
    from emailvo.core.errors import DomainError
"""

from dataclasses import dataclass

from emailvo.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"

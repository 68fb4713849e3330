"""Core errors package.

Usage:
    from emailvo.core.errors import DomainError, ValidationError
"""

from emailvo.core.enums import ErrorCode
from emailvo.core.errors.common_errors import ValidationError
from emailvo.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ErrorCode",
    "ValidationError",
]

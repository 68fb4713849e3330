"""Machine-readable error codes.

Codes follow ENTITY_REASON naming and travel inside ValidationError
values on the Result path.
"""

from enum import Enum


class ErrorCode(Enum):
    """Email error codes (machine-readable)."""

    INVALID_EMAIL = "invalid_email"
    VALIDATION_FAILED = "validation_failed"

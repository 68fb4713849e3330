"""Domain value objects.

Immutable value objects wrapping primitive values.
"""

from emailvo.domain.value_objects.email import (
    Email,
    InvalidEmailError,
    MalformedEmailError,
)

__all__ = [
    "Email",
    "InvalidEmailError",
    "MalformedEmailError",
]

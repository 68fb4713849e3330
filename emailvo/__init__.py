"""Immutable email-address value object.

Usage:
    from emailvo import Email, InvalidEmailError

    try:
        email = Email.create_with_validation(raw)
    except InvalidEmailError as e:
        ...
"""

from emailvo.domain.value_objects import Email, InvalidEmailError, MalformedEmailError

__all__ = ["Email", "InvalidEmailError", "MalformedEmailError"]

"""Result types for railway-oriented validation.

Lets callers handle a rejected address as data instead of catching
InvalidEmailError.

Usage:
    from emailvo.core.result import Failure, Success
    from emailvo.core.validation import validate_email

    match validate_email(raw):
        case Success(value=email):
            print(email.obfuscate())
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error describing the failure.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]

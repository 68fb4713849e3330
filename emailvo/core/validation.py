"""Result-returning validation helpers.

Railway-style counterparts of the raising Email factory. Failures come
back as ValidationError values inside Failure instead of exceptions.

Usage:
    from emailvo.core.validation import validate_email
    from emailvo.core.result import Success, Failure

    result = validate_email("  User@Example.com ")
    match result:
        case Success(value=email):
            # Email('user@example.com')
            pass
        case Failure(error=error):
            print(error.message)
"""

from typing import Any

from emailvo.core.container import get_logger
from emailvo.core.errors import ErrorCode, ValidationError
from emailvo.core.result import Failure, Result, Success
from emailvo.domain.value_objects.email import Email, InvalidEmailError


def validate_not_empty(value: Any, field_name: str) -> Result[Any, ValidationError]:
    """Validate that a value is not empty.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if not empty, Failure with ValidationError otherwise.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"{field_name} cannot be empty",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_email(email: str | None) -> Result[Email, ValidationError]:
    """Normalize and format-check an address.

    Args:
        email: Raw address.

    Returns:
        Success with the normalized Email, or Failure with a ValidationError
        whose details carry the original input. Rejections are logged at
        debug level with the validator reason only, never the address.
    """
    not_empty = validate_not_empty(email, "email")
    if isinstance(not_empty, Failure):
        return not_empty

    try:
        return Success(value=Email.create_with_validation(email))
    except InvalidEmailError as e:
        get_logger().debug(
            "Email rejected by format check",
            code=ErrorCode.INVALID_EMAIL.value,
            reason=str(e.__cause__),
        )
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_EMAIL,
                message="Invalid email format",
                field="email",
                details={"email": e.email},
            )
        )

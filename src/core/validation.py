"""Field validation rules.

Small rule functions shared by the command validators. Each returns a
Result so callers can collect every violation instead of stopping at the
first one.

Usage:
    from src.core.validation import validate_required, validate_max_length
    from src.core.result import Failure

    errors = [
        r.error
        for r in (
            validate_required(command.name, "name", "Name"),
            validate_max_length(command.name, 50, "name", "Name"),
        )
        if isinstance(r, Failure)
    ]
"""

from datetime import datetime
from typing import Any

from src.core.datetime_utils import ensure_utc, utc_now
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success


def validate_required(
    value: Any, field_name: str, label: str
) -> Result[Any, ValidationError]:
    """Validate that a value is present (not None, not blank text).

    Args:
        value: Value to validate.
        field_name: Field reported in the error.
        label: Human label used in the message ("Name").

    Returns:
        Success with value, or Failure("<label> is required.").
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return Failure(
            error=ValidationError(
                code=ErrorCode.REQUIRED_FIELD_MISSING,
                message=f"{label} is required.",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_max_length(
    value: str | None, max_length: int, field_name: str, label: str
) -> Result[str | None, ValidationError]:
    """Validate string length. None passes (presence is a separate rule).

    Returns:
        Success with value, or Failure("<label> must not exceed N characters.").
    """
    if value is not None and len(value) > max_length:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALUE_TOO_LONG,
                message=f"{label} must not exceed {max_length} characters.",
                field=field_name,
                details={"max_length": str(max_length)},
            )
        )
    return Success(value=value)


def validate_positive(
    value: int, field_name: str, label: str
) -> Result[int, ValidationError]:
    """Validate value > 0.

    Returns:
        Success with value, or Failure("<label> must be greater than 0.").
    """
    if value is None or value <= 0:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALUE_NOT_POSITIVE,
                message=f"{label} must be greater than 0.",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_future_date(
    value: datetime | None, field_name: str, label: str
) -> Result[datetime | None, ValidationError]:
    """Validate that a datetime lies strictly after now (UTC).

    None passes (presence is a separate rule). Naive values are read as UTC.

    Returns:
        Success with value, or Failure("<label> must be in the future.").
    """
    if value is not None and ensure_utc(value) <= utc_now():
        return Failure(
            error=ValidationError(
                code=ErrorCode.DATE_NOT_IN_FUTURE,
                message=f"{label} must be in the future.",
                field=field_name,
            )
        )
    return Success(value=value)

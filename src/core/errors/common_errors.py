"""Common error classes shared by every layer.

Error Types:
- ValidationError: a single rule violation on one input field
- NotFoundError: requested event or category does not exist

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode

    errors.append(ValidationError(
        code=ErrorCode.VALUE_NOT_POSITIVE,
        message="Price must be greater than 0.",
        field="price",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Event, Category).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str

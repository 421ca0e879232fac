"""Domain-level error codes (machine-readable).

Codes follow the ENTITY_ACTION_REASON convention and travel inside
DomainError instances returned through Result types.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    REQUIRED_FIELD_MISSING = "required_field_missing"
    VALUE_TOO_LONG = "value_too_long"
    VALUE_NOT_POSITIVE = "value_not_positive"
    DATE_NOT_IN_FUTURE = "date_not_in_future"

    # Resource errors
    EVENT_NOT_FOUND = "event_not_found"
    CATEGORY_NOT_FOUND = "category_not_found"

    # Conflict errors
    EVENT_ALREADY_EXISTS = "event_already_exists"

    # Notification errors
    EMAIL_DELIVERY_FAILED = "email_delivery_failed"

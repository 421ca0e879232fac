"""Application layer error types.

Application errors wrap domain errors with use-case context. Handlers
return them inside Failure; routers turn them into problem responses.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import DomainError, ValidationError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Event not found",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code.
        message: Human-readable error message.
        domain_error: Original domain error, if any.
        validation_errors: Every rule violation for COMMAND_VALIDATION_FAILED,
            in the order the validator reported them.
        details: Additional context as key-value pairs.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        ...     message="Event validation failed",
        ...     validation_errors=tuple(errors),
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    validation_errors: tuple[ValidationError, ...] = ()
    details: dict[str, str] | None = None

    @property
    def messages(self) -> list[str]:
        """Validation messages as plain strings."""
        return [e.message for e in self.validation_errors]

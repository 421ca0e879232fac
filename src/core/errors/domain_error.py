"""Base domain error for Railway-Oriented Programming.

Domain errors flow through the system as data inside Result types. They
do NOT inherit from Exception and are never raised.

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class EventNotPublishedError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"

"""LoggerProtocol definition for structured logging.

Every log call is a short event name plus key-value context. The backend
(structlog in ConsoleAdapter) decides rendering.

Security:
    - NEVER log API keys (SendGrid) or full email bodies
    - Prefer ids over free text in context

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("event_created", event_id=str(event.id))

    handler_logger = logger.bind(handler="CreateEventHandler")
    handler_logger.warning("event_notification_failed", error=str(error))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Five levels (DEBUG, INFO, WARNING, ERROR, CRITICAL) plus context
    binding for request- or handler-scoped loggers.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short message (avoid f-strings; use context).
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message (database unreachable at startup)."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...

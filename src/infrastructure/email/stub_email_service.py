"""Stub email service: logs instead of sending."""

from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.email_message import EmailMessage


class StubEmailService:
    """Email adapter for development and tests.

    Implements EmailProtocol structurally. Every message is accepted.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def send_email(self, message: EmailMessage) -> Result[None, DomainError]:
        """Log the message and report success."""
        self._logger.info(
            "email_stub_sent",
            to=message.to,
            subject=message.subject,
        )
        return Success(value=None)

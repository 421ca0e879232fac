"""EmailProtocol - port for outgoing email.

Infrastructure provides SendGridEmailService (SendGrid v3 HTTP API) and
StubEmailService (logs only).
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.value_objects.email_message import EmailMessage


class EmailProtocol(Protocol):
    """Email delivery protocol.

    Delivery outcome is returned as a Result rather than raised, so
    callers that treat email as best-effort can log and move on.
    """

    async def send_email(self, message: EmailMessage) -> Result[None, DomainError]:
        """Send one email.

        Args:
            message: Message to deliver.

        Returns:
            Success(None) when the provider accepted the message.
            Failure(DomainError) with EMAIL_DELIVERY_FAILED otherwise.
        """
        ...

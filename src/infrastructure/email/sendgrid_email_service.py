"""SendGrid email adapter.

Sends mail through the SendGrid v3 HTTP API (POST /v3/mail/send) using
httpx. The API answers 202 Accepted for queued mail.

Reference:
    https://docs.sendgrid.com/api-reference/mail-send/mail-send
"""

from typing import Any

import httpx

from src.core.config import Settings
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.email_message import EmailMessage

_ACCEPTED_STATUS_CODES = frozenset({200, 202})


class SendGridEmailService:
    """EmailProtocol implementation backed by SendGrid.

    Provider errors are returned as Failure, never raised.

    Args:
        settings: Settings with SendGrid key and sender details.
        logger: Structured logger.
    """

    def __init__(self, *, settings: Settings, logger: LoggerProtocol) -> None:
        """Initialize the adapter.

        Raises:
            ValueError: If no SendGrid API key is configured.
        """
        if not settings.email_enabled or settings.sendgrid_api_key is None:
            raise ValueError("sendgrid_api_key is required in settings")

        self._api_key = settings.sendgrid_api_key.get_secret_value()
        self._send_url = f"{settings.sendgrid_api_base_url}/v3/mail/send"
        self._from_address = settings.email_from_address
        self._from_name = settings.email_from_name
        self._timeout = settings.email_timeout_seconds
        self._logger = logger

    async def send_email(self, message: EmailMessage) -> Result[None, DomainError]:
        """Send one message through SendGrid.

        Returns:
            Success(None) on 200/202.
            Failure(DomainError) on any other status or transport error.
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    self._send_url,
                    headers={
                        "Authorization": f"Bearer {self._api_key}",
                        "Content-Type": "application/json",
                    },
                    json=self._build_payload(message),
                )
        except httpx.TimeoutException as e:
            self._logger.warning("sendgrid_send_timeout", to=message.to, error=str(e))
            return Failure(
                error=DomainError(
                    code=ErrorCode.EMAIL_DELIVERY_FAILED,
                    message="SendGrid request timed out",
                )
            )
        except httpx.RequestError as e:
            self._logger.warning(
                "sendgrid_send_connection_error", to=message.to, error=str(e)
            )
            return Failure(
                error=DomainError(
                    code=ErrorCode.EMAIL_DELIVERY_FAILED,
                    message=f"Failed to connect to SendGrid: {e}",
                )
            )

        if response.status_code not in _ACCEPTED_STATUS_CODES:
            self._logger.warning(
                "sendgrid_send_rejected",
                to=message.to,
                status_code=response.status_code,
            )
            return Failure(
                error=DomainError(
                    code=ErrorCode.EMAIL_DELIVERY_FAILED,
                    message=f"SendGrid rejected the message (HTTP {response.status_code})",
                    details={"status_code": str(response.status_code)},
                )
            )

        self._logger.info("sendgrid_send_accepted", to=message.to)
        return Success(value=None)

    def _build_payload(self, message: EmailMessage) -> dict[str, Any]:
        content = [{"type": "text/plain", "value": message.body}]
        if message.html_body:
            content.append({"type": "text/html", "value": message.html_body})

        return {
            "personalizations": [
                {"to": [{"email": message.to}], "subject": message.subject}
            ],
            "from": {"email": self._from_address, "name": self._from_name},
            "content": content,
        }

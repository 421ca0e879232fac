"""Unit tests for the email adapters.

SendGrid HTTP calls are intercepted with pytest-httpx; no network access.
"""

import json
from unittest.mock import Mock

import httpx
import pytest

from src.core.config import Settings
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.email_message import EmailMessage
from src.infrastructure.email import SendGridEmailService, StubEmailService

SEND_URL = "https://api.sendgrid.com/v3/mail/send"


def make_settings(**overrides) -> Settings:
    values = {
        "database_url": "sqlite+aiosqlite:///:memory:",
        "sendgrid_api_key": "SG.test-key",
        "email_from_address": "noreply@example.com",
        "email_from_name": "Ticket Management",
    }
    return Settings(_env_file=None, **(values | overrides))


@pytest.fixture
def mock_logger() -> Mock:
    return Mock(spec=LoggerProtocol)


@pytest.fixture
def message() -> EmailMessage:
    return EmailMessage(
        to="events@example.com",
        subject="A new event was created",
        body="A new event was created: Rock Night on 2030-07-01 20:00 UTC",
    )


@pytest.fixture
def service(mock_logger) -> SendGridEmailService:
    return SendGridEmailService(settings=make_settings(), logger=mock_logger)


@pytest.mark.unit
class TestSendGridEmailService:
    """SendGridEmailService.send_email()"""

    async def test_accepted(self, service, message, httpx_mock):
        httpx_mock.add_response(url=SEND_URL, method="POST", status_code=202)

        result = await service.send_email(message)

        assert result == Success(value=None)

    async def test_request_shape(self, service, message, httpx_mock):
        httpx_mock.add_response(url=SEND_URL, method="POST", status_code=202)

        await service.send_email(message)

        request = httpx_mock.get_request()
        assert request.headers["Authorization"] == "Bearer SG.test-key"
        payload = json.loads(request.content)
        assert payload["personalizations"] == [
            {
                "to": [{"email": "events@example.com"}],
                "subject": "A new event was created",
            }
        ]
        assert payload["from"] == {
            "email": "noreply@example.com",
            "name": "Ticket Management",
        }
        assert payload["content"] == [{"type": "text/plain", "value": message.body}]

    async def test_html_body_added(self, service, httpx_mock):
        httpx_mock.add_response(url=SEND_URL, method="POST", status_code=202)

        await service.send_email(
            EmailMessage(
                to="events@example.com",
                subject="Hi",
                body="plain",
                html_body="<p>html</p>",
            )
        )

        payload = json.loads(httpx_mock.get_request().content)
        assert [c["type"] for c in payload["content"]] == ["text/plain", "text/html"]

    @pytest.mark.parametrize("status_code", [400, 401, 429, 500])
    async def test_rejected_status(
        self, service, message, mock_logger, httpx_mock, status_code
    ):
        httpx_mock.add_response(url=SEND_URL, method="POST", status_code=status_code)

        result = await service.send_email(message)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_DELIVERY_FAILED
        assert str(status_code) in result.error.message
        mock_logger.warning.assert_called_once()

    async def test_timeout(self, service, message, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectTimeout("timed out"))

        result = await service.send_email(message)

        assert isinstance(result, Failure)
        assert result.error.message == "SendGrid request timed out"

    async def test_connection_error(self, service, message, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("connection refused"))

        result = await service.send_email(message)

        assert isinstance(result, Failure)
        assert "connection refused" in result.error.message

    async def test_custom_base_url(self, message, mock_logger, httpx_mock):
        httpx_mock.add_response(
            url="http://sendgrid.test/v3/mail/send", method="POST", status_code=202
        )
        service = SendGridEmailService(
            settings=make_settings(sendgrid_api_base_url="http://sendgrid.test/"),
            logger=mock_logger,
        )

        result = await service.send_email(message)

        assert isinstance(result, Success)

    @pytest.mark.parametrize("api_key", [None, ""])
    def test_requires_api_key(self, mock_logger, api_key):
        with pytest.raises(ValueError, match="sendgrid_api_key"):
            SendGridEmailService(
                settings=make_settings(sendgrid_api_key=api_key), logger=mock_logger
            )


@pytest.mark.unit
class TestStubEmailService:
    """StubEmailService.send_email()"""

    async def test_logs_and_succeeds(self, message, mock_logger):
        result = await StubEmailService(mock_logger).send_email(message)

        assert result == Success(value=None)
        mock_logger.info.assert_called_once_with(
            "email_stub_sent",
            to="events@example.com",
            subject="A new event was created",
        )


@pytest.mark.unit
class TestEmailMessage:
    """EmailMessage recipient validation."""

    def test_invalid_recipient(self):
        with pytest.raises(ValueError, match="Invalid email"):
            EmailMessage(to="not-an-email", subject="s", body="b")

"""Email service implementations.

- SendGridEmailService: SendGrid v3 HTTP API (used when SENDGRID_API_KEY is set)
- StubEmailService: structured log only (development/testing)
"""

from src.infrastructure.email.sendgrid_email_service import SendGridEmailService
from src.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "SendGridEmailService",
    "StubEmailService",
]

"""Outgoing email message value object."""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class EmailMessage:
    """Plain-text email ready to hand to an EmailProtocol implementation.

    The recipient is validated and normalized on construction.

    Attributes:
        to: Recipient address.
        subject: Subject line.
        body: Plain-text body.
        html_body: Optional HTML alternative.

    Raises:
        ValueError: If the recipient address is not a valid email.

    Example:
        >>> message = EmailMessage(
        ...     to="Events@Example.com",
        ...     subject="A new event was created",
        ...     body="A new event was created: Rock Night",
        ... )
        >>> message.to
        'Events@example.com'
    """

    to: str
    subject: str
    body: str
    html_body: str | None = None

    def __post_init__(self) -> None:
        try:
            validated = validate_email(self.to, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        object.__setattr__(self, "to", validated.normalized)

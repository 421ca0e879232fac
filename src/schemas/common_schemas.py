"""Common schema building blocks shared by the API schemas.

JSON bodies use camelCase (`eventId`, `ticketQuantity`, `validationErrors`).
Requests accept either the camelCase alias or the Python field name.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class BaseEnvelopeResponse(CamelModel):
    """Envelope for commands that report failure without raising.

    Attributes:
        success: False when validation failed and nothing was persisted.
        message: Optional human-readable summary.
        validation_errors: Rule violation messages, empty on success.
    """

    success: bool = Field(True, description="Whether the command succeeded")
    message: str | None = Field(None, description="Summary message")
    validation_errors: list[str] = Field(
        default_factory=list, description="Validation messages"
    )

"""Event commands (CQRS write operations).

All commands are immutable (frozen=True) and keyword-only. Fields the
validator checks for presence are optional here so that a missing value
reaches the validator and is reported with the other rule violations.

Pattern:
- Commands are data containers (no logic)
- Handlers validate and execute
- Handlers return Result types
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateEvent:
    """Create a new event.

    Attributes:
        name: Display name (required, max 50 characters).
        date: Event date (required, in the future).
        price: Ticket price (> 0).
        ticket_quantity: Tickets on sale (> 0).
        category_id: Owning category (required, must exist).
        short_description: Optional teaser text.
        description: Optional full description.
        image_url: Optional image.
        artist: Optional performing artist.

    Example:
        >>> command = CreateEvent(
        ...     name="Rock Night",
        ...     date=next_month,
        ...     price=50,
        ...     ticket_quantity=100,
        ...     category_id=concerts_id,
        ... )
        >>> result = await dispatcher.send(command)
    """

    name: str | None = None
    date: datetime | None = None
    price: int = 0
    ticket_quantity: int = 0
    category_id: UUID | None = None
    short_description: str | None = None
    description: str | None = None
    image_url: str | None = None
    artist: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateEvent:
    """Overwrite the editable fields of an existing event.

    The identifier travels in the request body. Every other field replaces
    the stored value.

    Attributes:
        event_id: Event to update.
    """

    event_id: UUID
    name: str | None = None
    date: datetime | None = None
    price: int = 0
    ticket_quantity: int = 0
    category_id: UUID | None = None
    short_description: str | None = None
    description: str | None = None
    image_url: str | None = None
    artist: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteEvent:
    """Delete an event.

    Attributes:
        event_id: Event to delete.
    """

    event_id: UUID

"""Event domain entity.

An event is something tickets are sold for (a concert, a musical, a
conference). It belongs to exactly one Category, referenced by id.

Business rules (name required, price and quantity positive, date in the
future, name+date unique) are enforced by the application validators
before an Event is built or changed, not by the entity itself.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.core.datetime_utils import ensure_utc, utc_now


@dataclass
class Event:
    """Ticketed event.

    Attributes:
        id: Unique event identifier.
        name: Display name (max 50 characters).
        date: When the event takes place (aware UTC).
        price: Ticket price in whole currency units.
        ticket_quantity: Number of tickets on sale.
        category_id: Owning category.
        short_description: Teaser text for list pages.
        description: Full description.
        image_url: Poster or banner image.
        artist: Performing artist.
        created_at: When the event was created.
        updated_at: When the event was last modified.

    Example:
        >>> event = Event(
        ...     id=uuid7(),
        ...     name="Rock Night",
        ...     date=datetime(2030, 5, 1, 20, tzinfo=UTC),
        ...     price=50,
        ...     ticket_quantity=100,
        ...     category_id=concerts.id,
        ... )
    """

    id: UUID
    name: str
    date: datetime
    price: int
    ticket_quantity: int
    category_id: UUID
    short_description: str | None = None
    description: str | None = None
    image_url: str | None = None
    artist: str | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        """Normalize timestamps to aware UTC."""
        self.date = ensure_utc(self.date)
        self.created_at = ensure_utc(self.created_at)
        self.updated_at = ensure_utc(self.updated_at)

    def __str__(self) -> str:
        """Return human-readable summary used in notifications."""
        return f"{self.name} on {self.date:%Y-%m-%d %H:%M} UTC"

"""Event DTOs.

View objects returned by the event query handlers.

DTOs:
    - EventListItem: row of the events list
    - CategorySummary: category embedded in EventDetail
    - EventDetail: single event with its resolved category
    - EventExportRow: one CSV line (field order is the column order)
    - EventExportFile: generated CSV download
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class EventListItem:
    """Event as shown in the events list."""

    event_id: UUID
    name: str
    date: datetime
    image_url: str | None = None


@dataclass
class CategorySummary:
    """Category embedded in an event detail view."""

    category_id: UUID
    name: str


@dataclass
class EventDetail:
    """Full event view with its category resolved.

    Attributes:
        category: Embedded category. None only when the referenced category
            no longer exists.
    """

    event_id: UUID
    name: str
    price: int
    date: datetime
    category_id: UUID
    artist: str | None = None
    description: str | None = None
    image_url: str | None = None
    category: CategorySummary | None = None


@dataclass(frozen=True)
class EventExportRow:
    """One line of the events CSV export.

    Declared field order is the CSV column order.
    """

    event_id: UUID
    name: str
    date: datetime


@dataclass(frozen=True)
class EventExportFile:
    """Generated CSV export.

    Attributes:
        file_name: Random `<uuid>.csv` name for the download.
        content_type: Always "text/csv".
        data: Encoded CSV document.
    """

    file_name: str
    content_type: str
    data: bytes

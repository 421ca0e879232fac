"""Event database model.

Indexes:
    - idx_events_name_date: (name, date) - uniqueness lookup during validation
    - idx_events_date: (date) - ordering and history filtering
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.category import Category


class Event(BaseMutableModel):
    """Event table.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        name: Display name (max 50 characters)
        date: Event date and time (UTC)
        price: Ticket price in whole currency units
        ticket_quantity: Tickets on sale
        short_description, description, image_url, artist: optional details
        category_id: FK to categories.id
    """

    __tablename__ = "events"

    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Event display name",
    )

    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="When the event takes place (UTC)",
    )

    price: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Ticket price in whole currency units",
    )

    ticket_quantity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Number of tickets on sale",
    )

    short_description: Mapped[str | None] = mapped_column(String(200), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    artist: Mapped[str | None] = mapped_column(String(100), nullable=True)

    category_id: Mapped[UUID] = mapped_column(
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
        comment="Owning category",
    )

    category: Mapped["Category"] = relationship(
        back_populates="events",
        lazy="raise",
    )

    __table_args__ = (Index("idx_events_name_date", "name", "date"),)

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, name={self.name!r}, date={self.date})>"

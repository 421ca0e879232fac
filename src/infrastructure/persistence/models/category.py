"""Category database model."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.event import Event


class Category(BaseMutableModel):
    """Category table.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        name: Display name (max 10 characters)
        events: Events in this category (only loaded on request)
    """

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        comment="Category display name",
    )

    events: Mapped[list["Event"]] = relationship(
        back_populates="category",
        lazy="raise",
        order_by="Event.date",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name!r})>"

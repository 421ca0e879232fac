"""Base model and mixins for all database tables.

- BaseModel: id + created_at, for every table
- TimestampMixin: adds updated_at
- BaseMutableModel: BaseModel + TimestampMixin, used by tables that are
  updated after insert (events, categories, orders)

ORM models are an infrastructure detail. Domain entities never inherit
from them; repositories convert in both directions.

Usage:
    class Event(BaseMutableModel):
        __tablename__ = "events"
        name: Mapped[str] = mapped_column(String(50))
"""

from datetime import datetime
from uuid import UUID as PythonUUID, uuid4

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: UUID primary key (generic Uuid type, works on PostgreSQL and SQLite)
    - created_at: creation timestamp (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Adds updated_at, refreshed by the database on UPDATE."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models (id, created_at, updated_at)."""

    __abstract__ = True

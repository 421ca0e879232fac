"""Order and order detail database models.

Schema only; no repository reads or writes these tables yet.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel


class Order(BaseMutableModel):
    """Order table (one row per purchase)."""

    __tablename__ = "orders"

    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    order_total: Mapped[int] = mapped_column(Integer, nullable=False)
    order_placed: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    order_paid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    details: Mapped[list["OrderDetail"]] = relationship(
        back_populates="order",
        lazy="raise",
        cascade="all, delete-orphan",
    )


class OrderDetail(BaseMutableModel):
    """Order line item: quantity of tickets for one event."""

    __tablename__ = "order_details"

    order_id: Mapped[UUID] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    event_id: Mapped[UUID] = mapped_column(
        ForeignKey("events.id"),
        nullable=False,
        index=True,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[int] = mapped_column(Integer, nullable=False)

    order: Mapped[Order] = relationship(back_populates="details", lazy="raise")

"""Order and OrderDetail domain entities.

Part of the data model and persistence schema. No use case reads or
writes orders yet.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.core.datetime_utils import utc_now


@dataclass
class OrderDetail:
    """Line item of an order: a quantity of tickets for one event."""

    id: UUID
    order_id: UUID
    event_id: UUID
    quantity: int
    unit_price: int

    @property
    def line_total(self) -> int:
        """Quantity multiplied by unit price."""
        return self.quantity * self.unit_price


@dataclass
class Order:
    """Ticket order placed by a user.

    Attributes:
        id: Unique order identifier.
        user_id: Purchasing user.
        order_total: Total in whole currency units.
        order_placed: When the order was placed.
        order_paid: Whether payment has been received.
        details: Line items.
    """

    id: UUID
    user_id: UUID
    order_total: int
    order_placed: datetime = field(default_factory=utc_now)
    order_paid: bool = False
    details: list[OrderDetail] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

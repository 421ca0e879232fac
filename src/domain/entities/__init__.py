"""Domain entities for ticket management.

Plain dataclasses with identity and audit timestamps.
"""

from src.domain.entities.category import Category
from src.domain.entities.event import Event
from src.domain.entities.order import Order, OrderDetail

__all__ = [
    "Category",
    "Event",
    "Order",
    "OrderDetail",
]

"""Database models for the persistence layer.

SQLAlchemy models mapped to tables. Domain entities live in
src/domain/entities/ and are converted by the repositories.

Models:
    - category.py: categories
    - event.py: events (FK to categories)
    - order.py: orders and order_details
"""

from src.infrastructure.persistence.models.category import Category
from src.infrastructure.persistence.models.event import Event
from src.infrastructure.persistence.models.order import Order, OrderDetail

__all__ = [
    "Category",
    "Event",
    "Order",
    "OrderDetail",
]

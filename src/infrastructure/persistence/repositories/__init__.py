"""Repository implementations (SQLAlchemy)."""

from src.infrastructure.persistence.repositories.category_repository import (
    CategoryRepository,
)
from src.infrastructure.persistence.repositories.event_repository import (
    EventRepository,
)

__all__ = [
    "CategoryRepository",
    "EventRepository",
]

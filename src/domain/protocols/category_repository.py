"""Category repository protocol."""

from typing import Protocol

from src.domain.entities.category import Category
from src.domain.protocols.async_repository import AsyncRepository


class CategoryRepository(AsyncRepository[Category], Protocol):
    """Persistence operations for categories."""

    async def list_with_events(self, include_history: bool) -> list[Category]:
        """List every category with its events loaded.

        Args:
            include_history: When False, each category's events are limited
                to those dated on or after the start of the current UTC day.
                Categories are returned either way.

        Returns:
            Categories with their `events` populated.
        """
        ...

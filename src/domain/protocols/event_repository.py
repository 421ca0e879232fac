"""Event repository protocol."""

from datetime import datetime
from typing import Protocol

from src.domain.entities.event import Event
from src.domain.protocols.async_repository import AsyncRepository


class EventRepository(AsyncRepository[Event], Protocol):
    """Persistence operations for events.

    Adds the uniqueness query used by event validation.
    """

    async def is_name_and_date_unique(self, name: str, date: datetime) -> bool:
        """Check that no stored event has this exact name and date.

        Args:
            name: Event name (exact match).
            date: Event date (exact match, aware UTC).

        Returns:
            True if no event matches, False otherwise.

        Example:
            >>> if not await repo.is_name_and_date_unique("Rock Night", date):
            ...     errors.append(...)
        """
        ...

    async def commit(self) -> None:
        """Commit pending writes.

        Event creation commits before its notification is sent.
        """
        ...

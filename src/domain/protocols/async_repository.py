"""Generic async repository protocol.

The persistence contract shared by every aggregate. Entity-specific
protocols extend it with their own queries.
"""

from typing import Protocol, TypeVar
from uuid import UUID

T = TypeVar("T")


class AsyncRepository(Protocol[T]):
    """CRUD contract over one entity type.

    Implementations return domain entities, never ORM models, and leave
    committing to the unit of work (the request-scoped session).
    """

    async def get_by_id(self, entity_id: UUID) -> T | None:
        """Fetch one entity by id.

        Returns:
            The entity, or None when it does not exist.
        """
        ...

    async def list_all(self) -> list[T]:
        """Fetch every entity (unordered)."""
        ...

    async def add(self, entity: T) -> T:
        """Persist a new entity.

        Returns:
            The stored entity with its identifier populated.
        """
        ...

    async def update(self, entity: T) -> None:
        """Persist changes to an existing entity."""
        ...

    async def delete(self, entity: T) -> None:
        """Remove an existing entity."""
        ...

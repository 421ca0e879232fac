"""Repository factories.

Repositories are request-scoped: they share the request's session.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.repositories import (
    CategoryRepository,
    EventRepository,
)


def get_event_repository(session: AsyncSession) -> EventRepository:
    """Event repository bound to the given session."""
    return EventRepository(session=session)


def get_category_repository(session: AsyncSession) -> CategoryRepository:
    """Category repository bound to the given session."""
    return CategoryRepository(session=session)

"""Event repository implementation.

SQLAlchemy implementation of the EventRepository protocol. Maps between
the Event domain entity and the Event database model.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.datetime_utils import ensure_utc
from src.domain.entities.event import Event
from src.infrastructure.persistence.models.event import Event as EventModel


class EventRepository:
    """SQLAlchemy implementation of EventRepository protocol.

    Writes flush; the request-scoped session owns the transaction. commit()
    is only called by event creation ahead of its notification.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def get_by_id(self, entity_id: UUID) -> Event | None:
        """Find event by ID.

        Args:
            entity_id: Event identifier.

        Returns:
            Event entity if found, None otherwise.
        """
        stmt = select(EventModel).where(EventModel.id == entity_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def list_all(self) -> list[Event]:
        """List all events in storage order."""
        result = await self._session.execute(select(EventModel))
        return [self._to_entity(m) for m in result.scalars().all()]

    async def add(self, entity: Event) -> Event:
        """Insert a new event.

        Args:
            entity: Event to persist.

        Returns:
            The stored event.
        """
        model = self._to_model(entity)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, entity: Event) -> None:
        """Overwrite the stored row with the entity's fields.

        Args:
            entity: Event carrying the new values.

        Raises:
            LookupError: If the event no longer exists.
        """
        model = await self._session.get(EventModel, entity.id)
        if model is None:
            raise LookupError(f"Event {entity.id} does not exist")

        model.name = entity.name
        model.date = entity.date
        model.price = entity.price
        model.ticket_quantity = entity.ticket_quantity
        model.short_description = entity.short_description
        model.description = entity.description
        model.image_url = entity.image_url
        model.artist = entity.artist
        model.category_id = entity.category_id
        model.updated_at = entity.updated_at

        await self._session.flush()

    async def delete(self, entity: Event) -> None:
        """Delete the event row."""
        await self._session.execute(
            delete(EventModel).where(EventModel.id == entity.id)
        )
        await self._session.flush()

    async def is_name_and_date_unique(self, name: str, date: datetime) -> bool:
        """Check that no event has this exact name and date.

        Args:
            name: Event name.
            date: Event date.

        Returns:
            True if no matching event exists.
        """
        stmt = (
            select(EventModel.id)
            .where(EventModel.name == name, EventModel.date == ensure_utc(date))
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is None

    async def commit(self) -> None:
        """Commit the session transaction.

        The request-scoped session still commits at teardown, which is a
        no-op after this.
        """
        await self._session.commit()

    def _to_entity(self, model: EventModel) -> Event:
        """Map database model to domain entity.

        The category relationship is never touched here; callers that need
        the category resolve it through the category repository.
        """
        return Event(
            id=model.id,
            name=model.name,
            date=ensure_utc(model.date),
            price=model.price,
            ticket_quantity=model.ticket_quantity,
            category_id=model.category_id,
            short_description=model.short_description,
            description=model.description,
            image_url=model.image_url,
            artist=model.artist,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )

    def _to_model(self, entity: Event) -> EventModel:
        """Map domain entity to database model."""
        return EventModel(
            id=entity.id,
            name=entity.name,
            date=entity.date,
            price=entity.price,
            ticket_quantity=entity.ticket_quantity,
            category_id=entity.category_id,
            short_description=entity.short_description,
            description=entity.description,
            image_url=entity.image_url,
            artist=entity.artist,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

"""Category repository implementation.

SQLAlchemy implementation of the CategoryRepository protocol.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.core.datetime_utils import ensure_utc, start_of_today
from src.domain.entities.category import Category
from src.domain.entities.event import Event
from src.infrastructure.persistence.models.category import Category as CategoryModel
from src.infrastructure.persistence.models.event import Event as EventModel


class CategoryRepository:
    """SQLAlchemy implementation of CategoryRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def get_by_id(self, entity_id: UUID) -> Category | None:
        """Find category by ID (events not loaded)."""
        stmt = select(CategoryModel).where(CategoryModel.id == entity_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def list_all(self) -> list[Category]:
        """List all categories (events not loaded)."""
        result = await self._session.execute(select(CategoryModel))
        return [self._to_entity(m) for m in result.scalars().all()]

    async def list_with_events(self, include_history: bool) -> list[Category]:
        """List categories with their events eagerly loaded.

        Args:
            include_history: Include events dated before today (UTC).

        Returns:
            Every category, each with its (possibly filtered) events.
        """
        if include_history:
            events_loader = selectinload(CategoryModel.events)
        else:
            events_loader = selectinload(
                CategoryModel.events.and_(EventModel.date >= start_of_today())
            )

        stmt = (
            select(CategoryModel)
            .options(events_loader)
            .order_by(CategoryModel.name)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return [
            self._to_entity(m, with_events=True) for m in result.scalars().all()
        ]

    async def add(self, entity: Category) -> Category:
        """Insert a new category.

        Returns:
            The stored category.
        """
        model = self._to_model(entity)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, entity: Category) -> None:
        """Overwrite the stored name.

        Raises:
            LookupError: If the category no longer exists.
        """
        model = await self._session.get(CategoryModel, entity.id)
        if model is None:
            raise LookupError(f"Category {entity.id} does not exist")

        model.name = entity.name
        model.updated_at = entity.updated_at
        await self._session.flush()

    async def delete(self, entity: Category) -> None:
        """Delete the category row."""
        await self._session.execute(
            delete(CategoryModel).where(CategoryModel.id == entity.id)
        )
        await self._session.flush()

    def _to_entity(self, model: CategoryModel, with_events: bool = False) -> Category:
        """Map database model to domain entity.

        Args:
            model: Database model.
            with_events: Map the eagerly loaded events collection. Must only
                be set when the query loaded it.
        """
        events = (
            [self._event_to_entity(e) for e in model.events] if with_events else []
        )
        return Category(
            id=model.id,
            name=model.name,
            events=events,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )

    def _to_model(self, entity: Category) -> CategoryModel:
        """Map domain entity to database model."""
        return CategoryModel(
            id=entity.id,
            name=entity.name,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    @staticmethod
    def _event_to_entity(model: EventModel) -> Event:
        return Event(
            id=model.id,
            name=model.name,
            date=model.date,
            price=model.price,
            ticket_quantity=model.ticket_quantity,
            category_id=model.category_id,
            short_description=model.short_description,
            description=model.description,
            image_url=model.image_url,
            artist=model.artist,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

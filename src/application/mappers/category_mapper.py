"""Category mappers."""

from uuid_extensions import uuid7

from src.application.commands.category_commands import CreateCategory
from src.application.dtos.category_dtos import (
    CategoryEventItem,
    CategoryListItem,
    CategoryWithEvents,
    CreatedCategory,
)
from src.core.datetime_utils import utc_now
from src.domain.entities.category import Category
from src.domain.entities.event import Event


def category_to_list_item(category: Category) -> CategoryListItem:
    return CategoryListItem(category_id=category.id, name=category.name)


def event_to_category_event_item(event: Event) -> CategoryEventItem:
    return CategoryEventItem(
        event_id=event.id,
        name=event.name,
        price=event.price,
        date=event.date,
        category_id=event.category_id,
        artist=event.artist,
    )


def category_to_with_events(category: Category) -> CategoryWithEvents:
    """Map a category and its loaded events (order preserved)."""
    return CategoryWithEvents(
        category_id=category.id,
        name=category.name,
        events=[event_to_category_event_item(e) for e in category.events],
    )


def category_to_created(category: Category) -> CreatedCategory:
    return CreatedCategory(category_id=category.id, name=category.name)


def create_category_command_to_entity(command: CreateCategory) -> Category:
    """Build a new Category from a validated CreateCategory.

    Raises:
        ValueError: If the name is missing (validation not run).
    """
    if command.name is None:
        raise ValueError("CreateCategory must be validated before mapping")

    now = utc_now()
    return Category(id=uuid7(), name=command.name, created_at=now, updated_at=now)

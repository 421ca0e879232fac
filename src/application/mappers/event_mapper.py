"""Event mappers.

Conversions between the Event entity, event commands and event DTOs.
"""

from dataclasses import replace

from uuid_extensions import uuid7

from src.application.commands.event_commands import CreateEvent, UpdateEvent
from src.application.dtos.event_dtos import (
    CategorySummary,
    EventDetail,
    EventExportRow,
    EventListItem,
)
from src.core.datetime_utils import ensure_utc, utc_now
from src.domain.entities.category import Category
from src.domain.entities.event import Event


def event_to_list_item(event: Event) -> EventListItem:
    return EventListItem(
        event_id=event.id,
        name=event.name,
        date=event.date,
        image_url=event.image_url,
    )


def category_to_summary(category: Category) -> CategorySummary:
    return CategorySummary(category_id=category.id, name=category.name)


def event_to_detail(event: Event, category: Category | None = None) -> EventDetail:
    """Map an event to its detail view.

    Args:
        event: Source event.
        category: Resolved category to embed, if found.
    """
    return EventDetail(
        event_id=event.id,
        name=event.name,
        price=event.price,
        date=event.date,
        category_id=event.category_id,
        artist=event.artist,
        description=event.description,
        image_url=event.image_url,
        category=category_to_summary(category) if category is not None else None,
    )


def event_to_export_row(event: Event) -> EventExportRow:
    return EventExportRow(event_id=event.id, name=event.name, date=event.date)


def create_event_command_to_entity(command: CreateEvent) -> Event:
    """Build a new Event from a validated CreateEvent.

    Raises:
        ValueError: If a required field is missing (validation not run).
    """
    if command.name is None or command.date is None or command.category_id is None:
        raise ValueError("CreateEvent must be validated before mapping")

    now = utc_now()
    return Event(
        id=uuid7(),
        name=command.name,
        date=ensure_utc(command.date),
        price=command.price,
        ticket_quantity=command.ticket_quantity,
        category_id=command.category_id,
        short_description=command.short_description,
        description=command.description,
        image_url=command.image_url,
        artist=command.artist,
        created_at=now,
        updated_at=now,
    )


def apply_update_event_command(command: UpdateEvent, event: Event) -> Event:
    """Overwrite an existing event's mapped fields from an UpdateEvent.

    Identity and created_at are kept; updated_at is refreshed. Returns a
    new Event and leaves the input untouched.

    Raises:
        ValueError: If a required field is missing (validation not run).
    """
    if command.name is None or command.date is None or command.category_id is None:
        raise ValueError("UpdateEvent must be validated before mapping")

    return replace(
        event,
        name=command.name,
        date=ensure_utc(command.date),
        price=command.price,
        ticket_quantity=command.ticket_quantity,
        category_id=command.category_id,
        short_description=command.short_description,
        description=command.description,
        image_url=command.image_url,
        artist=command.artist,
        updated_at=utc_now(),
    )

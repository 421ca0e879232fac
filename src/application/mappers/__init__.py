"""Entity <-> DTO conversion functions.

One explicit function per source/target pair. Target fields without a
source counterpart keep their defaults.

Usage:
    from src.application.mappers import event_to_list_item, map_all

    items = map_all(event_to_list_item, events)
"""

from collections.abc import Callable, Iterable
from typing import TypeVar

from src.application.mappers.category_mapper import (
    category_to_created,
    category_to_list_item,
    category_to_with_events,
    create_category_command_to_entity,
    event_to_category_event_item,
)
from src.application.mappers.event_mapper import (
    apply_update_event_command,
    category_to_summary,
    create_event_command_to_entity,
    event_to_detail,
    event_to_export_row,
    event_to_list_item,
)

S = TypeVar("S")
D = TypeVar("D")


def map_all(mapper: Callable[[S], D], items: Iterable[S]) -> list[D]:
    """Apply a mapper to each item, preserving order."""
    return [mapper(item) for item in items]


__all__ = [
    "apply_update_event_command",
    "category_to_created",
    "category_to_list_item",
    "category_to_summary",
    "category_to_with_events",
    "create_category_command_to_entity",
    "create_event_command_to_entity",
    "event_to_category_event_item",
    "event_to_detail",
    "event_to_export_row",
    "event_to_list_item",
    "map_all",
]

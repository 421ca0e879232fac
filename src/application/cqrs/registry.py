"""CQRS Registry - Single Source of Truth for Commands and Queries.

Catalogs every command and query with its handler. Used for:
- Dispatcher wiring (every entry must receive a handler factory)
- Startup validation (duplicates, missing handle() methods)
- Compliance tests (no drift between registry, handlers and container)

Adding new commands/queries:
1. Define the dataclass in *_commands.py / *_queries.py
2. Create the handler class in handlers/
3. Add an entry to COMMAND_REGISTRY or QUERY_REGISTRY below
4. Add get_<name>_handler to the container
"""

from src.application.commands.category_commands import CreateCategory
from src.application.commands.event_commands import (
    CreateEvent,
    DeleteEvent,
    UpdateEvent,
)
from src.application.commands.handlers.create_category_handler import (
    CreateCategoryHandler,
)
from src.application.commands.handlers.create_event_handler import CreateEventHandler
from src.application.commands.handlers.delete_event_handler import DeleteEventHandler
from src.application.commands.handlers.update_event_handler import UpdateEventHandler
from src.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
    get_request_class,
)
from src.application.dtos.category_dtos import (
    CategoryListItem,
    CategoryWithEvents,
    CreateCategoryResult,
)
from src.application.dtos.event_dtos import EventDetail, EventExportFile, EventListItem
from src.application.queries.category_queries import (
    GetCategoriesList,
    GetCategoriesListWithEvents,
)
from src.application.queries.event_queries import (
    GetEventDetail,
    GetEventsExport,
    GetEventsList,
)
from src.application.queries.handlers.get_categories_list_handler import (
    GetCategoriesListHandler,
)
from src.application.queries.handlers.get_categories_list_with_events_handler import (
    GetCategoriesListWithEventsHandler,
)
from src.application.queries.handlers.get_event_detail_handler import (
    GetEventDetailHandler,
)
from src.application.queries.handlers.get_events_export_handler import (
    GetEventsExportHandler,
)
from src.application.queries.handlers.get_events_list_handler import (
    GetEventsListHandler,
)

# ═══════════════════════════════════════════════════════════════════════════
# COMMAND REGISTRY (4 commands)
# ═══════════════════════════════════════════════════════════════════════════

COMMAND_REGISTRY: list[CommandMetadata] = [
    CommandMetadata(
        command_class=CreateEvent,
        handler_class=CreateEventHandler,
        category=CQRSCategory.EVENT,
        has_result_dto=False,  # Returns UUID
        sends_notification=True,
        description="Validate and create an event, then notify by email",
    ),
    CommandMetadata(
        command_class=UpdateEvent,
        handler_class=UpdateEventHandler,
        category=CQRSCategory.EVENT,
        description="Overwrite the fields of an existing event",
    ),
    CommandMetadata(
        command_class=DeleteEvent,
        handler_class=DeleteEventHandler,
        category=CQRSCategory.EVENT,
        description="Delete an existing event",
    ),
    CommandMetadata(
        command_class=CreateCategory,
        handler_class=CreateCategoryHandler,
        category=CQRSCategory.CATEGORY,
        has_result_dto=True,
        result_dto_class=CreateCategoryResult,
        description="Create a category; validation errors go in the envelope",
    ),
]

# ═══════════════════════════════════════════════════════════════════════════
# QUERY REGISTRY (5 queries)
# ═══════════════════════════════════════════════════════════════════════════

QUERY_REGISTRY: list[QueryMetadata] = [
    QueryMetadata(
        query_class=GetEventsList,
        handler_class=GetEventsListHandler,
        category=CQRSCategory.EVENT,
        result_dto_class=EventListItem,
        returns_list=True,
        description="List all events ordered by date",
    ),
    QueryMetadata(
        query_class=GetEventDetail,
        handler_class=GetEventDetailHandler,
        category=CQRSCategory.EVENT,
        result_dto_class=EventDetail,
        description="Get one event with its category embedded",
    ),
    QueryMetadata(
        query_class=GetEventsExport,
        handler_class=GetEventsExportHandler,
        category=CQRSCategory.EVENT,
        result_dto_class=EventExportFile,
        description="Export all events as CSV",
    ),
    QueryMetadata(
        query_class=GetCategoriesList,
        handler_class=GetCategoriesListHandler,
        category=CQRSCategory.CATEGORY,
        result_dto_class=CategoryListItem,
        returns_list=True,
        description="List all categories ordered by name",
    ),
    QueryMetadata(
        query_class=GetCategoriesListWithEvents,
        handler_class=GetCategoriesListWithEventsHandler,
        category=CQRSCategory.CATEGORY,
        result_dto_class=CategoryWithEvents,
        returns_list=True,
        description="List categories with upcoming (or all) events",
    ),
]


# ═══════════════════════════════════════════════════════════════════════════
# Computed views
# ═══════════════════════════════════════════════════════════════════════════


def get_all_entries() -> list[CommandMetadata | QueryMetadata]:
    """Every registry entry, commands first."""
    return [*COMMAND_REGISTRY, *QUERY_REGISTRY]


def get_all_request_classes() -> list[type]:
    """Every command and query class in the registry."""
    return [get_request_class(meta) for meta in get_all_entries()]


def get_commands_by_category(category: CQRSCategory) -> list[CommandMetadata]:
    """Commands belonging to one category."""
    return [meta for meta in COMMAND_REGISTRY if meta.category == category]


def get_queries_by_category(category: CQRSCategory) -> list[QueryMetadata]:
    """Queries belonging to one category."""
    return [meta for meta in QUERY_REGISTRY if meta.category == category]


def get_metadata(request_class: type) -> CommandMetadata | QueryMetadata | None:
    """Registry entry for a command or query class, if registered."""
    for meta in get_all_entries():
        if get_request_class(meta) is request_class:
            return meta
    return None


def validate_registry_consistency() -> list[str]:
    """Validate registry for common issues.

    Returns:
        List of error messages. Empty if registry is consistent.
    """
    errors: list[str] = []

    request_classes = get_all_request_classes()
    seen: set[type] = set()
    for request_class in request_classes:
        if request_class in seen:
            errors.append(f"Duplicate registry entry for {request_class.__name__}")
        seen.add(request_class)

    for meta in get_all_entries():
        if not callable(getattr(meta.handler_class, "handle", None)):
            errors.append(
                f"Handler {meta.handler_class.__name__} missing handle() method"
            )

    return errors

"""Query handlers."""

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

__all__ = [
    "GetCategoriesListHandler",
    "GetCategoriesListWithEventsHandler",
    "GetEventDetailHandler",
    "GetEventsExportHandler",
    "GetEventsListHandler",
]

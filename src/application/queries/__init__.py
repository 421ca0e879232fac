"""Queries (CQRS read requests).

Usage:
    from src.application.queries import GetEventDetail, GetCategoriesList
"""

from src.application.queries.category_queries import (
    GetCategoriesList,
    GetCategoriesListWithEvents,
)
from src.application.queries.event_queries import (
    GetEventDetail,
    GetEventsExport,
    GetEventsList,
)

__all__ = [
    "GetCategoriesList",
    "GetCategoriesListWithEvents",
    "GetEventDetail",
    "GetEventsExport",
    "GetEventsList",
]

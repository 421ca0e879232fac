"""Data Transfer Objects (DTOs) for the application layer.

Result dataclasses returned by handlers. They are NOT the Pydantic API
schemas (src/schemas), which wrap them for HTTP.

Usage:
    from src.application.dtos import EventDetail, CreateCategoryResult
"""

from src.application.dtos.category_dtos import (
    BaseResponse,
    CategoryEventItem,
    CategoryListItem,
    CategoryWithEvents,
    CreateCategoryResult,
    CreatedCategory,
)
from src.application.dtos.event_dtos import (
    CategorySummary,
    EventDetail,
    EventExportFile,
    EventExportRow,
    EventListItem,
)

__all__ = [
    "BaseResponse",
    "CategoryEventItem",
    "CategoryListItem",
    "CategorySummary",
    "CategoryWithEvents",
    "CreateCategoryResult",
    "CreatedCategory",
    "EventDetail",
    "EventExportFile",
    "EventExportRow",
    "EventListItem",
]

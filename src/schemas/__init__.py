"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import CreateEventRequest, EventDetailResponse
"""

from src.schemas.category_schemas import (
    CategoryEventResponse,
    CategoryListResponse,
    CategoryWithEventsResponse,
    CreateCategoryRequest,
    CreateCategoryResponse,
    CreatedCategoryResponse,
)
from src.schemas.common_schemas import BaseEnvelopeResponse, CamelModel
from src.schemas.event_schemas import (
    CategorySummaryResponse,
    CreateEventRequest,
    EventDetailResponse,
    EventListResponse,
    UpdateEventRequest,
)

__all__ = [
    # Common
    "CamelModel",
    "BaseEnvelopeResponse",
    # Events
    "CreateEventRequest",
    "UpdateEventRequest",
    "EventListResponse",
    "CategorySummaryResponse",
    "EventDetailResponse",
    # Categories
    "CreateCategoryRequest",
    "CategoryListResponse",
    "CategoryEventResponse",
    "CategoryWithEventsResponse",
    "CreatedCategoryResponse",
    "CreateCategoryResponse",
]

"""Category request and response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from src.application.commands import CreateCategory
from src.application.dtos import (
    CategoryEventItem,
    CategoryListItem,
    CategoryWithEvents,
    CreateCategoryResult,
    CreatedCategory,
)
from src.schemas.common_schemas import BaseEnvelopeResponse, CamelModel


# =============================================================================
# Request Schemas
# =============================================================================


class CreateCategoryRequest(CamelModel):
    """Request body for creating a category."""

    name: str | None = Field(
        None, description="Category name (max 10 characters)", examples=["Concerts"]
    )

    def to_command(self) -> CreateCategory:
        """Convert request body to the CreateCategory command."""
        return CreateCategory(name=self.name)


# =============================================================================
# Response Schemas
# =============================================================================


class CategoryListResponse(CamelModel):
    """Row of the categories list."""

    category_id: UUID = Field(..., description="Category identifier")
    name: str = Field(..., description="Category name")

    @classmethod
    def from_dto(cls, dto: CategoryListItem) -> "CategoryListResponse":
        """Convert application DTO to response schema."""
        return cls(category_id=dto.category_id, name=dto.name)


class CategoryEventResponse(CamelModel):
    """Event nested under a category."""

    event_id: UUID = Field(..., description="Event identifier")
    name: str = Field(..., description="Event name")
    price: int = Field(..., description="Ticket price")
    artist: str | None = Field(None, description="Performing artist")
    date: datetime = Field(..., description="Event date")
    category_id: UUID = Field(..., description="Category identifier")

    @classmethod
    def from_dto(cls, dto: CategoryEventItem) -> "CategoryEventResponse":
        """Convert application DTO to response schema."""
        return cls(
            event_id=dto.event_id,
            name=dto.name,
            price=dto.price,
            artist=dto.artist,
            date=dto.date,
            category_id=dto.category_id,
        )


class CategoryWithEventsResponse(CamelModel):
    """Category with its events (upcoming only unless history requested)."""

    category_id: UUID = Field(..., description="Category identifier")
    name: str = Field(..., description="Category name")
    events: list[CategoryEventResponse] = Field(
        default_factory=list, description="Events ordered by date"
    )

    @classmethod
    def from_dto(cls, dto: CategoryWithEvents) -> "CategoryWithEventsResponse":
        """Convert application DTO to response schema."""
        return cls(
            category_id=dto.category_id,
            name=dto.name,
            events=[CategoryEventResponse.from_dto(e) for e in dto.events],
        )


class CreatedCategoryResponse(CamelModel):
    """Category returned after creation."""

    category_id: UUID = Field(..., description="Category identifier")
    name: str = Field(..., description="Category name")

    @classmethod
    def from_dto(cls, dto: CreatedCategory) -> "CreatedCategoryResponse":
        """Convert application DTO to response schema."""
        return cls(category_id=dto.category_id, name=dto.name)


class CreateCategoryResponse(BaseEnvelopeResponse):
    """Category creation envelope.

    Attributes:
        category: Created category, null when validation failed.
    """

    category: CreatedCategoryResponse | None = Field(
        None, description="Created category"
    )

    @classmethod
    def from_dto(cls, dto: CreateCategoryResult) -> "CreateCategoryResponse":
        """Convert the handler envelope to response schema.

        Args:
            dto: CreateCategoryResult from the create handler.

        Returns:
            CreateCategoryResponse for API response.
        """
        return cls(
            success=dto.success,
            message=dto.message,
            validation_errors=list(dto.validation_errors),
            category=(
                CreatedCategoryResponse.from_dto(dto.category)
                if dto.category is not None
                else None
            ),
        )

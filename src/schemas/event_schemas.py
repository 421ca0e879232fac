"""Event request and response schemas.

Pydantic schemas for the events endpoints. Includes:
- Request schemas (client → API) with command conversion
- Response schemas (API → client) built from application DTOs
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from src.application.commands import CreateEvent, UpdateEvent
from src.application.dtos import CategorySummary, EventDetail, EventListItem
from src.schemas.common_schemas import CamelModel


# =============================================================================
# Request Schemas
# =============================================================================


class CreateEventRequest(CamelModel):
    """Request body for creating an event.

    Presence and range rules are enforced by the create validator, so
    every rule-checked field is optional here and reported with the others.
    """

    name: str | None = Field(
        None, description="Event name (max 50 characters)", examples=["Rock Night"]
    )
    date: datetime | None = Field(None, description="Event date, in the future")
    price: int = Field(0, description="Ticket price (> 0)", examples=[50])
    ticket_quantity: int = Field(0, description="Tickets on sale (> 0)", examples=[100])
    category_id: UUID | None = Field(None, description="Owning category")
    short_description: str | None = Field(None, description="Teaser text")
    description: str | None = Field(None, description="Full description")
    image_url: str | None = Field(None, description="Image URL")
    artist: str | None = Field(None, description="Performing artist")

    def to_command(self) -> CreateEvent:
        """Convert request body to the CreateEvent command."""
        return CreateEvent(
            name=self.name,
            date=self.date,
            price=self.price,
            ticket_quantity=self.ticket_quantity,
            category_id=self.category_id,
            short_description=self.short_description,
            description=self.description,
            image_url=self.image_url,
            artist=self.artist,
        )


class UpdateEventRequest(CreateEventRequest):
    """Request body for updating an event (identifier carried in the body)."""

    event_id: UUID = Field(..., description="Event to update")

    def to_command(self) -> UpdateEvent:  # type: ignore[override]
        """Convert request body to the UpdateEvent command."""
        return UpdateEvent(
            event_id=self.event_id,
            name=self.name,
            date=self.date,
            price=self.price,
            ticket_quantity=self.ticket_quantity,
            category_id=self.category_id,
            short_description=self.short_description,
            description=self.description,
            image_url=self.image_url,
            artist=self.artist,
        )


# =============================================================================
# Response Schemas
# =============================================================================


class EventListResponse(CamelModel):
    """Row of the events list."""

    event_id: UUID = Field(..., description="Event identifier")
    name: str = Field(..., description="Event name")
    date: datetime = Field(..., description="Event date")
    image_url: str | None = Field(None, description="Image URL")

    @classmethod
    def from_dto(cls, dto: EventListItem) -> "EventListResponse":
        """Convert application DTO to response schema."""
        return cls(
            event_id=dto.event_id,
            name=dto.name,
            date=dto.date,
            image_url=dto.image_url,
        )


class CategorySummaryResponse(CamelModel):
    """Category embedded in an event detail."""

    category_id: UUID = Field(..., description="Category identifier")
    name: str = Field(..., description="Category name")

    @classmethod
    def from_dto(cls, dto: CategorySummary) -> "CategorySummaryResponse":
        """Convert application DTO to response schema."""
        return cls(category_id=dto.category_id, name=dto.name)


class EventDetailResponse(CamelModel):
    """Single event with its category.

    Attributes:
        category: Embedded category, null only when the referenced category
            no longer exists.
    """

    event_id: UUID = Field(..., description="Event identifier")
    name: str = Field(..., description="Event name")
    price: int = Field(..., description="Ticket price")
    artist: str | None = Field(None, description="Performing artist")
    date: datetime = Field(..., description="Event date")
    description: str | None = Field(None, description="Full description")
    image_url: str | None = Field(None, description="Image URL")
    category_id: UUID = Field(..., description="Category identifier")
    category: CategorySummaryResponse | None = Field(
        None, description="Embedded category"
    )

    @classmethod
    def from_dto(cls, dto: EventDetail) -> "EventDetailResponse":
        """Convert application DTO to response schema.

        Args:
            dto: EventDetail from the detail handler.

        Returns:
            EventDetailResponse for API response.
        """
        return cls(
            event_id=dto.event_id,
            name=dto.name,
            price=dto.price,
            artist=dto.artist,
            date=dto.date,
            description=dto.description,
            image_url=dto.image_url,
            category_id=dto.category_id,
            category=(
                CategorySummaryResponse.from_dto(dto.category)
                if dto.category is not None
                else None
            ),
        )

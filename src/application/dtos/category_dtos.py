"""Category DTOs.

DTOs:
    - CategoryListItem: row of the categories list
    - CategoryEventItem: event nested under a category
    - CategoryWithEvents: category with its events
    - CreatedCategory: category returned after creation
    - BaseResponse: success/message/validation_errors envelope
    - CreateCategoryResult: envelope returned by category creation
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class CategoryListItem:
    """Category as shown in the categories list."""

    category_id: UUID
    name: str


@dataclass
class CategoryEventItem:
    """Event nested under its category."""

    event_id: UUID
    name: str
    price: int
    date: datetime
    category_id: UUID
    artist: str | None = None


@dataclass
class CategoryWithEvents:
    """Category together with its (optionally filtered) events."""

    category_id: UUID
    name: str
    events: list[CategoryEventItem] = field(default_factory=list)


@dataclass
class CreatedCategory:
    """Category as returned by the create handler."""

    category_id: UUID
    name: str


@dataclass(kw_only=True)
class BaseResponse:
    """Envelope for command results that report failure without raising.

    Attributes:
        success: False when validation failed and nothing was persisted.
        message: Optional human-readable summary.
        validation_errors: Rule violations, empty on success.
    """

    success: bool = True
    message: str | None = None
    validation_errors: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class CreateCategoryResult(BaseResponse):
    """Category creation envelope.

    Attributes:
        category: The created category, None when validation failed.
    """

    category: CreatedCategory | None = None

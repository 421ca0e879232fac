"""Category domain entity.

Groups events (Concerts, Musicals, Plays, Conferences). Events reference a
category by id; the category never owns their lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from src.core.datetime_utils import utc_now

if TYPE_CHECKING:
    from src.domain.entities.event import Event


@dataclass
class Category:
    """Event category.

    Attributes:
        id: Unique category identifier.
        name: Display name (max 10 characters).
        events: Events in this category. Only populated by queries that
            load them explicitly.
        created_at: When the category was created.
        updated_at: When the category was last modified.
    """

    id: UUID
    name: str
    events: list[Event] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

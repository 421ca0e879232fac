"""Event queries (CQRS read operations).

Queries are immutable and NEVER change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetEventsList:
    """List every event, ordered by date ascending."""


@dataclass(frozen=True, kw_only=True)
class GetEventDetail:
    """Get one event with its category embedded.

    Attributes:
        event_id: Event to retrieve.

    Example:
        >>> result = await dispatcher.send(GetEventDetail(event_id=event_id))
    """

    event_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetEventsExport:
    """Export every event, ordered by date, as a CSV file."""

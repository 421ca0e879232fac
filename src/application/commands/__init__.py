"""Commands (CQRS write requests).

Usage:
    from src.application.commands import CreateEvent, CreateCategory
"""

from src.application.commands.category_commands import CreateCategory
from src.application.commands.event_commands import (
    CreateEvent,
    DeleteEvent,
    UpdateEvent,
)

__all__ = [
    "CreateCategory",
    "CreateEvent",
    "DeleteEvent",
    "UpdateEvent",
]

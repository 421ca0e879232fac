"""Command handlers."""

from src.application.commands.handlers.create_category_handler import (
    CreateCategoryHandler,
)
from src.application.commands.handlers.create_event_handler import CreateEventHandler
from src.application.commands.handlers.delete_event_handler import DeleteEventHandler
from src.application.commands.handlers.update_event_handler import UpdateEventHandler

__all__ = [
    "CreateCategoryHandler",
    "CreateEventHandler",
    "DeleteEventHandler",
    "UpdateEventHandler",
]

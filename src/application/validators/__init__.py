"""Command validators.

Each validator returns every rule violation as a list of ValidationError
(empty list means valid). Handlers decide what a failure means: event
commands abort, category creation reports through its envelope.
"""

from src.application.validators.category_validators import CreateCategoryValidator
from src.application.validators.event_validators import (
    CreateEventValidator,
    UpdateEventValidator,
)

__all__ = [
    "CreateCategoryValidator",
    "CreateEventValidator",
    "UpdateEventValidator",
]

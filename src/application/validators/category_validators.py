"""Category command validators."""

from src.application.commands.category_commands import CreateCategory
from src.core.errors import ValidationError
from src.core.result import Failure
from src.core.validation import validate_max_length, validate_required

NAME_MAX_LENGTH = 10


class CreateCategoryValidator:
    """Validates CreateCategory: name required, max 10 characters."""

    async def validate(self, command: CreateCategory) -> list[ValidationError]:
        """Return every violation for the command."""
        results = (
            validate_required(command.name, "name", "Name"),
            validate_max_length(command.name, NAME_MAX_LENGTH, "name", "Name"),
        )
        return [r.error for r in results if isinstance(r, Failure)]

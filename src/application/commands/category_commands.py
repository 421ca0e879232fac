"""Category commands (CQRS write operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CreateCategory:
    """Create a new category.

    Validation failures do not abort: the handler answers with a
    CreateCategoryResult envelope whose success flag is False.

    Attributes:
        name: Category name (required, max 10 characters).
    """

    name: str | None = None

"""Category queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetCategoriesList:
    """List every category, ordered by name ascending."""


@dataclass(frozen=True, kw_only=True)
class GetCategoriesListWithEvents:
    """List every category with its events.

    Attributes:
        include_history: When False, only events dated today or later are
            nested under each category.
    """

    include_history: bool = False

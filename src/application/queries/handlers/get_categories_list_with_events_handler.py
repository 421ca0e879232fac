"""GetCategoriesListWithEvents query handler.

Past events are dropped from each category unless include_history is
set; the repository applies the filter in the query.
"""

from src.application.dtos.category_dtos import CategoryWithEvents
from src.application.errors import ApplicationError
from src.application.mappers import category_to_with_events, map_all
from src.application.queries.category_queries import GetCategoriesListWithEvents
from src.core.result import Result, Success
from src.domain.protocols.category_repository import CategoryRepository


class GetCategoriesListWithEventsHandler:
    """Handler for GetCategoriesListWithEvents query."""

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    async def handle(
        self, query: GetCategoriesListWithEvents
    ) -> Result[list[CategoryWithEvents], ApplicationError]:
        categories = await self._category_repo.list_with_events(
            include_history=query.include_history
        )
        return Success(value=map_all(category_to_with_events, categories))

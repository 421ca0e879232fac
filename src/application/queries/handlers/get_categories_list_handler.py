"""GetCategoriesList query handler."""

from src.application.dtos.category_dtos import CategoryListItem
from src.application.errors import ApplicationError
from src.application.mappers import category_to_list_item, map_all
from src.application.queries.category_queries import GetCategoriesList
from src.core.result import Result, Success
from src.domain.protocols.category_repository import CategoryRepository


class GetCategoriesListHandler:
    """Lists every category, ordered by name ascending."""

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    async def handle(
        self, query: GetCategoriesList
    ) -> Result[list[CategoryListItem], ApplicationError]:
        categories = await self._category_repo.list_all()
        ordered = sorted(categories, key=lambda c: c.name)
        return Success(value=map_all(category_to_list_item, ordered))

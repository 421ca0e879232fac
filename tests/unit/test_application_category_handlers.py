"""Unit tests for the category command and query handlers."""

from datetime import timedelta
from unittest.mock import AsyncMock, Mock

import pytest

from src.application.commands import CreateCategory
from src.application.commands.handlers import CreateCategoryHandler
from src.application.queries import GetCategoriesList, GetCategoriesListWithEvents
from src.application.queries.handlers import (
    GetCategoriesListHandler,
    GetCategoriesListWithEventsHandler,
)
from src.core.result import Success
from src.domain.protocols.category_repository import CategoryRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from tests.conftest import create_category, create_event, next_month


@pytest.fixture
def mock_category_repo() -> AsyncMock:
    repo = AsyncMock(spec=CategoryRepository)
    repo.add.side_effect = lambda category: category
    return repo


@pytest.fixture
def mock_logger() -> Mock:
    return Mock(spec=LoggerProtocol)


@pytest.mark.unit
class TestGetCategoriesListHandler:
    """GetCategoriesListHandler.handle()"""

    async def test_sorted_by_name(self, mock_category_repo):
        mock_category_repo.list_all.return_value = [
            create_category("Plays"),
            create_category("Concerts"),
            create_category("Musicals"),
        ]

        result = await GetCategoriesListHandler(mock_category_repo).handle(
            GetCategoriesList()
        )

        assert isinstance(result, Success)
        assert [c.name for c in result.value] == ["Concerts", "Musicals", "Plays"]


@pytest.mark.unit
class TestGetCategoriesListWithEventsHandler:
    """GetCategoriesListWithEventsHandler.handle()"""

    @pytest.mark.parametrize("include_history", [True, False])
    async def test_passes_history_flag(self, mock_category_repo, include_history):
        mock_category_repo.list_with_events.return_value = []

        await GetCategoriesListWithEventsHandler(mock_category_repo).handle(
            GetCategoriesListWithEvents(include_history=include_history)
        )

        mock_category_repo.list_with_events.assert_awaited_once_with(
            include_history=include_history
        )

    async def test_maps_nested_events(self, mock_category_repo):
        concerts = create_category("Concerts")
        concerts.events = [
            create_event("Rock Night", category_id=concerts.id, artist="The Band"),
            create_event(
                "Jazz Night",
                date=next_month() + timedelta(days=1),
                category_id=concerts.id,
            ),
        ]
        mock_category_repo.list_with_events.return_value = [
            concerts,
            create_category("Plays"),
        ]

        result = await GetCategoriesListWithEventsHandler(mock_category_repo).handle(
            GetCategoriesListWithEvents(include_history=False)
        )

        first, second = result.value
        assert first.category_id == concerts.id
        assert [e.name for e in first.events] == ["Rock Night", "Jazz Night"]
        assert first.events[0].artist == "The Band"
        assert first.events[0].category_id == concerts.id
        assert second.name == "Plays"
        assert second.events == []


@pytest.mark.unit
class TestCreateCategoryHandler:
    """CreateCategoryHandler.handle()"""

    async def test_created(self, mock_category_repo, mock_logger):
        result = await CreateCategoryHandler(mock_category_repo, mock_logger).handle(
            CreateCategory(name="Comedy")
        )

        assert isinstance(result, Success)
        envelope = result.value
        assert envelope.success is True
        assert envelope.message == "Category created"
        assert envelope.validation_errors == []
        stored = mock_category_repo.add.await_args.args[0]
        assert envelope.category.category_id == stored.id
        assert envelope.category.name == "Comedy"

    @pytest.mark.parametrize(
        ("name", "message"),
        [
            (None, "Name is required."),
            ("", "Name is required."),
            ("Stand-up comedy", "Name must not exceed 10 characters."),
        ],
    )
    async def test_invalid_name_reported_in_envelope(
        self, mock_category_repo, mock_logger, name, message
    ):
        result = await CreateCategoryHandler(mock_category_repo, mock_logger).handle(
            CreateCategory(name=name)
        )

        assert isinstance(result, Success)
        envelope = result.value
        assert envelope.success is False
        assert envelope.message == "Category validation failed"
        assert envelope.validation_errors == [message]
        assert envelope.category is None
        mock_category_repo.add.assert_not_awaited()

"""Fixtures for HTTP layer tests.

The real app is used with get_dispatcher overridden, so only the HTTP
mapping is under test. The lifespan does not run (TestClient is not used
as a context manager), so no database is touched.
"""

from collections.abc import Callable
from typing import Any

import pytest
from fastapi.testclient import TestClient

from src.application.cqrs import Dispatcher
from src.core.container import get_dispatcher
from src.core.result import Failure, Success
from src.main import app


class StubHandler:
    """Handler double that returns a fixed result and records requests."""

    def __init__(self, result: Success | Failure) -> None:
        self.result = result
        self.requests: list[Any] = []

    async def handle(self, request: Any) -> Success | Failure:
        self.requests.append(request)
        return self.result


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def use_handlers() -> Callable[[dict[type, StubHandler]], None]:
    """Route the given request types to stub handlers for one test.

    Usage:
        def test_something(client, use_handlers):
            handler = StubHandler(Success(value=[]))
            use_handlers({GetEventsList: handler})
    """

    def install(handlers: dict[type, StubHandler]) -> None:
        dispatcher = Dispatcher()
        for request_type, handler in handlers.items():
            dispatcher.register(request_type, lambda h=handler: h)
        app.dependency_overrides[get_dispatcher] = lambda: dispatcher

    yield install
    app.dependency_overrides.clear()

"""Fixtures for end-to-end smoke tests.

The real app runs against a throwaway SQLite database: get_db_session is
overridden to hand out sessions from the test_database fixture. Email
goes to the stub service (SENDGRID_API_KEY is blank in tests).
"""

import httpx
import pytest_asyncio

from src.core.container import get_db_session
from src.main import app


@pytest_asyncio.fixture
async def api(test_database):
    """Async HTTP client wired to the full application stack."""

    async def override_db_session():
        async with test_database.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()

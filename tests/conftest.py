"""Pytest configuration shared by every test package.

Settings are read once at import time (src.core.config.settings), so the
environment is prepared here, before any src module is imported:
- ENVIRONMENT=testing (JSON logs)
- DATABASE_URL points at a throwaway SQLite file
- SendGrid disabled (stub email service)
"""

import os
import tempfile
from datetime import UTC, datetime, timedelta
from pathlib import Path
from uuid import UUID

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'ticket_management_test.db'}",
)
os.environ["SENDGRID_API_KEY"] = ""

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.domain.entities.category import Category  # noqa: E402
from src.domain.entities.event import Event  # noqa: E402


# =============================================================================
# Test helper functions for domain entities
# =============================================================================


def next_month() -> datetime:
    """A date safely in the future, truncated to whole seconds."""
    return (datetime.now(UTC) + timedelta(days=30)).replace(microsecond=0)


def create_category(name: str = "Concerts", category_id: UUID | None = None) -> Category:
    """Helper to create a Category for testing."""
    return Category(id=category_id or uuid7(), name=name)


def create_event(
    name: str = "Rock Night",
    date: datetime | None = None,
    category_id: UUID | None = None,
    price: int = 50,
    ticket_quantity: int = 100,
    **overrides,
) -> Event:
    """Helper to create an Event for testing.

    Args:
        name: Event name (default: "Rock Night").
        date: Event date (default: one month from now).
        category_id: Owning category (default: random id).
        price: Ticket price.
        ticket_quantity: Tickets on sale.
        **overrides: Any other Event field.
    """
    return Event(
        id=overrides.pop("id", None) or uuid7(),
        name=name,
        date=date or next_month(),
        price=price,
        ticket_quantity=ticket_quantity,
        category_id=category_id or uuid7(),
        **overrides,
    )


@pytest.fixture
def future_date() -> datetime:
    """Event date one month from now."""
    return next_month()


# =============================================================================
# Database fixtures (integration and smoke tests)
# =============================================================================


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a fresh SQLite-backed Database with all tables created.

    Each test gets its own database file, so no cleanup between tests is
    needed. Separate sessions can be opened to check what was committed:

        async def test_something(test_database):
            async with test_database.get_session() as session:
                await EventRepository(session).add(event)
            async with test_database.get_session() as session:
                assert await EventRepository(session).get_by_id(event.id)
    """
    from src.infrastructure.persistence.database import Database

    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'tickets.db'}")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()

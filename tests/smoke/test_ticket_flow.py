"""Smoke tests: events and categories through the full stack.

Each test talks HTTP to the real application (routers, dispatcher,
handlers, repositories) backed by a fresh SQLite database.

Flows:
1. Category creation and listing
2. Event creation, detail, update and delete
3. Name + date uniqueness
4. Event list ordering
5. CSV export round trip
6. Categories with upcoming and past events
"""

import csv
import io
from datetime import UTC, datetime, timedelta
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.domain.entities.event import Event
from src.infrastructure.persistence.repositories import EventRepository
from tests.conftest import next_month


async def create_category(api, name: str = "Concerts") -> str:
    response = await api.post("/api/categories", json={"name": name})
    assert response.status_code == 200
    return response.json()["category"]["categoryId"]


async def create_event(api, category_id: str, **overrides) -> str:
    body = {
        "name": "Rock Night",
        "date": next_month().isoformat(),
        "price": 50,
        "ticketQuantity": 100,
        "categoryId": category_id,
        "artist": "The Band",
    } | overrides
    response = await api.post("/api/events", json=body)
    assert response.status_code == 200, response.text
    return response.json()


@pytest.mark.smoke
class TestCategoryFlow:
    """Category creation and listing."""

    async def test_create_and_list(self, api):
        await create_category(api, "Plays")
        await create_category(api, "Concerts")

        response = await api.get("/api/categories/all")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Concerts", "Plays"]

    async def test_invalid_name_not_stored(self, api):
        response = await api.post("/api/categories", json={"name": "Much too long"})

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert (await api.get("/api/categories/all")).json() == []


@pytest.mark.smoke
class TestEventFlow:
    """Event lifecycle."""

    async def test_create_then_detail(self, api):
        category_id = await create_category(api)
        event_id = await create_event(api, category_id)

        response = await api.get(f"/api/events/{event_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["eventId"] == event_id
        assert data["name"] == "Rock Night"
        assert data["artist"] == "The Band"
        assert data["category"] == {"categoryId": category_id, "name": "Concerts"}

    async def test_update_then_delete(self, api):
        category_id = await create_category(api)
        event_id = await create_event(api, category_id)

        update = await api.put(
            "/api/events",
            json={
                "eventId": event_id,
                "name": "Jazz Night",
                "date": (next_month() + timedelta(days=1)).isoformat(),
                "price": 70,
                "ticketQuantity": 20,
                "categoryId": category_id,
            },
        )
        assert update.status_code == 204
        assert (await api.get(f"/api/events/{event_id}")).json()["name"] == "Jazz Night"

        delete = await api.delete(f"/api/events/{event_id}")
        assert delete.status_code == 204
        assert (await api.get(f"/api/events/{event_id}")).status_code == 404

    async def test_invalid_event_lists_every_violation(self, api):
        category_id = await create_category(api)

        response = await api.post(
            "/api/events",
            json={
                "name": "x" * 51,
                "date": (datetime.now(UTC) - timedelta(days=1)).isoformat(),
                "price": 0,
                "ticketQuantity": 0,
                "categoryId": category_id,
            },
        )

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == [
            "name",
            "date",
            "price",
            "ticket_quantity",
        ]
        assert (await api.get("/api/events")).json() == []

    async def test_duplicate_name_and_date_rejected(self, api):
        category_id = await create_category(api)
        date = next_month().isoformat()
        await create_event(api, category_id, date=date)

        response = await api.post(
            "/api/events",
            json={
                "name": "Rock Night",
                "date": date,
                "price": 60,
                "ticketQuantity": 10,
                "categoryId": category_id,
            },
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "event_already_exists"

    async def test_unknown_category_rejected(self, api):
        response = await api.post(
            "/api/events",
            json={
                "name": "Rock Night",
                "date": next_month().isoformat(),
                "price": 50,
                "ticketQuantity": 100,
                "categoryId": str(uuid7()),
            },
        )

        assert response.status_code == 400
        error = response.json()["errors"][0]
        assert error["field"] == "category_id"
        assert error["code"] == "category_not_found"
        assert (await api.get("/api/events")).json() == []

    async def test_past_event_stays_editable(self, api, test_database):
        category_id = await create_category(api)
        past = (datetime.now(UTC) - timedelta(days=3)).replace(microsecond=0)
        event_id = uuid7()
        async with test_database.get_session() as session:
            await EventRepository(session).add(
                Event(
                    id=event_id,
                    name="Old Gig",
                    date=past,
                    price=30,
                    ticket_quantity=10,
                    category_id=UUID(category_id),
                )
            )

        response = await api.put(
            "/api/events",
            json={
                "eventId": str(event_id),
                "name": "Old Gig",
                "date": past.isoformat(),
                "price": 30,
                "ticketQuantity": 10,
                "categoryId": category_id,
                "description": "Recording now available.",
            },
        )

        assert response.status_code == 204, response.text
        detail = (await api.get(f"/api/events/{event_id}")).json()
        assert detail["description"] == "Recording now available."

    async def test_list_ordered_by_date(self, api):
        category_id = await create_category(api)
        base = next_month()
        await create_event(
            api, category_id, name="Later", date=(base + timedelta(days=5)).isoformat()
        )
        await create_event(api, category_id, name="Sooner", date=base.isoformat())

        response = await api.get("/api/events")

        assert [e["name"] for e in response.json()] == ["Sooner", "Later"]

    async def test_export_round_trip(self, api):
        category_id = await create_category(api)
        first = await create_event(api, category_id, name="Rock Night")
        second = await create_event(
            api,
            category_id,
            name="Jazz Night",
            date=(next_month() + timedelta(days=1)).isoformat(),
        )

        response = await api.get("/api/events/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert response.headers["content-disposition"].startswith("attachment;")
        assert '.csv"' in response.headers["content-disposition"]
        rows = list(csv.DictReader(io.StringIO(response.text)))
        assert [(r["event_id"], r["name"]) for r in rows] == [
            (first, "Rock Night"),
            (second, "Jazz Night"),
        ]


@pytest.mark.smoke
class TestCategoriesWithEventsFlow:
    """Upcoming versus historical events per category."""

    async def test_history_filter(self, api, test_database):
        concerts = await create_category(api, "Concerts")
        await create_category(api, "Plays")
        await create_event(api, concerts, name="Rock Night")

        # Past events cannot be created through the API
        past = datetime.now(UTC) - timedelta(days=10)
        async with test_database.get_session() as session:
            await EventRepository(session).add(
                Event(
                    id=uuid7(),
                    name="Old Gig",
                    date=past,
                    price=30,
                    ticket_quantity=10,
                    category_id=UUID(concerts),
                )
            )

        upcoming = (await api.get("/api/categories/allwithevents")).json()
        history = (
            await api.get("/api/categories/allwithevents?includeHistory=true")
        ).json()

        assert [c["name"] for c in upcoming] == ["Concerts", "Plays"]
        assert [e["name"] for e in upcoming[0]["events"]] == ["Rock Night"]
        assert upcoming[1]["events"] == []
        assert [e["name"] for e in history[0]["events"]] == ["Old Gig", "Rock Night"]

"""API tests for event endpoints.

Tests the HTTP request/response cycle:
- GET /api/events
- GET /api/events/{event_id}
- POST /api/events
- PUT /api/events
- DELETE /api/events/{event_id}
- GET /api/events/export

Architecture:
- FastAPI TestClient with the real app
- Dispatcher overridden with stub handlers
- RFC 9457 problem responses for failures
"""

from datetime import UTC, datetime
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.application.commands import CreateEvent, DeleteEvent, UpdateEvent
from src.application.dtos import (
    CategorySummary,
    EventDetail,
    EventExportFile,
    EventListItem,
)
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries import GetEventDetail, GetEventsExport, GetEventsList
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Success
from tests.api.conftest import StubHandler

EVENT_DATE = datetime(2030, 7, 1, 20, 0, tzinfo=UTC)


def not_found(event_id: UUID) -> Failure:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.NOT_FOUND,
            message="Event not found",
            domain_error=NotFoundError(
                code=ErrorCode.EVENT_NOT_FOUND,
                message=f"Event {event_id} not found",
                resource_type="Event",
                resource_id=str(event_id),
            ),
        )
    )


def validation_failure(*violations: tuple[str, ErrorCode, str]) -> Failure:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            message="Event validation failed",
            validation_errors=tuple(
                ValidationError(code=code, message=message, field=field)
                for field, code, message in violations
            ),
        )
    )


def event_body(**overrides) -> dict:
    body = {
        "name": "Rock Night",
        "date": "2030-07-01T20:00:00Z",
        "price": 50,
        "ticketQuantity": 100,
        "categoryId": str(uuid7()),
        "artist": "The Band",
    }
    return body | overrides


@pytest.mark.api
class TestListEvents:
    """GET /api/events"""

    def test_camel_case_items(self, client, use_handlers):
        event_id = uuid7()
        use_handlers(
            {
                GetEventsList: StubHandler(
                    Success(
                        value=[
                            EventListItem(
                                event_id=event_id,
                                name="Rock Night",
                                date=EVENT_DATE,
                                image_url="https://example.com/rock.png",
                            )
                        ]
                    )
                )
            }
        )

        response = client.get("/api/events")

        assert response.status_code == 200
        assert response.json() == [
            {
                "eventId": str(event_id),
                "name": "Rock Night",
                "date": "2030-07-01T20:00:00Z",
                "imageUrl": "https://example.com/rock.png",
            }
        ]

    def test_empty(self, client, use_handlers):
        use_handlers({GetEventsList: StubHandler(Success(value=[]))})

        response = client.get("/api/events")

        assert response.status_code == 200
        assert response.json() == []


@pytest.mark.api
class TestGetEvent:
    """GET /api/events/{event_id}"""

    def test_detail_with_category(self, client, use_handlers):
        event_id = uuid7()
        category_id = uuid7()
        handler = StubHandler(
            Success(
                value=EventDetail(
                    event_id=event_id,
                    name="Rock Night",
                    price=50,
                    date=EVENT_DATE,
                    category_id=category_id,
                    artist="The Band",
                    category=CategorySummary(category_id=category_id, name="Concerts"),
                )
            )
        )
        use_handlers({GetEventDetail: handler})

        response = client.get(f"/api/events/{event_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["eventId"] == str(event_id)
        assert data["price"] == 50
        assert data["artist"] == "The Band"
        assert data["categoryId"] == str(category_id)
        assert data["category"] == {"categoryId": str(category_id), "name": "Concerts"}
        assert handler.requests == [GetEventDetail(event_id=event_id)]

    def test_not_found_problem(self, client, use_handlers):
        event_id = uuid7()
        use_handlers({GetEventDetail: StubHandler(not_found(event_id))})

        response = client.get(f"/api/events/{event_id}")

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/problem+json"
        problem = response.json()
        assert problem["status"] == 404
        assert problem["title"] == "Resource Not Found"
        assert problem["instance"] == f"/api/events/{event_id}"
        assert problem["trace_id"] == response.headers["X-Trace-Id"]

    def test_malformed_id_is_bad_request(self, client, use_handlers):
        use_handlers({})

        response = client.get("/api/events/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "event_id"


@pytest.mark.api
class TestCreateEvent:
    """POST /api/events"""

    def test_returns_new_id(self, client, use_handlers):
        new_id = uuid7()
        handler = StubHandler(Success(value=new_id))
        use_handlers({CreateEvent: handler})
        body = event_body()

        response = client.post("/api/events", json=body)

        assert response.status_code == 200
        assert response.json() == str(new_id)
        command = handler.requests[0]
        assert command.name == "Rock Night"
        assert command.date == EVENT_DATE
        assert command.ticket_quantity == 100
        assert str(command.category_id) == body["categoryId"]
        assert command.artist == "The Band"

    def test_validation_errors_listed(self, client, use_handlers):
        use_handlers(
            {
                CreateEvent: StubHandler(
                    validation_failure(
                        ("name", ErrorCode.REQUIRED_FIELD_MISSING, "Name is required."),
                        (
                            "price",
                            ErrorCode.VALUE_NOT_POSITIVE,
                            "Price must be greater than 0.",
                        ),
                    )
                )
            }
        )

        response = client.post("/api/events", json=event_body(name=None, price=0))

        assert response.status_code == 400
        assert response.headers["content-type"] == "application/problem+json"
        problem = response.json()
        assert problem["detail"] == "Event validation failed"
        assert [e["message"] for e in problem["errors"]] == [
            "Name is required.",
            "Price must be greater than 0.",
        ]

    def test_missing_fields_reach_handler(self, client, use_handlers):
        handler = StubHandler(
            validation_failure(
                ("name", ErrorCode.REQUIRED_FIELD_MISSING, "Name is required.")
            )
        )
        use_handlers({CreateEvent: handler})

        client.post("/api/events", json={})

        assert handler.requests == [CreateEvent()]

    def test_malformed_body_is_bad_request(self, client, use_handlers):
        handler = StubHandler(Success(value=uuid7()))
        use_handlers({CreateEvent: handler})

        response = client.post("/api/events", json=event_body(price="lots"))

        assert response.status_code == 400
        problem = response.json()
        assert problem["title"] == "Bad Request"
        assert problem["errors"][0]["field"] == "price"
        assert handler.requests == []


@pytest.mark.api
class TestUpdateEvent:
    """PUT /api/events"""

    def test_no_content(self, client, use_handlers):
        event_id = uuid7()
        handler = StubHandler(Success(value=None))
        use_handlers({UpdateEvent: handler})

        response = client.put(
            "/api/events", json=event_body(eventId=str(event_id), name="Jazz Night")
        )

        assert response.status_code == 204
        assert response.content == b""
        assert handler.requests[0].event_id == event_id
        assert handler.requests[0].name == "Jazz Night"

    def test_unknown_event(self, client, use_handlers):
        event_id = uuid7()
        use_handlers({UpdateEvent: StubHandler(not_found(event_id))})

        response = client.put("/api/events", json=event_body(eventId=str(event_id)))

        assert response.status_code == 404

    def test_missing_event_id(self, client, use_handlers):
        use_handlers({UpdateEvent: StubHandler(Success(value=None))})

        response = client.put("/api/events", json=event_body())

        assert response.status_code == 400


@pytest.mark.api
class TestDeleteEvent:
    """DELETE /api/events/{event_id}"""

    def test_no_content(self, client, use_handlers):
        event_id = uuid7()
        handler = StubHandler(Success(value=None))
        use_handlers({DeleteEvent: handler})

        response = client.delete(f"/api/events/{event_id}")

        assert response.status_code == 204
        assert handler.requests == [DeleteEvent(event_id=event_id)]

    def test_unknown_event(self, client, use_handlers):
        event_id = uuid7()
        use_handlers({DeleteEvent: StubHandler(not_found(event_id))})

        response = client.delete(f"/api/events/{event_id}")

        assert response.status_code == 404


@pytest.mark.api
class TestExportEvents:
    """GET /api/events/export"""

    def test_csv_attachment(self, client, use_handlers):
        data = b"event_id,name,date\r\n"
        use_handlers(
            {
                GetEventsExport: StubHandler(
                    Success(
                        value=EventExportFile(
                            file_name="0190f1d2.csv", content_type="text/csv", data=data
                        )
                    )
                )
            }
        )

        response = client.get("/api/events/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="0190f1d2.csv"'
        )
        assert response.content == data

    def test_not_shadowed_by_detail_route(self, client, use_handlers):
        detail = StubHandler(not_found(uuid7()))
        export = StubHandler(
            Success(
                value=EventExportFile(
                    file_name="x.csv", content_type="text/csv", data=b"event_id,name,date\r\n"
                )
            )
        )
        use_handlers({GetEventDetail: detail, GetEventsExport: export})

        client.get("/api/events/export")

        assert detail.requests == []
        assert export.requests == [GetEventsExport()]

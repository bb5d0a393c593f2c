from uuid import uuid4

from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from ticket_api.dependencies import tickets as ticket_deps
from ticket_api.main import create_app
from ticket_api.tickets.store import TicketNotFoundError


def _create(client, title="Fix bug", description="Fix the critical bug"):
    response = client.post("/tickets", json={"title": title, "description": description})
    assert response.status_code == 201
    return response.json()


def test_health_reports_service_and_ticket_count(client):
    _create(client)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "ticket-api", "tickets": 1}


def test_create_ticket_returns_flattened_record(client):
    body = _create(client, "Fix bug", "")

    assert set(body) == {"id", "title", "description", "status"}
    assert body["title"] == "Fix bug"
    assert body["description"] == ""
    assert body["status"] == "ToDo"

    fetched = client.get(f"/tickets/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == body


def test_create_ticket_rejects_invalid_fields(client):
    blank = client.post("/tickets", json={"title": "  ", "description": "x"})
    too_long = client.post("/tickets", json={"title": "ok", "description": "x" * 1001})
    missing = client.post("/tickets", json={"title": "ok"})

    assert blank.status_code == 400
    assert blank.json()["detail"] == "Title cannot be empty"
    assert too_long.status_code == 400
    assert "1000" in too_long.json()["detail"]
    assert missing.status_code == 422
    assert client.get("/tickets").json() == {"tickets": []}


def test_list_tickets(client):
    assert client.get("/tickets").json() == {"tickets": []}

    first = _create(client, "one")
    second = _create(client, "two")

    listed = client.get("/tickets").json()["tickets"]
    assert sorted(ticket["id"] for ticket in listed) == sorted([first["id"], second["id"]])


def test_get_ticket_error_codes(client):
    assert client.get("/tickets/not-a-uuid").status_code == 400
    missing = client.get(f"/tickets/{uuid4()}")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Ticket not found"


def test_patch_ticket_status(client):
    created = _create(client, "Title", "Body")

    response = client.patch(f"/tickets/{created['id']}", json={"status": "InProgress"})

    assert response.status_code == 200
    assert response.json() == {**created, "status": "InProgress"}


def test_patch_ticket_error_codes(client):
    created = _create(client)

    assert client.patch("/tickets/nope", json={"status": "Done"}).status_code == 400
    assert client.patch(f"/tickets/{uuid4()}", json={"status": "Done"}).status_code == 404
    assert client.patch(f"/tickets/{created['id']}", json={"status": "Closed"}).status_code == 422


def test_patch_partial_failure_keeps_earlier_field(client):
    created = _create(client, "A", "B")

    response = client.patch(f"/tickets/{created['id']}", json={"title": "C", "description": "x" * 1001})

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Invalid field: description")
    current = client.get(f"/tickets/{created['id']}").json()
    assert current["title"] == "C"
    assert current["description"] == "B"


def test_metrics_endpoint_counts_operations(client):
    created = _create(client)
    client.get(f"/tickets/{created['id']}")
    client.get(f"/tickets/{uuid4()}")
    client.post("/tickets", json={"title": "", "description": ""})

    response = client.get("/metrics")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    text = response.text
    assert "# TYPE ticket_requests_total counter" in text
    assert 'ticket_requests_total{operation="create",outcome="ok"} 1.0' in text
    assert 'ticket_requests_total{operation="create",outcome="rejected"} 1.0' in text
    assert 'ticket_requests_total{operation="get",outcome="not_found"} 1.0' in text
    assert 'ticket_request_duration_seconds_count{operation="get"} 2.0' in text


def test_cors_headers_are_permissive(client):
    response = client.get("/tickets", headers={"Origin": "http://example.com"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_routes_translate_store_errors_with_overridden_store():
    app = create_app()
    store = AsyncMock()
    store.get_ticket = AsyncMock(side_effect=TicketNotFoundError(uuid4()))

    async def override_store():
        return store

    app.dependency_overrides[ticket_deps.get_ticket_store] = override_store
    try:
        response = TestClient(app).get(f"/tickets/{uuid4()}")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 404
    store.get_ticket.assert_awaited()


def test_store_unavailable_outside_lifespan():
    response = TestClient(create_app()).get("/tickets")

    assert response.status_code == 503

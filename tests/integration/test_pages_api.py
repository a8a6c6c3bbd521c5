"""API tests for the dashboard endpoints against an in-memory collaborator."""

import json
from pathlib import Path
from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from finance_dashboard.application.services import SessionContext
from finance_dashboard.domain.entities import SessionUser
from finance_dashboard.infrastructure.collaborator import CollaboratorClient
from finance_dashboard.infrastructure.dependencies import get_collaborator, get_session_context
from finance_dashboard.infrastructure.storage.json_session_store import JsonFileSessionStore
from finance_dashboard.main import app


class FakeFinanceBackend:
    """Mock-transport handler emulating the collaborator REST API."""

    _ALIASES = {"invite/all": "invite"}

    def __init__(self):
        self.collections: dict[str, list[dict[str, Any]]] = {
            "budgets": [
                {"id": 1, "department": "Ops", "title": "Q1 Supplies",
                 "amount_planned": 500, "status": "Open"},
            ],
            "goals": [
                {"id": 9, "name": "Reserve", "target_amount": 1000, "current_amount": 400,
                 "deadline": "2025-12-31", "status": "In Progress"},
            ],
            "invite": [
                {"email": "new@example.com", "role": "Viewer", "token": "t-1", "status": "Pending"},
            ],
        }
        self.requests: list[tuple[str, str]] = []
        self.fail_writes = False
        self._next_id = 100

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix("/api/")
        self.requests.append((request.method, path))
        body = json.loads(request.content) if request.content else None

        if request.method != "GET" and self.fail_writes:
            return httpx.Response(500, json={"error": "database unavailable"})

        collection = self._ALIASES.get(path, path)
        if collection in self.collections:
            if request.method == "GET":
                return httpx.Response(200, json=self.collections[collection])
            self._next_id += 1
            created = {"id": self._next_id, "status": "Open", **body}
            self.collections[collection].append(created)
            return httpx.Response(201, json=created)

        if path in ("invite/resend", "rbac/assign"):
            return httpx.Response(200, json={"success": True, "received": body})

        base, _, entity_id = path.rpartition("/")
        rows = self.collections.get(base)
        if rows is None:
            return httpx.Response(404, json={"error": "no such route"})
        key = "email" if base == "invite" else "id"
        match = [row for row in rows if str(row.get(key)) == entity_id]
        if not match:
            return httpx.Response(404, json={"error": "not found"})
        if request.method == "PUT":
            match[0].update(body)
            return httpx.Response(200, json=match[0])
        if request.method == "DELETE":
            rows.remove(match[0])
            return httpx.Response(204)
        return httpx.Response(405)

    def count(self, method: str, path: str) -> int:
        return self.requests.count((method, path))


@pytest.fixture
def backend() -> FakeFinanceBackend:
    return FakeFinanceBackend()


@pytest.fixture
def session(tmp_path: Path) -> SessionContext:
    context = SessionContext(JsonFileSessionStore(tmp_path / "session.json"))
    context.login(SessionUser(email="owner@example.com", id="u-1", role="Admin"))
    return context


@pytest_asyncio.fixture
async def client(backend: FakeFinanceBackend, session: SessionContext):
    def collaborator() -> CollaboratorClient:
        return CollaboratorClient(
            base_url="http://collab.test",
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(backend)),
        )

    app.dependency_overrides[get_collaborator] = collaborator
    app.dependency_overrides[get_session_context] = lambda: session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_signed_out_requests_are_refused(client: AsyncClient, session: SessionContext):
    session.logout()

    response = await client.get("/api/v1/pages/budgets")

    assert response.status_code == 401
    assert response.json()["detail"] == "Not signed in"

    response = await client.post("/api/v1/whitelabel/reset")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_unknown_page_is_404(client: AsyncClient):
    response = await client.get("/api/v1/pages/spaceships")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_pages(client: AsyncClient):
    response = await client.get("/api/v1/pages")

    assert response.status_code == 200
    names = [page["name"] for page in response.json()]
    assert "budgets" in names
    assert "channels" in names


@pytest.mark.asyncio
async def test_budget_scenario_over_http(client: AsyncClient, backend: FakeFinanceBackend):
    response = await client.get("/api/v1/pages/budgets", params={"q": "supplies"})
    assert response.json()["count"] == 1

    response = await client.get("/api/v1/pages/budgets", params={"filter": "department:Finance"})
    assert response.json()["count"] == 0

    response = await client.post(
        "/api/v1/pages/budgets/records",
        json={"department": "Finance", "title": "Audit", "amount_planned": 1200},
    )
    assert response.status_code == 201
    assert response.json()["total"] == 2

    response = await client.get("/api/v1/pages/budgets", params={"filter": "department:Finance"})
    view = response.json()
    assert view["count"] == 1
    assert view["records"][0]["title"] == "Audit"
    assert view["filter_options"]["department"] == ["Ops", "Finance"]


@pytest.mark.asyncio
async def test_create_with_missing_fields_is_422(client: AsyncClient, backend: FakeFinanceBackend):
    response = await client.post("/api/v1/pages/budgets/records", json={"title": "Audit"})

    assert response.status_code == 422
    assert response.json()["detail"]["missing"] == ["department", "amount_planned"]
    assert backend.count("POST", "budgets") == 0


@pytest.mark.asyncio
async def test_failed_create_returns_static_message_and_draft(
    client: AsyncClient, backend: FakeFinanceBackend
):
    backend.fail_writes = True

    response = await client.post(
        "/api/v1/pages/budgets/records",
        json={"department": "Finance", "title": "Audit", "amount_planned": 1200},
    )

    assert response.status_code == 502
    detail = response.json()["detail"]
    assert detail["message"] == "Failed to add budget."
    assert detail["draft"]["title"] == "Audit"


@pytest.mark.asyncio
async def test_delete_requires_confirmation(client: AsyncClient, backend: FakeFinanceBackend):
    response = await client.delete("/api/v1/pages/budgets/records/1")

    assert response.status_code == 409
    assert response.json()["detail"] == "Are you sure you want to delete this budget?"
    assert backend.count("DELETE", "budgets/1") == 0

    response = await client.delete("/api/v1/pages/budgets/records/1", params={"confirm": True})

    assert response.status_code == 200
    assert response.json()["total"] == 0
    assert backend.count("DELETE", "budgets/1") == 1


@pytest.mark.asyncio
async def test_update_on_read_only_page_is_405(client: AsyncClient):
    response = await client.put("/api/v1/pages/budgets/records/1", json={"title": "x"})
    assert response.status_code == 405


@pytest.mark.asyncio
async def test_export_csv(client: AsyncClient):
    response = await client.get("/api/v1/pages/budgets/export")

    assert response.status_code == 200
    assert response.headers["content-disposition"] == 'attachment; filename="budgets.csv"'
    assert response.text.split("\n") == [
        "Department,Title,Amount Planned,Status",
        "Ops,Q1 Supplies,500,Open",
    ]


@pytest.mark.asyncio
async def test_goal_contribution(client: AsyncClient, backend: FakeFinanceBackend):
    response = await client.post("/api/v1/goals/9/contribute", json={"amount": 150})

    assert response.status_code == 200
    goal = response.json()["records"][0]
    assert goal["current_amount"] == 550
    assert goal["progress_percent"] == 55
    assert backend.collections["goals"][0]["current_amount"] == 550


@pytest.mark.asyncio
async def test_resend_invitation(client: AsyncClient, backend: FakeFinanceBackend):
    response = await client.post("/api/v1/invitations/new@example.com/resend")

    assert response.status_code == 200
    assert response.json()["reply"]["received"] == {
        "email": "new@example.com",
        "role": "Viewer",
        "token": "t-1",
    }


@pytest.mark.asyncio
async def test_assign_role(client: AsyncClient):
    response = await client.post("/api/v1/roles/assign", json={"user_id": 3, "role_id": 2})

    assert response.status_code == 200
    assert response.json()["received"] == {"userId": 3, "roleId": 2}


@pytest.mark.asyncio
async def test_dashboard_fetch_failure_is_502(client: AsyncClient):
    response = await client.get("/api/v1/dashboard")

    # expenses, income and payroll are not served by the fake backend
    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to fetch dashboard data."


@pytest.mark.asyncio
async def test_me_and_logout(client: AsyncClient, session: SessionContext):
    response = await client.get("/api/v1/auth/me")
    assert response.json() == {"email": "owner@example.com", "id": "u-1", "role": "Admin"}

    response = await client.post("/api/v1/auth/logout")
    assert response.status_code == 204
    assert not session.is_authenticated


@pytest.mark.asyncio
async def test_page_info_lists_form_choices(client: AsyncClient):
    response = await client.get("/api/v1/pages")

    pages = {page["name"]: page for page in response.json()}
    assert "quickbooks" in pages["integrations"]["field_choices"]["type"]
    assert "budgets:read" in pages["roles"]["field_choices"]["permissions"]
    assert pages["channels"]["actions"] == ["join"]


@pytest.mark.asyncio
async def test_whitelabel_reset_for_signed_in_user(client: AsyncClient):
    response = await client.post("/api/v1/whitelabel/reset")

    assert response.status_code == 200
    assert response.json()["companyName"] == "Finance Management System"

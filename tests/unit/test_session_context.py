"""Unit tests for the SessionContext and its JSON file store."""

import json
from pathlib import Path
from typing import Any

import pytest

from finance_dashboard.application.interfaces import AuthGateway
from finance_dashboard.application.services import SessionContext
from finance_dashboard.domain.entities import SessionUser
from finance_dashboard.domain.exceptions import (
    AuthenticationError,
    CollaboratorError,
    NotAuthenticatedError,
)
from finance_dashboard.infrastructure.storage.json_session_store import JsonFileSessionStore


class FakeAuthGateway(AuthGateway):
    def __init__(self, reply: dict[str, Any] | None = None, error: CollaboratorError | None = None):
        self.reply = reply or {}
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def sign_in(self, email: str, password: str) -> dict[str, Any]:
        self.calls.append(("signin", email))
        if self.error:
            raise self.error
        return self.reply

    async def sign_up(self, email: str, password: str) -> dict[str, Any]:
        self.calls.append(("signup", email))
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def session_file(tmp_path: Path) -> Path:
    return tmp_path / "session.json"


def test_restore_without_stored_user(session_file: Path):
    context = SessionContext(JsonFileSessionStore(session_file))
    assert context.restore() is None
    assert not context.is_authenticated


def test_login_persists_and_survives_restart(session_file: Path):
    context = SessionContext(JsonFileSessionStore(session_file))
    context.login(SessionUser(email="owner@example.com", id=12, role="Admin"))

    stored = json.loads(session_file.read_text("utf-8"))
    assert stored == {"user": {"email": "owner@example.com", "id": 12, "role": "Admin"}}

    restarted = SessionContext(JsonFileSessionStore(session_file))
    assert restarted.restore() == SessionUser(email="owner@example.com", id=12, role="Admin")


def test_logout_clears_store(session_file: Path):
    context = SessionContext(JsonFileSessionStore(session_file))
    context.login(SessionUser(email="owner@example.com", id=12))
    context.logout()

    assert context.user is None
    assert not session_file.exists()
    with pytest.raises(NotAuthenticatedError):
        context.require_user()


def test_corrupt_file_treated_as_signed_out(session_file: Path):
    session_file.write_text("{not json", encoding="utf-8")
    context = SessionContext(JsonFileSessionStore(session_file))
    assert context.restore() is None


def test_stored_user_without_id_falls_back_to_email(session_file: Path):
    session_file.write_text(json.dumps({"user": {"email": "a@b.co"}}), encoding="utf-8")
    context = SessionContext(JsonFileSessionStore(session_file))

    user = context.restore()

    assert user == SessionUser(email="a@b.co", id="a@b.co", role="User")


@pytest.mark.asyncio
async def test_sign_in_logs_user_in(session_file: Path):
    auth = FakeAuthGateway({"user": {"id": "u-1"}, "role": "Finance Officer"})
    context = SessionContext(JsonFileSessionStore(session_file), auth=auth)

    user = await context.sign_in("owner@example.com", "secret")

    assert user == SessionUser(email="owner@example.com", id="u-1", role="Finance Officer")
    assert context.is_authenticated
    assert session_file.exists()


@pytest.mark.asyncio
async def test_sign_up_uses_signup_endpoint(session_file: Path):
    auth = FakeAuthGateway({})
    context = SessionContext(JsonFileSessionStore(session_file), auth=auth)

    user = await context.sign_in("new@example.com", "secret", sign_up=True)

    assert auth.calls == [("signup", "new@example.com")]
    assert user.id == "new@example.com"
    assert user.role == "User"


@pytest.mark.asyncio
async def test_sign_in_error_reply_is_refused(session_file: Path):
    auth = FakeAuthGateway({"error": "Invalid login credentials"})
    context = SessionContext(JsonFileSessionStore(session_file), auth=auth)

    with pytest.raises(AuthenticationError, match="Invalid login credentials"):
        await context.sign_in("owner@example.com", "wrong")

    assert not context.is_authenticated
    assert not session_file.exists()


@pytest.mark.asyncio
async def test_sign_in_collaborator_failure(session_file: Path):
    auth = FakeAuthGateway(error=CollaboratorError("auth/signin", 0, ""))
    context = SessionContext(JsonFileSessionStore(session_file), auth=auth)

    with pytest.raises(AuthenticationError) as exc_info:
        await context.sign_in("owner@example.com", "secret")

    assert exc_info.value.message == "An unexpected error occurred"

"""Unit tests for the WhiteLabelService."""

import json

import httpx
import pytest

from finance_dashboard.application.schemas.enterprise import WhiteLabelSettings
from finance_dashboard.application.services import WhiteLabelService
from finance_dashboard.domain.exceptions import FetchFailedError, MutationFailedError
from finance_dashboard.infrastructure.collaborator import CollaboratorClient


def _service(handler) -> WhiteLabelService:
    client = CollaboratorClient(
        base_url="http://collab.test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    return WhiteLabelService(client)


@pytest.mark.asyncio
async def test_load_fills_defaults_for_missing_keys():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"companyName": "Acme", "primaryColor": "#000000"})

    settings = await _service(handler).load()

    assert settings.companyName == "Acme"
    assert settings.primaryColor == "#000000"
    assert settings.secondaryColor == "#7c3aed"
    assert settings.enabled is True


@pytest.mark.asyncio
async def test_load_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "down"})

    with pytest.raises(FetchFailedError, match="Failed to fetch white-label settings"):
        await _service(handler).load()


@pytest.mark.asyncio
async def test_save_puts_full_settings():
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "PUT"
        seen.append(json.loads(request.content))
        return httpx.Response(200, json=seen[-1])

    saved = await _service(handler).save(WhiteLabelSettings(companyName="Acme"))

    assert saved.companyName == "Acme"
    assert seen[0]["customCSS"] == ""


@pytest.mark.asyncio
async def test_save_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"message": "bad colour"})

    with pytest.raises(MutationFailedError, match="Failed to update settings"):
        await _service(handler).save(WhiteLabelSettings())


@pytest.mark.asyncio
async def test_upload_logo_points_settings_at_new_url():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/whitelabel/logo"
        return httpx.Response(200, json={"logoUrl": "/uploads/acme.png"})

    current = WhiteLabelSettings(companyName="Acme", logo="/old.png")
    updated = await _service(handler).upload_logo(current, "acme.png", b"\x89PNG")

    assert updated.logo == "/uploads/acme.png"
    assert updated.companyName == "Acme"
    assert current.logo == "/old.png"


def test_reset_returns_fresh_defaults():
    first = WhiteLabelService.reset_to_defaults()
    first.companyName = "Changed"

    second = WhiteLabelService.reset_to_defaults()

    assert second.companyName == "Finance Management System"
    assert second.logo == "/logos/default-logo.png"

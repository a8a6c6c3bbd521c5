"""Collaborator API client — implements the CollaboratorGateway and AuthGateway ports.

Talks to the finance backend's REST API (``{base_url}/api/...``) using
httpx. Every non-2xx reply or transport failure becomes a
CollaboratorError; nothing is retried.
"""

import logging
from typing import Any

import httpx

from finance_dashboard.application.interfaces import AuthGateway, CollaboratorGateway
from finance_dashboard.domain.exceptions import CollaboratorError

logger = logging.getLogger(__name__)


class CollaboratorClient(CollaboratorGateway, AuthGateway):
    """Infrastructure adapter — connects to the collaborator API.

    An injected ``httpx.AsyncClient`` is reused across calls; otherwise a
    short-lived client is opened per request.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:4000",
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client

    def _url(self, path: str) -> str:
        return f"{self._base_url}/api/{path.strip('/')}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        client = await self._get_client()
        should_close = self._http_client is None
        url = self._url(path)

        try:
            logger.debug("%s %s", method, url)
            response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise CollaboratorError(path, 0, f"{type(exc).__name__}: {exc}") from exc
        finally:
            if should_close:
                await client.aclose()

        if not response.is_success:
            self._raise_collaborator_error(path, response)
        return response

    @staticmethod
    def _json(path: str, response: httpx.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise CollaboratorError(path, response.status_code, "Response is not valid JSON") from exc

    # ── CollaboratorGateway ─────────────────────────────────────────

    async def list(self, path: str, *, envelope: str | None = None) -> list[dict[str, Any]]:
        response = await self._request("GET", path)
        data = self._json(path, response)
        if envelope is not None:
            if not isinstance(data, dict) or envelope not in data:
                raise CollaboratorError(
                    path, response.status_code, f"Expected a JSON object with '{envelope}'"
                )
            data = data[envelope]
        if not isinstance(data, list):
            raise CollaboratorError(path, response.status_code, "Expected a JSON array")
        return data

    async def create(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        response = await self._request("POST", path, json=payload)
        return self._json(path, response)

    async def update(
        self, path: str, entity_id: str | int, payload: dict[str, Any]
    ) -> dict[str, Any]:
        response = await self._request("PUT", f"{path}/{entity_id}", json=payload)
        return self._json(path, response)

    async def delete(self, path: str, entity_id: str | int) -> None:
        await self._request("DELETE", f"{path}/{entity_id}")

    async def post(self, path: str, payload: dict[str, Any] | None = None) -> dict[str, Any]:
        response = await self._request("POST", path, json=payload)
        return self._json(path, response)

    async def get(self, path: str) -> Any:
        response = await self._request("GET", path)
        return self._json(path, response)

    async def put(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        response = await self._request("PUT", path, json=payload)
        return self._json(path, response)

    async def download(self, path: str) -> bytes:
        response = await self._request("GET", path)
        return response.content

    async def upload(
        self, path: str, field_name: str, filename: str, content: bytes
    ) -> dict[str, Any]:
        response = await self._request("POST", path, files={field_name: (filename, content)})
        return self._json(path, response)

    # ── AuthGateway ─────────────────────────────────────────────────

    async def sign_in(self, email: str, password: str) -> dict[str, Any]:
        return await self.post("auth/signin", {"email": email, "password": password})

    async def sign_up(self, email: str, password: str) -> dict[str, Any]:
        return await self.post("auth/signup", {"email": email, "password": password})

    # ── Errors ──────────────────────────────────────────────────────

    def _raise_collaborator_error(self, path: str, response: httpx.Response) -> None:
        """Raise CollaboratorError from a non-2xx httpx Response."""
        try:
            data = response.json()
            message = data.get("error") or data.get("message") or response.text
        except Exception:
            message = response.text

        raise CollaboratorError(
            resource=path,
            status_code=response.status_code,
            message=str(message),
        )

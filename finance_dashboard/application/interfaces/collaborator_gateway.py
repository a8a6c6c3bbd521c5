"""Abstract gateway interface (port) for the collaborator REST API."""

from abc import ABC, abstractmethod
from typing import Any


class CollaboratorGateway(ABC):
    """Port for the external finance backend — implemented in the infrastructure layer.

    Paths are relative to ``/api`` (``budgets``, ``rbac/roles``,
    ``communications/channels`` ...). Implementations raise
    ``CollaboratorError`` on transport or HTTP failures.
    """

    @abstractmethod
    async def list(self, path: str, *, envelope: str | None = None) -> list[dict[str, Any]]:
        """GET a collection. ``envelope`` names the key wrapping the array, if any."""
        ...

    @abstractmethod
    async def create(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST a new entity and return the created object."""
        ...

    @abstractmethod
    async def update(
        self, path: str, entity_id: str | int, payload: dict[str, Any]
    ) -> dict[str, Any]:
        """PUT a (partial) entity and return the updated object."""
        ...

    @abstractmethod
    async def delete(self, path: str, entity_id: str | int) -> None:
        """DELETE an entity."""
        ...

    @abstractmethod
    async def post(self, path: str, payload: dict[str, Any] | None = None) -> dict[str, Any]:
        """POST to an arbitrary sub-path (``integrations/7/sync``) and return the reply."""
        ...

    @abstractmethod
    async def get(self, path: str) -> Any:
        """GET an arbitrary JSON document (singletons, nested lists)."""
        ...

    @abstractmethod
    async def put(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        """PUT to a singleton path (``whitelabel``)."""
        ...

    @abstractmethod
    async def download(self, path: str) -> bytes:
        """GET a binary/text blob."""
        ...

    @abstractmethod
    async def upload(
        self, path: str, field_name: str, filename: str, content: bytes
    ) -> dict[str, Any]:
        """POST a multipart file upload and return the reply."""
        ...

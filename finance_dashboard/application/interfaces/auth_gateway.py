"""Abstract gateway interface (port) for the collaborator's auth endpoints."""

from abc import ABC, abstractmethod
from typing import Any


class AuthGateway(ABC):
    """Port for ``/api/auth/signin`` and ``/api/auth/signup``."""

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> dict[str, Any]:
        """Return the decoded sign-in reply (may carry an ``error`` key)."""
        ...

    @abstractmethod
    async def sign_up(self, email: str, password: str) -> dict[str, Any]:
        """Return the decoded sign-up reply (may carry an ``error`` key)."""
        ...

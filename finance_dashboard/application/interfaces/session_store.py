"""Abstract storage interface (port) for the durable session entry."""

from abc import ABC, abstractmethod
from typing import Any


class SessionStore(ABC):
    """Port for client-side durable storage keyed by a fixed name."""

    @abstractmethod
    def load(self) -> dict[str, Any] | None:
        """Return the stored user mapping, or None when nothing is stored."""
        ...

    @abstractmethod
    def save(self, user: dict[str, Any]) -> None:
        """Persist the user mapping, replacing any previous entry."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored entry."""
        ...

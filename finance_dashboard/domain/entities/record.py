"""Domain entity — a single row of a remote resource collection."""

from dataclasses import dataclass, field
from typing import Any

# Envelope keys kept out of ``attributes``.
_ENVELOPE_KEYS = frozenset({"status", "created_at"})


@dataclass
class Record:
    """One entity returned by the collaborator API.

    ``id`` is always server-assigned. ``attributes`` holds the
    resource-specific fields (``department``, ``amount_planned`` ...).
    """

    id: str | int
    attributes: dict[str, Any] = field(default_factory=dict)
    status: str | None = None
    created_at: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any], id_field: str = "id") -> "Record":
        """Build a record from a decoded JSON object."""
        attributes = {
            key: value
            for key, value in payload.items()
            if key != "id" and key not in _ENVELOPE_KEYS
        }
        created_at = payload.get("created_at")
        return cls(
            id=payload[id_field],
            attributes=attributes,
            status=payload.get("status"),
            created_at=str(created_at) if created_at is not None else None,
        )

    def get(self, path: str, default: Any = None) -> Any:
        """Look up a field by name or dotted path (``settings.currency``)."""
        if path == "id":
            return self.id
        if path == "status":
            return self.status
        if path == "created_at":
            return self.created_at

        current: Any = self.attributes
        for part in path.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def to_dict(self) -> dict[str, Any]:
        """Flatten back into the wire shape."""
        return {
            "id": self.id,
            **self.attributes,
            "status": self.status,
            "created_at": self.created_at,
        }

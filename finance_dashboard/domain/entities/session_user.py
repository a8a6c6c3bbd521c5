"""Domain entity for the signed-in dashboard user."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class SessionUser:
    """User persisted after a successful sign-in."""

    email: str
    id: str | int
    role: str = "User"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SessionUser":
        return cls(
            email=data["email"],
            id=data.get("id") or data["email"],
            role=data.get("role") or "User",
        )

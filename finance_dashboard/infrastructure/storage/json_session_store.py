"""Durable session storage — a JSON file holding one entry under a fixed key.

Layout:
    <session_file>  →  {"user": {"email": ..., "id": ..., "role": ...}}
"""

import json
import logging
from pathlib import Path
from typing import Any

from finance_dashboard.application.interfaces import SessionStore

logger = logging.getLogger(__name__)


class JsonFileSessionStore(SessionStore):
    """Infrastructure adapter for the session entry on local disk."""

    def __init__(self, path: str | Path, key: str = "user"):
        self._path = Path(path)
        self._key = key

    def _read(self) -> dict[str, Any]:
        """Read the JSON file, returning {} if missing or corrupt."""
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except Exception:
            logger.warning("Could not read %s — treating as signed out", self._path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def load(self) -> dict[str, Any] | None:
        entry = self._read().get(self._key)
        return entry if isinstance(entry, dict) else None

    def save(self, user: dict[str, Any]) -> None:
        data = self._read()
        data[self._key] = user
        self._write(data)

    def clear(self) -> None:
        data = self._read()
        if self._key not in data:
            return
        del data[self._key]
        if data:
            self._write(data)
        else:
            self._path.unlink(missing_ok=True)

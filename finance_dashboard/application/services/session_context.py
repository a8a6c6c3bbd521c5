"""Application-level session context.

Created once at startup, restored from durable storage, and changed only
through explicit ``login``/``logout`` transitions.
"""

import logging

from finance_dashboard.application.interfaces import AuthGateway, SessionStore
from finance_dashboard.domain.entities import SessionUser
from finance_dashboard.domain.exceptions import (
    AuthenticationError,
    CollaboratorError,
    NotAuthenticatedError,
)

logger = logging.getLogger(__name__)

_UNEXPECTED_ERROR = "An unexpected error occurred"


class SessionContext:
    """Holds the signed-in user; no expiry, valid until logout."""

    def __init__(self, store: SessionStore, auth: AuthGateway | None = None):
        self._store = store
        self._auth = auth
        self._user: SessionUser | None = None

    @property
    def user(self) -> SessionUser | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def restore(self) -> SessionUser | None:
        """Read the stored user back, as done on every page load."""
        stored = self._store.load()
        if stored is None:
            self._user = None
            return None
        try:
            self._user = SessionUser.from_dict(stored)
        except KeyError:
            logger.warning("Ignoring malformed session entry")
            self._user = None
        return self._user

    def login(self, user: SessionUser) -> None:
        self._store.save(user.to_dict())
        self._user = user
        logger.info("Signed in as %s (%s)", user.email, user.role)

    def logout(self) -> None:
        self._store.clear()
        if self._user is not None:
            logger.info("Signed out %s", self._user.email)
        self._user = None

    def require_user(self) -> SessionUser:
        if self._user is None:
            raise NotAuthenticatedError()
        return self._user

    async def sign_in(self, email: str, password: str, *, sign_up: bool = False) -> SessionUser:
        """Authenticate against the collaborator and log the user in."""
        if self._auth is None:
            raise AuthenticationError("Sign-in is not configured")
        try:
            if sign_up:
                reply = await self._auth.sign_up(email, password)
            else:
                reply = await self._auth.sign_in(email, password)
        except CollaboratorError as exc:
            raise AuthenticationError(exc.message or _UNEXPECTED_ERROR) from exc

        if reply.get("error"):
            raise AuthenticationError(str(reply["error"]))

        remote_user = reply.get("user") or {}
        user = SessionUser(
            email=email,
            id=remote_user.get("id") or email,
            role=reply.get("role") or "User",
        )
        self.login(user)
        return user

from .auth_gateway import AuthGateway
from .collaborator_gateway import CollaboratorGateway
from .session_store import SessionStore

__all__ = [
    "AuthGateway",
    "CollaboratorGateway",
    "SessionStore",
]

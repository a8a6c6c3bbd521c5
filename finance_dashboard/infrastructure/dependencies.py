"""FastAPI dependency injection — wires infrastructure to application layer."""

from functools import lru_cache

from fastapi import Depends, HTTPException, status

from finance_dashboard.config import get_settings
from finance_dashboard.application.interfaces import CollaboratorGateway
from finance_dashboard.application.services import (
    CommunicationsService,
    DashboardService,
    ListViewModel,
    SessionContext,
    WhiteLabelService,
    get_page,
)
from finance_dashboard.domain.entities import SessionUser
from finance_dashboard.domain.exceptions import NotAuthenticatedError, UnknownPageError
from finance_dashboard.infrastructure.collaborator import CollaboratorClient
from finance_dashboard.infrastructure.storage.json_session_store import JsonFileSessionStore


def get_collaborator() -> CollaboratorGateway:
    """Provides a collaborator client bound to the configured base URL."""
    settings = get_settings()
    return CollaboratorClient(base_url=settings.api_base_url)


@lru_cache
def get_session_context() -> SessionContext:
    """Process-wide session context, restored from disk on first use."""
    settings = get_settings()
    context = SessionContext(
        store=JsonFileSessionStore(settings.session_file, key=settings.session_key),
        auth=CollaboratorClient(base_url=settings.api_base_url),
    )
    context.restore()
    return context


def require_user(
    session: SessionContext = Depends(get_session_context),
) -> SessionUser:
    """Gate dashboard routes on a signed-in user."""
    try:
        return session.require_user()
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


def get_view_model(
    page: str,
    gateway: CollaboratorGateway = Depends(get_collaborator),
    _user: SessionUser = Depends(require_user),
) -> ListViewModel:
    """Mounts a fresh view-model for the requested page (no cross-request state)."""
    try:
        resource_page = get_page(page)
    except UnknownPageError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ListViewModel(resource_page, gateway)


def get_dashboard_service(
    gateway: CollaboratorGateway = Depends(get_collaborator),
    _user: SessionUser = Depends(require_user),
) -> DashboardService:
    return DashboardService(gateway)


def get_whitelabel_service(
    gateway: CollaboratorGateway = Depends(get_collaborator),
    _user: SessionUser = Depends(require_user),
) -> WhiteLabelService:
    return WhiteLabelService(gateway)


def get_communications_service(
    gateway: CollaboratorGateway = Depends(get_collaborator),
    _user: SessionUser = Depends(require_user),
) -> CommunicationsService:
    return CommunicationsService(gateway)

"""Sign-in, sign-up and logout endpoints backed by the session context."""

from fastapi import APIRouter, Depends, HTTPException, status

from finance_dashboard.application.schemas.auth import Credentials, SessionUserResponse
from finance_dashboard.application.services import SessionContext
from finance_dashboard.domain.entities import SessionUser
from finance_dashboard.domain.exceptions import AuthenticationError
from finance_dashboard.infrastructure.dependencies import get_session_context, require_user

router = APIRouter(prefix="/auth", tags=["Auth"])


async def _authenticate(
    credentials: Credentials, session: SessionContext, *, sign_up: bool
) -> SessionUserResponse:
    try:
        user = await session.sign_in(credentials.email, credentials.password, sign_up=sign_up)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    return SessionUserResponse.model_validate(user, from_attributes=True)


@router.post("/signin", response_model=SessionUserResponse)
async def sign_in(
    credentials: Credentials,
    session: SessionContext = Depends(get_session_context),
) -> SessionUserResponse:
    """Sign in and persist the session user."""
    return await _authenticate(credentials, session, sign_up=False)


@router.post("/signup", response_model=SessionUserResponse)
async def sign_up(
    credentials: Credentials,
    session: SessionContext = Depends(get_session_context),
) -> SessionUserResponse:
    """Create an account and sign in."""
    return await _authenticate(credentials, session, sign_up=True)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(session: SessionContext = Depends(get_session_context)) -> None:
    """Clear the stored session."""
    session.logout()


@router.get("/me", response_model=SessionUserResponse)
async def current_user(user: SessionUser = Depends(require_user)) -> SessionUserResponse:
    """Return the signed-in user, or 401 when the login screen should show."""
    return SessionUserResponse.model_validate(user, from_attributes=True)

"""Page-specific actions: goal contributions, invitation resends, role assignment."""

from fastapi import APIRouter, Depends, HTTPException, status

from finance_dashboard.application.interfaces import CollaboratorGateway
from finance_dashboard.application.schemas.pages import (
    ActionResult,
    ContributionRequest,
    PageView,
    RoleAssignmentRequest,
)
from finance_dashboard.application.services import ListViewModel, get_page
from finance_dashboard.application.services.admin_actions import assign_role, resend_invitation
from finance_dashboard.application.services.goal_progress import contribute
from finance_dashboard.domain.entities import SessionUser
from finance_dashboard.domain.exceptions import EntityNotFoundError, MutationFailedError
from finance_dashboard.infrastructure.dependencies import get_collaborator, require_user

from .pages import mount_page, page_view

router = APIRouter(tags=["Page Actions"])


@router.post("/goals/{goal_id}/contribute", response_model=PageView)
async def contribute_to_goal(
    goal_id: str,
    data: ContributionRequest,
    gateway: CollaboratorGateway = Depends(get_collaborator),
    _user: SessionUser = Depends(require_user),
) -> PageView:
    """Add an amount to a goal's current amount."""
    view_model = ListViewModel(get_page("goals"), gateway)
    await mount_page(view_model)
    try:
        await contribute(view_model, goal_id, data.amount)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except MutationFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    return page_view(view_model)


@router.post("/invitations/{email}/resend", response_model=ActionResult)
async def resend(
    email: str,
    gateway: CollaboratorGateway = Depends(get_collaborator),
    _user: SessionUser = Depends(require_user),
) -> ActionResult:
    """Send an existing invitation again."""
    view_model = ListViewModel(get_page("invitations"), gateway)
    await mount_page(view_model)
    try:
        reply = await resend_invitation(view_model, email)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except MutationFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    return ActionResult(reply=reply, view=page_view(view_model))


@router.post("/roles/assign")
async def assign(
    data: RoleAssignmentRequest,
    gateway: CollaboratorGateway = Depends(get_collaborator),
    _user: SessionUser = Depends(require_user),
) -> dict:
    """Bind a user to a role."""
    try:
        return await assign_role(gateway, data.user_id, data.role_id)
    except MutationFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

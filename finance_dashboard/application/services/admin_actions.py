"""One-off admin calls that sit outside the generic list endpoints."""

import logging
from typing import Any

from finance_dashboard.application.interfaces import CollaboratorGateway
from finance_dashboard.application.schemas.enterprise import RoleAssignment
from finance_dashboard.domain.exceptions import (
    CollaboratorError,
    EntityNotFoundError,
    MutationFailedError,
)

from .list_view_model import ListViewModel

logger = logging.getLogger(__name__)


async def resend_invitation(view_model: ListViewModel, email: str) -> dict[str, Any]:
    """POST ``invite/resend`` with the stored email, role and token."""
    invitation = view_model.find(email)
    if invitation is None:
        raise EntityNotFoundError("Invitation", email)

    body = {
        "email": invitation.get("email"),
        "role": invitation.get("role"),
        "token": invitation.get("token"),
    }
    try:
        reply = await view_model.gateway.post("invite/resend", body)
    except CollaboratorError as exc:
        logger.warning("Resending invitation to %s failed: %s", email, exc)
        raise MutationFailedError("invitations", "resend", "Failed to resend invitation") from exc
    logger.info("Invitation resent to %s", email)
    return reply


async def assign_role(
    gateway: CollaboratorGateway, user_id: int | str, role_id: int | str
) -> dict[str, Any]:
    """POST ``rbac/assign`` binding a user to a role."""
    body = RoleAssignment(userId=user_id, roleId=role_id).model_dump()
    try:
        reply = await gateway.post("rbac/assign", body)
    except CollaboratorError as exc:
        logger.warning("Assigning role %s to user %s failed: %s", role_id, user_id, exc)
        raise MutationFailedError("roles", "assign", "Failed to assign role") from exc
    return reply

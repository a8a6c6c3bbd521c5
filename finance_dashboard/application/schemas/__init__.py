from .auth import Credentials, SessionUserResponse
from .dashboard import DashboardSummary, FinanceReport
from .enterprise import DirectMessage, WhiteLabelSettings
from .pages import (
    ActionResult,
    ChannelMessageRequest,
    ContributionRequest,
    PageInfo,
    PageView,
    RoleAssignmentRequest,
)

__all__ = [
    "Credentials",
    "SessionUserResponse",
    "DashboardSummary",
    "FinanceReport",
    "DirectMessage",
    "WhiteLabelSettings",
    "ActionResult",
    "ChannelMessageRequest",
    "ContributionRequest",
    "PageInfo",
    "PageView",
    "RoleAssignmentRequest",
]

"""Pydantic schemas for the enterprise admin resources."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .finance import RemoteRecord

IntegrationType = Literal["google_sheets", "quickbooks", "excel", "hr_system", "crm"]


# ── Invitations ──────────────────────────────────────────────────────


class InvitationRecord(BaseModel):
    """Invitations are keyed by email; the backend assigns no numeric id."""

    model_config = ConfigDict(extra="allow")

    email: str
    role: str | None = None
    token: str | None = None
    status: str | None = None
    created_at: str | None = None


class InvitationDraft(BaseModel):
    email: str = Field(..., min_length=3, pattern=r".+@.+")
    role: str = Field(..., min_length=1, examples=["Finance Officer"])


# ── Integrations ─────────────────────────────────────────────────────


class IntegrationRecord(RemoteRecord):
    name: str | None = None
    type: str | None = None
    config: dict[str, Any] | None = None
    last_sync: str | None = None


class IntegrationDraft(BaseModel):
    name: str = Field(..., min_length=1)
    type: IntegrationType = "google_sheets"
    config: dict[str, Any] = Field(default_factory=dict)


# ── Roles ────────────────────────────────────────────────────────────


class RoleRecord(RemoteRecord):
    name: str | None = None
    description: str | None = None
    permissions: list[str] | None = None


class RoleDraft(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    permissions: list[str] = Field(default_factory=list)


class RoleAssignment(BaseModel):
    """Body of ``POST /api/rbac/assign``."""

    userId: int | str
    roleId: int | str


# ── Tenants ──────────────────────────────────────────────────────────


class TenantSettings(BaseModel):
    model_config = ConfigDict(extra="allow")

    currency: str = "USD"
    timezone: str = "America/New_York"
    logo: str = "/logos/default-logo.png"
    primaryColor: str = "#4f46e5"


class TenantRecord(RemoteRecord):
    name: str | None = None
    domain: str | None = None
    settings: TenantSettings | None = None


class TenantDraft(BaseModel):
    name: str = Field(..., min_length=1)
    domain: str = Field(..., min_length=1)
    settings: TenantSettings = Field(default_factory=TenantSettings)


# ── Communications ───────────────────────────────────────────────────


class ChannelRecord(RemoteRecord):
    name: str | None = None
    description: str | None = None
    is_private: bool | None = None


class ChannelDraft(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    is_private: bool = False


class ChannelMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int | str | None = None
    message: str
    sender: str | None = None
    created_at: str | None = None


class DirectMessage(BaseModel):
    """Body of ``POST /api/communications/message``."""

    recipient: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


# ── White-label ──────────────────────────────────────────────────────


class WhiteLabelSettings(BaseModel):
    model_config = ConfigDict(extra="allow")

    domain: str = ""
    logo: str = ""
    favicon: str = ""
    primaryColor: str = "#4f46e5"
    secondaryColor: str = "#7c3aed"
    fontFamily: str = "Inter, sans-serif"
    companyName: str = ""
    supportEmail: str = ""
    customCSS: str = ""
    customJS: str = ""
    enabled: bool = True


DEFAULT_WHITE_LABEL = WhiteLabelSettings(
    logo="/logos/default-logo.png",
    favicon="/favicons/default-favicon.ico",
    companyName="Finance Management System",
    supportEmail="support@dicethelifecoach.com",
)

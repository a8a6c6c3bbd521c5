"""Pydantic DTOs returned by the resource page endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class PageInfo(BaseModel):
    """Static description of a registered resource page."""

    name: str
    title: str
    search_field: str | None
    filterable_fields: list[str]
    csv_filename: str
    supports_edit: bool
    actions: list[str]
    field_choices: dict[str, list[str]] = Field(default_factory=dict)


class PageView(BaseModel):
    """Rendered state of a mounted page after fetch and filtering."""

    page: str
    title: str
    state: str
    error: str | None = None
    query: str = ""
    filters: dict[str, str] = Field(default_factory=dict)
    total: int
    count: int
    records: list[dict[str, Any]]
    filter_options: dict[str, list[str]]


class ActionResult(BaseModel):
    reply: dict[str, Any]
    view: PageView


class ContributionRequest(BaseModel):
    """Amount added to a goal's current amount."""

    amount: float


class RoleAssignmentRequest(BaseModel):
    user_id: int | str
    role_id: int | str


class ChannelMessageRequest(BaseModel):
    message: str

"""Resource page registry — one configuration record per dashboard screen.

Each ``ResourcePage`` parametrises the generic ``ListViewModel``: which
endpoint it talks to, which field the search box matches, which fields
can be filtered, the CSV layout, the form's default draft and the static
messages shown on failure.
"""

import copy
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from finance_dashboard.application.schemas.enterprise import (
    ChannelDraft,
    ChannelRecord,
    IntegrationDraft,
    IntegrationRecord,
    InvitationDraft,
    InvitationRecord,
    RoleDraft,
    RoleRecord,
    TenantDraft,
    TenantRecord,
    TenantSettings,
)
from finance_dashboard.application.schemas.finance import (
    BudgetDraft,
    BudgetRecord,
    ExpenseDraft,
    ExpenseRecord,
    GoalDraft,
    GoalRecord,
    IncomeDraft,
    IncomeRecord,
    PayrollDraft,
    PayrollRecord,
)
from finance_dashboard.domain.entities import Record
from finance_dashboard.domain.exceptions import UnknownPageError

from .csv_exporter import CsvColumn
from .goal_progress import goal_row_extras


@dataclass(frozen=True)
class ResourcePage:
    """Configuration of one list page."""

    name: str
    title: str
    endpoint: str
    noun: str
    record_schema: type[BaseModel]
    draft_schema: type[BaseModel]
    default_draft: dict[str, Any]
    required_fields: tuple[str, ...]
    search_field: str | None
    filterable_fields: tuple[str, ...]
    csv_columns: tuple[CsvColumn, ...]
    csv_filename: str
    fetch_error: str
    create_error: str
    update_error: str
    delete_error: str
    confirm_prompt: str = "Are you sure you want to delete this {noun}?"
    list_path: str | None = None
    envelope: str | None = None
    id_field: str = "id"
    supports_edit: bool = False
    actions: dict[str, str] = field(default_factory=dict)
    row_extras: Callable[[Record], dict[str, Any]] | None = None
    field_choices: dict[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def collection_path(self) -> str:
        return self.list_path or self.endpoint

    @property
    def download_error(self) -> str:
        return f"Failed to download {self.noun} data."

    def delete_prompt(self, record_id: str | int) -> str:
        return self.confirm_prompt.format(noun=self.noun, id=record_id)

    def action_error(self, action: str) -> str:
        return self.actions.get(action, f"Failed to {action} {self.noun}.")

    def new_draft(self) -> dict[str, Any]:
        """A fresh copy of the empty form shape."""
        return copy.deepcopy(self.default_draft)


# Choices offered by the integration and role forms.
INTEGRATION_TYPES: dict[str, tuple[str, str]] = {
    "google_sheets": ("Google Sheets", "Sync data with Google Sheets"),
    "quickbooks": ("QuickBooks", "Integrate with QuickBooks accounting"),
    "excel": ("Excel", "Import/Export Excel files"),
    "hr_system": ("HR System", "Connect to HR management systems"),
    "crm": ("CRM", "Integrate with CRM systems"),
}

AVAILABLE_PERMISSIONS: tuple[str, ...] = tuple(
    f"{area}:{verb}"
    for area in ("budgets", "expenses", "income", "payroll", "goals", "reports", "users")
    for verb in ("read", "write", "delete")
)


def _columns(*pairs: tuple[str, str]) -> tuple[CsvColumn, ...]:
    return tuple(CsvColumn(label=label, field=field_name) for label, field_name in pairs)


BUDGETS = ResourcePage(
    name="budgets",
    title="Budgets",
    endpoint="budgets",
    noun="budget",
    record_schema=BudgetRecord,
    draft_schema=BudgetDraft,
    default_draft={"department": "", "title": "", "amount_planned": ""},
    required_fields=("department", "title", "amount_planned"),
    search_field="title",
    filterable_fields=("department", "status"),
    csv_columns=_columns(
        ("Department", "department"),
        ("Title", "title"),
        ("Amount Planned", "amount_planned"),
        ("Status", "status"),
    ),
    csv_filename="budgets.csv",
    fetch_error="Failed to fetch budgets.",
    create_error="Failed to add budget.",
    update_error="Failed to update budget.",
    delete_error="Failed to delete budget.",
)

EXPENSES = ResourcePage(
    name="expenses",
    title="Expenses",
    endpoint="expenses",
    noun="expense",
    record_schema=ExpenseRecord,
    draft_schema=ExpenseDraft,
    default_draft={
        "budget_id": "",
        "category": "",
        "amount": "",
        "description": "",
        "date": "",
        "recurrence": "None",
        "recurrence_end": "",
    },
    required_fields=("budget_id", "category", "amount", "description", "date"),
    search_field="description",
    filterable_fields=("category", "date"),
    csv_columns=_columns(
        ("Category", "category"),
        ("Amount", "amount"),
        ("Description", "description"),
        ("Date", "date"),
    ),
    csv_filename="expenses.csv",
    fetch_error="Failed to fetch expenses.",
    create_error="Failed to add expense.",
    update_error="Failed to update expense.",
    delete_error="Failed to delete expense.",
)

INCOME = ResourcePage(
    name="income",
    title="Income",
    endpoint="income",
    noun="income entry",
    record_schema=IncomeRecord,
    draft_schema=IncomeDraft,
    default_draft={
        "source_name": "",
        "category": "",
        "amount": "",
        "date_received": "",
        "notes": "",
        "recurrence": "None",
        "recurrence_end": "",
    },
    required_fields=("source_name", "category", "amount", "date_received"),
    search_field="source_name",
    filterable_fields=("category", "date_received"),
    csv_columns=_columns(
        ("Source", "source_name"),
        ("Category", "category"),
        ("Amount", "amount"),
        ("Date", "date_received"),
        ("Notes", "notes"),
    ),
    csv_filename="income.csv",
    fetch_error="Failed to fetch income data.",
    create_error="Failed to add income.",
    update_error="Failed to update income.",
    delete_error="Failed to delete income.",
)

PAYROLL = ResourcePage(
    name="payroll",
    title="Payroll",
    endpoint="payroll",
    noun="payroll entry",
    record_schema=PayrollRecord,
    draft_schema=PayrollDraft,
    default_draft={
        "employee_id": "",
        "month": "",
        "amount_paid": "",
        "status": "Pending",
        "payment_date": "",
    },
    required_fields=("employee_id", "month", "amount_paid", "payment_date"),
    search_field="employee_id",
    filterable_fields=("status", "month"),
    csv_columns=_columns(
        ("Employee ID", "employee_id"),
        ("Month", "month"),
        ("Amount Paid", "amount_paid"),
        ("Status", "status"),
        ("Payment Date", "payment_date"),
    ),
    csv_filename="payroll.csv",
    fetch_error="Failed to fetch payroll data.",
    create_error="Failed to add payroll.",
    update_error="Failed to update payroll.",
    delete_error="Failed to delete payroll.",
)

GOALS = ResourcePage(
    name="goals",
    title="Financial Goals",
    endpoint="goals",
    noun="goal",
    record_schema=GoalRecord,
    draft_schema=GoalDraft,
    default_draft={"name": "", "target_amount": "", "current_amount": "", "deadline": ""},
    required_fields=("name", "target_amount", "deadline"),
    search_field="name",
    filterable_fields=("status",),
    csv_columns=_columns(
        ("Name", "name"),
        ("Target Amount", "target_amount"),
        ("Current Amount", "current_amount"),
        ("Deadline", "deadline"),
        ("Status", "status"),
    ),
    csv_filename="goals.csv",
    fetch_error="Failed to fetch goals.",
    create_error="Failed to add goal.",
    update_error="Failed to update goal.",
    delete_error="Failed to delete goal.",
    row_extras=goal_row_extras,
)

INVITATIONS = ResourcePage(
    name="invitations",
    title="Invitations",
    endpoint="invite",
    noun="invitation",
    record_schema=InvitationRecord,
    draft_schema=InvitationDraft,
    default_draft={"email": "", "role": ""},
    required_fields=("email", "role"),
    search_field="email",
    filterable_fields=("role", "status"),
    csv_columns=_columns(
        ("Email", "email"),
        ("Role", "role"),
        ("Status", "status"),
    ),
    csv_filename="invitations.csv",
    fetch_error="Failed to fetch invitations.",
    create_error="Failed to send invitation",
    update_error="Failed to update invitation",
    delete_error="Failed to delete invitation",
    confirm_prompt="Are you sure you want to delete {id}?",
    list_path="invite/all",
    id_field="email",
)

INTEGRATIONS = ResourcePage(
    name="integrations",
    title="Integration Layer",
    endpoint="integrations",
    noun="integration",
    record_schema=IntegrationRecord,
    draft_schema=IntegrationDraft,
    default_draft={"name": "", "type": "google_sheets", "config": {}},
    required_fields=("name", "type"),
    search_field="name",
    filterable_fields=("type", "status"),
    csv_columns=_columns(
        ("Name", "name"),
        ("Type", "type"),
        ("Status", "status"),
        ("Last Sync", "last_sync"),
    ),
    csv_filename="integrations.csv",
    fetch_error="Failed to fetch integrations",
    create_error="Failed to save integration",
    update_error="Failed to save integration",
    delete_error="Failed to delete integration",
    supports_edit=True,
    actions={"sync": "Failed to sync data"},
    field_choices={"type": tuple(INTEGRATION_TYPES)},
)

ROLES = ResourcePage(
    name="roles",
    title="Roles & Permissions",
    endpoint="rbac/roles",
    noun="role",
    record_schema=RoleRecord,
    draft_schema=RoleDraft,
    default_draft={"name": "", "description": "", "permissions": []},
    required_fields=("name", "description"),
    search_field="name",
    filterable_fields=(),
    csv_columns=_columns(
        ("Name", "name"),
        ("Description", "description"),
        ("Permissions", "permissions"),
    ),
    csv_filename="roles.csv",
    fetch_error="Failed to fetch roles",
    create_error="Failed to save role",
    update_error="Failed to save role",
    delete_error="Failed to delete role",
    supports_edit=True,
    field_choices={"permissions": AVAILABLE_PERMISSIONS},
)

TENANTS = ResourcePage(
    name="tenants",
    title="Tenants",
    endpoint="tenants",
    noun="tenant",
    record_schema=TenantRecord,
    draft_schema=TenantDraft,
    default_draft={"name": "", "domain": "", "settings": TenantSettings().model_dump()},
    required_fields=("name", "domain"),
    search_field="name",
    filterable_fields=("status", "settings.currency"),
    csv_columns=_columns(
        ("Name", "name"),
        ("Domain", "domain"),
        ("Currency", "settings.currency"),
        ("Status", "status"),
        ("Created", "created_at"),
    ),
    csv_filename="tenants.csv",
    fetch_error="Failed to fetch tenants",
    create_error="Failed to save tenant",
    update_error="Failed to save tenant",
    delete_error="Failed to delete tenant",
    supports_edit=True,
)

CHANNELS = ResourcePage(
    name="channels",
    title="Team Channels",
    endpoint="communications/channels",
    noun="channel",
    record_schema=ChannelRecord,
    draft_schema=ChannelDraft,
    default_draft={"name": "", "description": "", "is_private": False},
    required_fields=("name",),
    search_field="name",
    filterable_fields=("is_private",),
    csv_columns=_columns(
        ("Name", "name"),
        ("Description", "description"),
        ("Private", "is_private"),
    ),
    csv_filename="channels.csv",
    fetch_error="Failed to fetch channels",
    create_error="Failed to create channel",
    update_error="Failed to update channel",
    delete_error="Failed to delete channel",
    envelope="data",
    actions={"join": "Failed to join channel"},
)

PAGES: dict[str, ResourcePage] = {
    page.name: page
    for page in (
        BUDGETS,
        EXPENSES,
        INCOME,
        PAYROLL,
        GOALS,
        INVITATIONS,
        INTEGRATIONS,
        ROLES,
        TENANTS,
        CHANNELS,
    )
}


def get_page(name: str) -> ResourcePage:
    """Look up a registered page by name."""
    try:
        return PAGES[name]
    except KeyError:
        raise UnknownPageError(name) from None

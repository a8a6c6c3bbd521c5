"""Pydantic schemas for the core finance resources.

``*Record`` models check collection rows coming back from the collaborator
API. Only the key is required; display attributes may be missing or null,
and the row itself is kept as sent. ``*Draft`` models validate and
coerce form drafts before they are sent.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Recurrence = Literal["None", "Weekly", "Monthly", "Yearly"]


class RemoteRecord(BaseModel):
    """Fields every collection row carries."""

    model_config = ConfigDict(extra="allow")

    id: int | str
    status: str | None = None
    created_at: str | None = None


# ── Budgets ──────────────────────────────────────────────────────────


class BudgetRecord(RemoteRecord):
    department: str | None = None
    title: str | None = None
    amount_planned: float | None = None


class BudgetDraft(BaseModel):
    department: str = Field(..., min_length=1, examples=["Operations"])
    title: str = Field(..., min_length=1, examples=["Q1 Supplies"])
    amount_planned: float = Field(..., ge=0, examples=[500])


# ── Expenses ─────────────────────────────────────────────────────────


class ExpenseRecord(RemoteRecord):
    budget_id: int | str | None = None
    category: str | None = None
    amount: float | None = None
    description: str | None = None
    date: str | None = None
    recurrence: str | None = None
    recurrence_end: str | None = None


class ExpenseDraft(BaseModel):
    budget_id: int = Field(..., examples=[1])
    category: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    description: str = Field(..., min_length=1)
    date: str = Field(..., min_length=1, examples=["2025-01-31"])
    recurrence: Recurrence = "None"
    recurrence_end: str | None = None


# ── Income ───────────────────────────────────────────────────────────


class IncomeRecord(RemoteRecord):
    source_name: str | None = None
    category: str | None = None
    amount: float | None = None
    date_received: str | None = None
    notes: str | None = None
    recurrence: str | None = None
    recurrence_end: str | None = None


class IncomeDraft(BaseModel):
    source_name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    date_received: str = Field(..., min_length=1)
    notes: str = ""
    recurrence: Recurrence = "None"
    recurrence_end: str | None = None


# ── Payroll ──────────────────────────────────────────────────────────


class PayrollRecord(RemoteRecord):
    employee_id: int | str | None = None
    month: str | None = None
    amount_paid: float | None = None
    payment_date: str | None = None


class PayrollDraft(BaseModel):
    employee_id: int
    month: str = Field(..., min_length=1, examples=["2025-01"])
    amount_paid: float = Field(..., ge=0)
    status: Literal["Pending", "Paid"] = "Pending"
    payment_date: str = Field(..., min_length=1)


# ── Goals ────────────────────────────────────────────────────────────


class GoalRecord(RemoteRecord):
    name: str | None = None
    target_amount: float | None = None
    current_amount: float | None = None
    deadline: str | None = None


class GoalDraft(BaseModel):
    name: str = Field(..., min_length=1)
    target_amount: float = Field(..., gt=0)
    current_amount: float = 0
    deadline: str = Field(..., min_length=1)

"""Pydantic schemas for the dashboard and reports chart data."""

from pydantic import BaseModel


class ChartBar(BaseModel):
    label: str
    value: float
    width_percent: float


class DashboardSummary(BaseModel):
    """Totals per resource family plus the bar chart comparing them."""

    total_budgets: float
    total_expenses: float
    total_income: float
    total_payroll: float
    total_goals: float
    achieved_goals: int
    budget_overruns: list[str]
    bars: list[ChartBar]


class CategorySlice(BaseModel):
    """One slice of the expense-category pie chart."""

    category: str
    amount: float
    percentage: float
    start_degrees: float
    end_degrees: float
    color: str


class BudgetComparison(BaseModel):
    budget_id: int | str
    title: str
    department: str
    planned: float
    actual: float
    percentage: float
    bar_width: float
    over_budget: bool


class FinanceReport(BaseModel):
    total_budgets: float
    total_expenses: float
    total_income: float
    net_balance: float
    expense_categories: list[CategorySlice]
    budget_vs_actual: list[BudgetComparison]

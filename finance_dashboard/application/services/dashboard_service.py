"""Chart-data shaping for the dashboard and reports screens."""

import asyncio
import logging
from typing import Any

from finance_dashboard.application.interfaces import CollaboratorGateway
from finance_dashboard.application.schemas.dashboard import (
    BudgetComparison,
    CategorySlice,
    ChartBar,
    DashboardSummary,
    FinanceReport,
)
from finance_dashboard.domain.exceptions import CollaboratorError, FetchFailedError

logger = logging.getLogger(__name__)

Row = dict[str, Any]


def amount_of(row: Row, field_name: str) -> float:
    """Numeric value of a money field; missing or unparsable counts as 0."""
    try:
        return float(row.get(field_name) or 0)
    except (TypeError, ValueError):
        return 0.0


def total(rows: list[Row], field_name: str) -> float:
    return sum(amount_of(row, field_name) for row in rows)


def actual_spend(budget: Row, expenses: list[Row]) -> float:
    """Sum of expenses booked against a budget (ids compared as text)."""
    budget_id = str(budget.get("id"))
    return sum(
        amount_of(expense, "amount")
        for expense in expenses
        if str(expense.get("budget_id")) == budget_id
    )


def build_summary(
    budgets: list[Row],
    expenses: list[Row],
    income: list[Row],
    payroll: list[Row],
    goals: list[Row],
) -> DashboardSummary:
    totals = {
        "Budgets": total(budgets, "amount_planned"),
        "Expenses": total(expenses, "amount"),
        "Income": total(income, "amount"),
        "Payroll": total(payroll, "amount_paid"),
        "Goals": total(goals, "target_amount"),
    }
    max_value = max(totals.values()) or 1

    overruns = [
        str(budget.get("title", ""))
        for budget in budgets
        if actual_spend(budget, expenses) > amount_of(budget, "amount_planned")
    ]

    return DashboardSummary(
        total_budgets=totals["Budgets"],
        total_expenses=totals["Expenses"],
        total_income=totals["Income"],
        total_payroll=totals["Payroll"],
        total_goals=totals["Goals"],
        achieved_goals=sum(1 for goal in goals if goal.get("status") == "Achieved"),
        budget_overruns=overruns,
        bars=[
            ChartBar(label=label, value=value, width_percent=value / max_value * 100)
            for label, value in totals.items()
        ],
    )


def build_report(budgets: list[Row], expenses: list[Row], income: list[Row]) -> FinanceReport:
    total_expenses = total(expenses, "amount")
    total_income = total(income, "amount")

    by_category: dict[str, float] = {}
    for expense in expenses:
        category = str(expense.get("category"))
        by_category[category] = by_category.get(category, 0.0) + amount_of(expense, "amount")

    slices: list[CategorySlice] = []
    start = 0.0
    for index, (category, amount) in enumerate(by_category.items()):
        percentage = amount / total_expenses * 100 if total_expenses else 0.0
        end = start + percentage / 100 * 360
        slices.append(
            CategorySlice(
                category=category,
                amount=amount,
                percentage=percentage,
                start_degrees=start,
                end_degrees=end,
                color=f"hsl({index * 60}, 70%, 50%)",
            )
        )
        start = end

    comparisons: list[BudgetComparison] = []
    for budget in budgets:
        planned = amount_of(budget, "amount_planned")
        actual = actual_spend(budget, expenses)
        percentage = actual / planned * 100 if planned > 0 else 0.0
        comparisons.append(
            BudgetComparison(
                budget_id=budget.get("id", ""),
                title=str(budget.get("title", "")),
                department=str(budget.get("department", "")),
                planned=planned,
                actual=actual,
                percentage=percentage,
                bar_width=min(percentage, 100.0),
                over_budget=percentage > 100,
            )
        )

    return FinanceReport(
        total_budgets=total(budgets, "amount_planned"),
        total_expenses=total_expenses,
        total_income=total_income,
        net_balance=total_income - total_expenses,
        expense_categories=slices,
        budget_vs_actual=comparisons,
    )


class DashboardService:
    """Loads the finance collections concurrently and shapes them for charts."""

    def __init__(self, gateway: CollaboratorGateway):
        self._gateway = gateway

    async def _load(self, paths: tuple[str, ...], resource: str, message: str) -> list[list[Row]]:
        try:
            return list(await asyncio.gather(*(self._gateway.list(path) for path in paths)))
        except CollaboratorError as exc:
            logger.warning("Loading %s data failed: %s", resource, exc)
            raise FetchFailedError(resource, message) from exc

    async def summary(self) -> DashboardSummary:
        budgets, expenses, income, payroll, goals = await self._load(
            ("budgets", "expenses", "income", "payroll", "goals"),
            "dashboard",
            "Failed to fetch dashboard data.",
        )
        return build_summary(budgets, expenses, income, payroll, goals)

    async def report(self) -> FinanceReport:
        budgets, expenses, income = await self._load(
            ("budgets", "expenses", "income"),
            "reports",
            "Failed to fetch reports data.",
        )
        return build_report(budgets, expenses, income)

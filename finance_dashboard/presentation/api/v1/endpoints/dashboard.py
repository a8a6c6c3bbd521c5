"""Dashboard and reports chart endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from finance_dashboard.application.schemas.dashboard import DashboardSummary, FinanceReport
from finance_dashboard.application.services import DashboardService
from finance_dashboard.domain.exceptions import FetchFailedError
from finance_dashboard.infrastructure.dependencies import get_dashboard_service

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard", response_model=DashboardSummary)
async def dashboard(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardSummary:
    """Totals, overruns, achievements and the comparison bar chart."""
    try:
        return await service.summary()
    except FetchFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


@router.get("/reports", response_model=FinanceReport)
async def reports(
    service: DashboardService = Depends(get_dashboard_service),
) -> FinanceReport:
    """Net balance, expense-category pie and budget-vs-actual bars."""
    try:
        return await service.report()
    except FetchFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

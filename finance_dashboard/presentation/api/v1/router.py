"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from finance_dashboard.presentation.api.v1.endpoints.health import router as health_router
from finance_dashboard.presentation.api.v1.endpoints.auth import router as auth_router
from finance_dashboard.presentation.api.v1.endpoints.pages import router as pages_router
from finance_dashboard.presentation.api.v1.endpoints.page_actions import router as page_actions_router
from finance_dashboard.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from finance_dashboard.presentation.api.v1.endpoints.whitelabel import router as whitelabel_router
from finance_dashboard.presentation.api.v1.endpoints.communications import (
    router as communications_router,
)

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(pages_router)
router.include_router(page_actions_router)
router.include_router(dashboard_router)
router.include_router(whitelabel_router)
router.include_router(communications_router)

"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finance_dashboard.config import get_settings
from finance_dashboard.infrastructure.dependencies import get_session_context
from finance_dashboard.infrastructure.logging.log_config import setup_logging
from finance_dashboard.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and restore the stored session."""
    settings = get_settings()
    setup_logging()

    session = get_session_context()
    if session.is_authenticated:
        logger.info("Restored session for %s", session.user.email)
    else:
        logger.info("No stored session; sign-in required")
    logger.info("Collaborator API at %s", settings.api_base_url)

    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "finance_dashboard.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )

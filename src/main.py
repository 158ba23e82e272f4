"""
Main FastAPI application entry point.

Builds the application from settings: system endpoints at the root, claims
and admin endpoints under settings.api_v1_prefix.

Run:
    uvicorn src.main:app
"""

from fastapi import FastAPI

from src.core.config import get_settings
from src.presentation.routers import system_router
from src.presentation.routers.api.v1 import v1_router


def create_app() -> FastAPI:
    """Create the FastAPI application.

    Returns:
        FastAPI: Configured application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Hierarchy-based authorization engine",
        version=settings.app_version,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        debug=settings.debug,
    )

    app.include_router(system_router)
    app.include_router(v1_router, prefix=settings.api_v1_prefix)
    return app


app = create_app()

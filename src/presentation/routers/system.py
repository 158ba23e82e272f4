"""System router for non-versioned application endpoints.

Root and health endpoints for load balancers and basic diagnostics. Side
effect free and unauthenticated.
"""

from fastapi import APIRouter

from src.core.config import get_settings

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Application name, status and version.
    """
    settings = get_settings()
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers."""
    return {"status": "healthy"}

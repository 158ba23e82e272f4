"""External-facing routers.

- system_router: non-versioned root and health endpoints
- api.v1.v1_router: versioned claims and admin endpoints
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]

"""API v1 routers.

RESTful resource-based endpoints. The version prefix is applied by the app
factory from settings.api_v1_prefix.

Resources:
    /claims/me                                   - Caller's claims and state

Admin Resources:
    /admin/subjects/{subject_id}/revocations      - Subject revocation
    /admin/subjects/{subject_id}/refresh-requests - Forced claims refresh
    /admin/claims-rotations                       - Global claims rotation
"""

from fastapi import APIRouter

from src.presentation.routers.api.v1.admin import admin_router
from src.presentation.routers.api.v1.claims import claims_router

v1_router = APIRouter()
v1_router.include_router(claims_router)
v1_router.include_router(admin_router)

__all__ = [
    "v1_router",
]

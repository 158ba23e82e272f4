"""Admin API routers.

Routes:
    POST /admin/subjects/{subject_id}/revocations      - Revoke subject
    POST /admin/subjects/{subject_id}/refresh-requests - Force refresh
    POST /admin/claims-rotations                       - Global rotation
"""

from src.presentation.routers.api.v1.admin.claims_lifecycle import admin_router

__all__ = [
    "admin_router",
]

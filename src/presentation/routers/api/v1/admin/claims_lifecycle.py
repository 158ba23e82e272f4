"""Claims lifecycle admin endpoints.

Handlers:
    create_revocation       - Revoke a subject's claims
    create_refresh_request  - Force a subject's claims stale
    create_claims_rotation  - Global claims rotation

All handlers require a valid token and an effective hierarchy of at least
ADMIN_HIERARCHY in the caller's own organization (route guard).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from src.application.commands.claims_commands import (
    ForceClaimsRefresh,
    RevokeSubjectClaims,
    TriggerGlobalClaimsRotation,
)
from src.application.commands.handlers.force_claims_refresh_handler import (
    ForceClaimsRefreshHandler,
)
from src.application.commands.handlers.revoke_subject_claims_handler import (
    RevokeSubjectClaimsHandler,
)
from src.application.commands.handlers.trigger_global_claims_rotation_handler import (
    TriggerGlobalClaimsRotationHandler,
)
from src.core.container import (
    get_force_claims_refresh_handler,
    get_revoke_subject_claims_handler,
    get_trigger_global_claims_rotation_handler,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities.principal_claims import PrincipalClaims
from src.presentation.routers.api.middleware.authorization_dependencies import (
    require_hierarchy,
)
from src.schemas.claims_schemas import (
    ClaimsRotationCreateRequest,
    ClaimsRotationResponse,
    ClaimsVersionResponse,
    RefreshRequestCreateRequest,
    RevocationCreateRequest,
)

ADMIN_HIERARCHY = 90

admin_router = APIRouter(prefix="/admin", tags=["Admin"])

AdminClaims = Annotated[PrincipalClaims, Depends(require_hierarchy(ADMIN_HIERARCHY))]
SubjectId = Annotated[str, Path(min_length=1, description="Target subject ID")]


# =============================================================================
# Revocation
# =============================================================================


@admin_router.post(
    "/subjects/{subject_id}/revocations",
    status_code=status.HTTP_201_CREATED,
    response_model=ClaimsVersionResponse,
)
async def create_revocation(
    subject_id: SubjectId,
    data: RevocationCreateRequest,
    admin: AdminClaims,
    handler: Annotated[
        RevokeSubjectClaimsHandler, Depends(get_revoke_subject_claims_handler)
    ],
) -> ClaimsVersionResponse:
    """Revoke every claims bundle of a subject.

    POST /api/v1/admin/subjects/{subject_id}/revocations → 201 Created

    The subject must re-authenticate; refresh is refused until then.
    """
    command = RevokeSubjectClaims(
        subject_id=subject_id,
        triggered_by=admin.subject_id,
        reason=data.reason,
    )

    match await handler.handle(command):
        case Success(value=result):
            return ClaimsVersionResponse(
                subject_id=result.subject_id,
                previous_version=result.previous_version,
                new_version=result.new_version,
            )
        case Failure(error=error):
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to revoke subject: {error.code.value}",
            )


# =============================================================================
# Forced refresh
# =============================================================================


@admin_router.post(
    "/subjects/{subject_id}/refresh-requests",
    status_code=status.HTTP_201_CREATED,
    response_model=ClaimsVersionResponse,
)
async def create_refresh_request(
    subject_id: SubjectId,
    admin: AdminClaims,
    handler: Annotated[
        ForceClaimsRefreshHandler, Depends(get_force_claims_refresh_handler)
    ],
    data: RefreshRequestCreateRequest | None = None,
) -> ClaimsVersionResponse:
    """Mark a subject's claims stale.

    POST /api/v1/admin/subjects/{subject_id}/refresh-requests → 201 Created

    Responds 409 Conflict for a revoked subject.
    """
    request = data or RefreshRequestCreateRequest()
    command = ForceClaimsRefresh(
        subject_id=subject_id,
        triggered_by=admin.subject_id,
        change=request.change,
    )

    match await handler.handle(command):
        case Success(value=result):
            return ClaimsVersionResponse(
                subject_id=result.subject_id,
                previous_version=result.previous_version,
                new_version=result.new_version,
            )
        case Failure(error=error) if error.code == ErrorCode.REVOKED_TOKEN:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Subject is revoked",
            )
        case Failure(error=error):
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to request refresh: {error.code.value}",
            )


# =============================================================================
# Global rotation
# =============================================================================


@admin_router.post(
    "/claims-rotations",
    status_code=status.HTTP_201_CREATED,
    response_model=ClaimsRotationResponse,
)
async def create_claims_rotation(
    data: ClaimsRotationCreateRequest,
    admin: AdminClaims,
    handler: Annotated[
        TriggerGlobalClaimsRotationHandler,
        Depends(get_trigger_global_claims_rotation_handler),
    ],
) -> ClaimsRotationResponse:
    """Mark every tracked subject's claims stale.

    POST /api/v1/admin/claims-rotations → 201 Created
    """
    command = TriggerGlobalClaimsRotation(
        triggered_by=admin.subject_id,
        reason=data.reason,
    )

    match await handler.handle(command):
        case Success(value=result):
            return ClaimsRotationResponse(rotated_subjects=result.rotated_subjects)
        case Failure(error=error):
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to rotate claims: {error.code.value}",
            )

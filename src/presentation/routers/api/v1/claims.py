"""Claims inspection endpoint.

GET /api/v1/claims/me returns the caller's decoded claims next to their
lifecycle state, so clients can tell when a refresh is due.

Authentication only: a stale or revoked token may still inspect itself.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.services.token_lifecycle_manager import TokenLifecycleManager
from src.core.container import get_lifecycle_manager
from src.presentation.routers.api.middleware.auth_dependencies import CurrentClaims
from src.schemas.claims_schemas import ClaimsResponse

claims_router = APIRouter(prefix="/claims", tags=["Claims"])


@claims_router.get("/me", response_model=ClaimsResponse)
async def get_my_claims(
    claims: CurrentClaims,
    lifecycle: Annotated[TokenLifecycleManager, Depends(get_lifecycle_manager)],
) -> ClaimsResponse:
    """Get the caller's claims and their lifecycle state.

    GET /api/v1/claims/me → 200 OK

    Returns:
        ClaimsResponse with claims, state and the authoritative version.
    """
    return ClaimsResponse.from_claims(
        claims,
        state=lifecycle.state_of(claims),
        current_version=lifecycle.current_version(claims.subject_id),
    )

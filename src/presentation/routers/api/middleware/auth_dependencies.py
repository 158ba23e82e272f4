"""Claims authentication dependencies.

FastAPI dependencies that turn the bearer token into PrincipalClaims.
Use these on every route that needs the caller's authorization claims.

Decoding proves authenticity only. Lifecycle (stale/revoked) and access
checks happen in authorization_dependencies.require_access.

Usage:
    @router.get("/protected")
    async def protected_route(claims: CurrentClaims):
        return {"subject_id": claims.subject_id}
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_logger, get_token_service
from src.core.result import Failure, Success
from src.domain.entities.principal_claims import PrincipalClaims
from src.domain.protocols.claims_token_protocol import ClaimsTokenProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol

# auto_error=False so a missing header gets the same 401 body as a bad token
bearer_scheme = HTTPBearer(auto_error=False)

UNAUTHORIZED_DETAIL = "Invalid or expired token"


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHORIZED_DETAIL,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_claims(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[ClaimsTokenProtocol, Depends(get_token_service)],
    logger: Annotated[LoggerProtocol, Depends(get_logger)],
) -> PrincipalClaims:
    """Get the caller's claims from the bearer token.

    Args:
        credentials: Bearer token from Authorization header (optional).
        token_service: Claims token service (injected).
        logger: Structured logger (injected).

    Returns:
        PrincipalClaims decoded from a valid token.

    Raises:
        HTTPException 401: If token is missing, invalid, or expired.
    """
    if credentials is None:
        raise _unauthorized()

    match token_service.decode(credentials.credentials):
        case Success(value=claims):
            return claims
        case Failure(error=error):
            logger.info("claims_token_rejected", error_code=error.code.value)
            raise _unauthorized()


CurrentClaims = Annotated[PrincipalClaims, Depends(get_current_claims)]

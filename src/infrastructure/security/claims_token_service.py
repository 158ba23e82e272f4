"""Claims token service (adapter).

Implements ClaimsTokenProtocol using PyJWT with HMAC-SHA256.

Architecture:
    - Implements ClaimsTokenProtocol (no inheritance required)
    - Payload shape and invariants owned by ClaimsTokenPayload (pydantic)
    - Injected via dependency container

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Unique JWT ID (jti) per token
    - Decode re-checks effectiveHierarchy == max(team, dashboard) and
      organizationId ∈ accessibleOrganizationIds

Decoding only proves the token is authentic. Whether its claims are still
current is the TokenLifecycleManager's call.
"""

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.principal_claims import PrincipalClaims
from src.domain.errors import AuthorizationError
from src.schemas.claims_schemas import ClaimsTokenPayload


class ClaimsTokenService:
    """Signs and verifies claims tokens.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.encode(claims)

        match token_service.decode(token):
            case Success(value=claims):
                ...
            case Failure(error=error):
                ...  # TOKEN_INVALID / TOKEN_EXPIRED
    """

    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        expiration_minutes: int = 60,
    ) -> None:
        """Initialize claims token service.

        Args:
            secret_key: HMAC signing key, at least 32 bytes.
            algorithm: JWT algorithm (HS256).
            expiration_minutes: Token lifetime.

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expiration_minutes = expiration_minutes

    def encode(self, claims: PrincipalClaims) -> str:
        """Sign claims into a JWT.

        Args:
            claims: Claims to embed.

        Returns:
            str: header.payload.signature
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = ClaimsTokenPayload.from_claims(
            claims,
            iat=int(now.timestamp()),
            exp=int(expires_at.timestamp()),
            jti=str(uuid7()),
        ).model_dump(mode="json", by_alias=True)

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def decode(self, token: str) -> Result[PrincipalClaims, AuthorizationError]:
        """Verify a JWT and rebuild its claims.

        Args:
            token: JWT string.

        Returns:
            Success(PrincipalClaims), or Failure with TOKEN_EXPIRED for an
            expired token and TOKEN_INVALID for anything else (bad signature,
            malformed payload, inconsistent hierarchy or organization).
        """
        try:
            raw = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat", "sub"]},
            )
        except ExpiredSignatureError:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Claims token has expired",
                )
            )
        except InvalidTokenError:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Claims token is invalid",
                )
            )

        try:
            claims = ClaimsTokenPayload.model_validate(raw).to_claims()
        except ValueError as e:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Claims token payload is invalid",
                    details={"reason": str(e).splitlines()[0]},
                )
            )
        return Success(value=claims)

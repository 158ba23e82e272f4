"""Claims token protocol (port).

Signs PrincipalClaims into a compact token and verifies tokens back into
claims. Every enforcement point consumes claims decoded through this port.

Implementations:
    - ClaimsTokenService: src/infrastructure/security/claims_token_service.py
"""

from typing import Protocol

from src.core.result import Result
from src.domain.entities.principal_claims import PrincipalClaims
from src.domain.errors import AuthorizationError


class ClaimsTokenProtocol(Protocol):
    """Protocol for claims token signing and verification."""

    def encode(self, claims: PrincipalClaims) -> str:
        """Sign claims into a token string.

        Args:
            claims: Claims to embed.

        Returns:
            str: Signed token.
        """
        ...

    def decode(self, token: str) -> Result[PrincipalClaims, AuthorizationError]:
        """Verify a token and rebuild its claims.

        Args:
            token: Signed token string.

        Returns:
            Success(PrincipalClaims) if signature, expiry and claims
            invariants hold; Failure(TOKEN_INVALID or TOKEN_EXPIRED) otherwise.
        """
        ...

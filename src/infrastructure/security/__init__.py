"""Security infrastructure adapters.

- Claims token signing/verification (PyJWT, HS256)
"""

from src.infrastructure.security.claims_token_service import ClaimsTokenService

__all__ = [
    "ClaimsTokenService",
]

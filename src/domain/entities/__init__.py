"""Domain entities.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.principal_claims import PrincipalClaims

__all__ = ["PrincipalClaims"]

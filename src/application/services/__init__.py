"""Application services.

- TokenLifecycleManager: Per-subject claims versions and revocation
- ClaimsIssuer: Builds and registers claims on login/refresh
- AccessGate: Lifecycle check + access evaluation shared by all adapters
"""

from src.application.services.access_gate import AccessGate
from src.application.services.claims_issuer import ClaimsIssuer
from src.application.services.token_lifecycle_manager import (
    SubjectLifecycle,
    TokenLifecycleManager,
)

__all__ = [
    "AccessGate",
    "ClaimsIssuer",
    "SubjectLifecycle",
    "TokenLifecycleManager",
]

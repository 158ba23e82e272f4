"""Claims lifecycle handler dependency factories.

Request-scoped handler instances for admin lifecycle operations:
- Subject revocation
- Forced claims refresh
- Global claims rotation
"""

from typing import TYPE_CHECKING

from src.core.container.authorization import get_lifecycle_manager
from src.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from src.application.commands.handlers.force_claims_refresh_handler import (
        ForceClaimsRefreshHandler,
    )
    from src.application.commands.handlers.revoke_subject_claims_handler import (
        RevokeSubjectClaimsHandler,
    )
    from src.application.commands.handlers.trigger_global_claims_rotation_handler import (
        TriggerGlobalClaimsRotationHandler,
    )


def get_revoke_subject_claims_handler() -> "RevokeSubjectClaimsHandler":
    """Get RevokeSubjectClaims command handler (request-scoped)."""
    from src.application.commands.handlers.revoke_subject_claims_handler import (
        RevokeSubjectClaimsHandler,
    )

    return RevokeSubjectClaimsHandler(
        lifecycle=get_lifecycle_manager(),
        logger=get_logger(),
    )


def get_force_claims_refresh_handler() -> "ForceClaimsRefreshHandler":
    """Get ForceClaimsRefresh command handler (request-scoped)."""
    from src.application.commands.handlers.force_claims_refresh_handler import (
        ForceClaimsRefreshHandler,
    )

    return ForceClaimsRefreshHandler(
        lifecycle=get_lifecycle_manager(),
        logger=get_logger(),
    )


def get_trigger_global_claims_rotation_handler() -> (
    "TriggerGlobalClaimsRotationHandler"
):
    """Get TriggerGlobalClaimsRotation command handler (request-scoped)."""
    from src.application.commands.handlers.trigger_global_claims_rotation_handler import (
        TriggerGlobalClaimsRotationHandler,
    )

    return TriggerGlobalClaimsRotationHandler(
        lifecycle=get_lifecycle_manager(),
        logger=get_logger(),
    )

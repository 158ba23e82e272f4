"""Handler for RevokeSubjectClaims command.

Flow:
1. Read current claims version
2. Revoke through the TokenLifecycleManager (emits ClaimsRevoked)
3. Return Success(ClaimsVersionResult)
"""

from src.application.commands.claims_commands import (
    ClaimsVersionResult,
    RevokeSubjectClaims,
)
from src.application.services.token_lifecycle_manager import TokenLifecycleManager
from src.core.result import Result, Success
from src.domain.errors import AuthorizationError
from src.domain.protocols.logger_protocol import LoggerProtocol


class RevokeSubjectClaimsHandler:
    """Handler for per-subject claims revocation.

    Revoked claims are denied REVOKED_TOKEN at every enforcement point,
    regardless of hierarchy.
    """

    def __init__(
        self,
        lifecycle: TokenLifecycleManager,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            lifecycle: Claims lifecycle manager.
            logger: Structured logger.
        """
        self._lifecycle = lifecycle
        self._logger = logger

    async def handle(
        self,
        cmd: RevokeSubjectClaims,
    ) -> Result[ClaimsVersionResult, AuthorizationError]:
        """Handle revocation command.

        Args:
            cmd: RevokeSubjectClaims command.

        Returns:
            Success(ClaimsVersionResult) with the version transition.
        """
        previous_version = self._lifecycle.current_version(cmd.subject_id)
        new_version = await self._lifecycle.revoke(cmd.subject_id, cmd.reason)

        self._logger.info(
            "subject_claims_revoked",
            subject_id=cmd.subject_id,
            triggered_by=cmd.triggered_by,
            reason=cmd.reason,
            previous_version=previous_version,
            new_version=new_version,
        )
        return Success(
            value=ClaimsVersionResult(
                subject_id=cmd.subject_id,
                previous_version=previous_version,
                new_version=new_version,
            )
        )

"""Handler for ForceClaimsRefresh command.

Flow:
1. Refuse a refresh request for a revoked subject (revocation wins)
2. Mark claims stale through the TokenLifecycleManager (emits ClaimsMarkedStale)
3. Return Success(ClaimsVersionResult)
"""

from src.application.commands.claims_commands import (
    ClaimsVersionResult,
    ForceClaimsRefresh,
)
from src.application.services.token_lifecycle_manager import TokenLifecycleManager
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthorizationError
from src.domain.protocols.logger_protocol import LoggerProtocol


class ForceClaimsRefreshHandler:
    """Handler for forced claims refresh (aggressive invalidation)."""

    def __init__(
        self,
        lifecycle: TokenLifecycleManager,
        logger: LoggerProtocol,
    ) -> None:
        self._lifecycle = lifecycle
        self._logger = logger

    async def handle(
        self,
        cmd: ForceClaimsRefresh,
    ) -> Result[ClaimsVersionResult, AuthorizationError]:
        """Handle forced refresh command.

        Args:
            cmd: ForceClaimsRefresh command.

        Returns:
            Success(ClaimsVersionResult) with the version transition.
            Failure(REVOKED_TOKEN) if the subject is revoked; only
            re-authentication clears a revocation.
        """
        if self._lifecycle.is_revoked(cmd.subject_id):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.REVOKED_TOKEN,
                    message="Subject is revoked; refresh is not possible",
                    details={"subject_id": cmd.subject_id},
                )
            )

        previous_version = self._lifecycle.current_version(cmd.subject_id)
        new_version = await self._lifecycle.mark_stale(cmd.subject_id, cmd.change)

        self._logger.info(
            "claims_refresh_forced",
            subject_id=cmd.subject_id,
            triggered_by=cmd.triggered_by,
            change=cmd.change.value,
            new_version=new_version,
        )
        return Success(
            value=ClaimsVersionResult(
                subject_id=cmd.subject_id,
                previous_version=previous_version,
                new_version=new_version,
            )
        )

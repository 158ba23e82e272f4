"""Handler for TriggerGlobalClaimsRotation command."""

from src.application.commands.claims_commands import (
    GlobalClaimsRotationResult,
    TriggerGlobalClaimsRotation,
)
from src.application.services.token_lifecycle_manager import TokenLifecycleManager
from src.core.result import Result, Success
from src.domain.errors import AuthorizationError
from src.domain.protocols.logger_protocol import LoggerProtocol


class TriggerGlobalClaimsRotationHandler:
    """Handler for global claims rotation.

    Every subject the lifecycle manager tracks gets its claims marked stale.
    Revocations stay in force.
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
        cmd: TriggerGlobalClaimsRotation,
    ) -> Result[GlobalClaimsRotationResult, AuthorizationError]:
        """Handle global rotation command.

        Args:
            cmd: TriggerGlobalClaimsRotation command.

        Returns:
            Success(GlobalClaimsRotationResult).
        """
        rotated = await self._lifecycle.rotate_all(cmd.reason)
        self._logger.info(
            "global_claims_rotation_triggered",
            triggered_by=cmd.triggered_by,
            reason=cmd.reason,
            rotated_subjects=rotated,
        )
        return Success(value=GlobalClaimsRotationResult(rotated_subjects=rotated))

"""Unit tests for claims lifecycle command handlers.

Tests cover:
- RevokeSubjectClaimsHandler
- ForceClaimsRefreshHandler (including refusal for revoked subjects)
- TriggerGlobalClaimsRotationHandler
"""

import pytest

from src.application.commands.claims_commands import (
    ClaimsVersionResult,
    ForceClaimsRefresh,
    GlobalClaimsRotationResult,
    RevokeSubjectClaims,
    TriggerGlobalClaimsRotation,
)
from src.application.commands.handlers.force_claims_refresh_handler import (
    ForceClaimsRefreshHandler,
)
from src.application.commands.handlers.revoke_subject_claims_handler import (
    RevokeSubjectClaimsHandler,
)
from src.application.commands.handlers.trigger_global_claims_rotation_handler import (
    TriggerGlobalClaimsRotationHandler,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import ClaimsState, MembershipChange
from tests.conftest import make_claims


async def _register_first_version(lifecycle, subject_id="user-1"):
    claims = make_claims(subject_id=subject_id, claims_version=1)
    await lifecycle.register(claims, expected_version=0, reauthenticated=True)
    return claims


@pytest.mark.unit
class TestRevokeSubjectClaimsHandler:
    """Test revocation command."""

    @pytest.mark.asyncio
    async def test_revoke_returns_version_transition(self, lifecycle, mock_logger):
        """Test revocation result and effect."""
        # Arrange
        claims = await _register_first_version(lifecycle)
        handler = RevokeSubjectClaimsHandler(lifecycle=lifecycle, logger=mock_logger)

        # Act
        result = await handler.handle(
            RevokeSubjectClaims(
                subject_id="user-1", triggered_by="admin-1", reason="compromised"
            )
        )

        # Assert
        assert result == Success(
            value=ClaimsVersionResult(
                subject_id="user-1", previous_version=1, new_version=2
            )
        )
        assert lifecycle.state_of(claims) == ClaimsState.REVOKED

    @pytest.mark.asyncio
    async def test_revoke_unknown_subject_succeeds(self, lifecycle, mock_logger):
        """Test revoking a subject never seen blocks its future refreshes."""
        handler = RevokeSubjectClaimsHandler(lifecycle=lifecycle, logger=mock_logger)

        result = await handler.handle(
            RevokeSubjectClaims(
                subject_id="user-9", triggered_by="admin-1", reason="offboarded"
            )
        )

        assert isinstance(result, Success)
        assert lifecycle.is_revoked("user-9") is True


@pytest.mark.unit
class TestForceClaimsRefreshHandler:
    """Test forced refresh command."""

    @pytest.mark.asyncio
    async def test_force_refresh_marks_stale(self, lifecycle, mock_logger):
        """Test outstanding claims become STALE."""
        claims = await _register_first_version(lifecycle)
        handler = ForceClaimsRefreshHandler(lifecycle=lifecycle, logger=mock_logger)

        result = await handler.handle(
            ForceClaimsRefresh(
                subject_id="user-1",
                triggered_by="admin-1",
                change=MembershipChange.PERMISSION,
            )
        )

        assert isinstance(result, Success)
        assert result.value.new_version == 2
        assert lifecycle.state_of(claims) == ClaimsState.STALE

    @pytest.mark.asyncio
    async def test_force_refresh_of_revoked_subject_fails(self, lifecycle, mock_logger):
        """Test revocation is not downgraded to staleness."""
        claims = await _register_first_version(lifecycle)
        await lifecycle.revoke("user-1", "compromised")
        handler = ForceClaimsRefreshHandler(lifecycle=lifecycle, logger=mock_logger)

        result = await handler.handle(
            ForceClaimsRefresh(subject_id="user-1", triggered_by="admin-1")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.REVOKED_TOKEN
        assert lifecycle.state_of(claims) == ClaimsState.REVOKED


@pytest.mark.unit
class TestTriggerGlobalClaimsRotationHandler:
    """Test global rotation command."""

    @pytest.mark.asyncio
    async def test_rotation_counts_subjects(self, lifecycle, mock_logger):
        """Test every tracked subject is rotated."""
        first = await _register_first_version(lifecycle, "user-1")
        second = await _register_first_version(lifecycle, "user-2")
        handler = TriggerGlobalClaimsRotationHandler(
            lifecycle=lifecycle, logger=mock_logger
        )

        result = await handler.handle(
            TriggerGlobalClaimsRotation(triggered_by="admin-1", reason="key rotation")
        )

        assert result == Success(value=GlobalClaimsRotationResult(rotated_subjects=2))
        assert lifecycle.state_of(first) == ClaimsState.STALE
        assert lifecycle.state_of(second) == ClaimsState.STALE

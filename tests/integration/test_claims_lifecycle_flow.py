"""Integration tests for the claims lifecycle across the container.

Exercises real wiring (container singletons, event bus with the logging
handler, token service) end to end:
- Login -> token -> decode -> access through every enforcement point
- Membership change -> stale -> elevated access denied until refresh
- Revocation -> denied everywhere -> refresh refused -> re-login allowed
- Role catalog loaded from a JSON file named in settings
"""

import json
import os
from unittest.mock import patch

import pytest

from src.core.config import get_settings
from src.core.container import (
    clear_container_cache,
    get_claims_issuer,
    get_hierarchy_resolver,
    get_lifecycle_manager,
    get_render_guard,
    get_role_store,
    get_storage_rule_evaluator,
    get_token_service,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.authorization import DEFAULT_ROLE_LEVELS
from src.domain.enums import DecisionReason, MembershipChange, Taxonomy
from src.domain.protocols.role_store_protocol import SubjectMembership

BUDGET = {"organizationId": "org-1"}


async def _login(subject_id="user-1", **roles):
    get_role_store().put(
        SubjectMembership(subject_id=subject_id, organization_id="org-1", **roles)
    )
    result = await get_claims_issuer().issue_token(subject_id)
    assert isinstance(result, Success)
    return get_token_service().decode(result.value).value


@pytest.mark.integration
class TestClaimsLifecycleFlow:
    """End-to-end lifecycle through the container."""

    @pytest.mark.asyncio
    async def test_issued_token_grants_access(self):
        """Test director reads budgets at storage and UI layers."""
        claims = await _login(team_role="DIRECTOR")

        assert get_storage_rule_evaluator().check(claims, "budgets", BUDGET).allowed
        assert get_render_guard().can_render(
            claims,
            get_storage_rule_evaluator().descriptor_for("budgets", BUDGET),
        )

    @pytest.mark.asyncio
    async def test_membership_change_requires_refresh(self):
        """Test stale claims lose elevated access until refreshed."""
        # Arrange
        claims = await _login(team_role="DIRECTOR")
        get_role_store().put(
            SubjectMembership(
                subject_id="user-1", organization_id="org-1", team_role="ASSISTANT"
            )
        )
        await get_lifecycle_manager().mark_stale("user-1", MembershipChange.ROLE)

        # Act
        stale = get_storage_rule_evaluator().check(claims, "budgets", BUDGET)
        refreshed = await get_claims_issuer().issue("user-1", reauthenticated=False)

        # Assert
        assert stale.reason == DecisionReason.STALE_CLAIMS
        assert isinstance(refreshed, Success)
        assert refreshed.value.team_hierarchy == 40
        after = get_storage_rule_evaluator().check(refreshed.value, "budgets", BUDGET)
        assert after.reason == DecisionReason.INSUFFICIENT_HIERARCHY

    @pytest.mark.asyncio
    async def test_revocation_denies_everywhere(self):
        """Test revoked claims with sufficient hierarchy are denied by every adapter."""
        # Arrange
        claims = await _login(team_role="OWNER")
        descriptor = get_storage_rule_evaluator().descriptor_for("budgets", BUDGET)

        # Act
        await get_lifecycle_manager().revoke("user-1", "compromised")

        # Assert
        storage = get_storage_rule_evaluator().check(claims, "budgets", BUDGET)
        assert storage.reason == DecisionReason.REVOKED_TOKEN
        assert get_render_guard().can_render(claims, descriptor) is False

    @pytest.mark.asyncio
    async def test_refresh_refused_until_relogin(self):
        """Test revocation blocks refresh; re-authentication restores access."""
        old = await _login(team_role="OWNER")
        await get_lifecycle_manager().revoke("user-1", "compromised")

        refresh = await get_claims_issuer().issue("user-1", reauthenticated=False)
        relogin = await get_claims_issuer().issue("user-1", reauthenticated=True)

        assert isinstance(refresh, Failure)
        assert refresh.error.code == ErrorCode.REVOKED_TOKEN
        assert isinstance(relogin, Success)
        evaluator = get_storage_rule_evaluator()
        assert evaluator.check(relogin.value, "budgets", BUDGET).allowed is True
        assert evaluator.check(old, "budgets", BUDGET).allowed is False


@pytest.mark.integration
class TestRoleCatalogFromSettings:
    """Test catalog loaded from ROLE_CATALOG_PATH."""

    def test_catalog_file_replaces_levels(self, tmp_path):
        """Test container resolver reads the configured catalog."""
        levels = {
            taxonomy.value: dict(entries)
            for taxonomy, entries in DEFAULT_ROLE_LEVELS.items()
        }
        levels["team"]["COORDINATOR"] = 55
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"levels": levels}))

        with patch.dict(os.environ, {"ROLE_CATALOG_PATH": str(path)}):
            clear_container_cache()
            assert get_settings().role_catalog_path == path
            level = get_hierarchy_resolver().resolve_level(Taxonomy.TEAM, "COORDINATOR")

        assert level == 55

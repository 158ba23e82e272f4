"""Fixtures for HTTP tests through the FastAPI app.

Tokens are minted the way a login would: the subject's membership is put in
the container's role store and the container's ClaimsIssuer issues and signs
the claims, so the lifecycle manager behind the routes knows the version.
"""

import asyncio
from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from src.core.container import get_claims_issuer, get_role_store
from src.core.result import Success
from src.domain.protocols.role_store_protocol import SubjectMembership
from src.main import app


@pytest.fixture
def client() -> TestClient:
    """Test client over the real application."""
    return TestClient(app)


@pytest.fixture
def issue_token() -> Callable[..., str]:
    """Factory: store a membership and return a signed claims token."""

    def _issue(
        subject_id: str,
        *,
        organization_id: str = "org-1",
        team_role: str | None = None,
        dashboard_role: str | None = None,
        secondary_organization_ids: tuple[str, ...] = (),
    ) -> str:
        get_role_store().put(
            SubjectMembership(
                subject_id=subject_id,
                organization_id=organization_id,
                team_role=team_role,
                dashboard_role=dashboard_role,
                secondary_organization_ids=secondary_organization_ids,
            )
        )
        result = asyncio.run(get_claims_issuer().issue_token(subject_id))
        assert isinstance(result, Success)
        return result.value

    return _issue


def bearer(token: str) -> dict[str, str]:
    """Authorization header for a token."""
    return {"Authorization": f"Bearer {token}"}

"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Required settings exist before any src module reads them
2. Container singletons are reset between tests (no shared lifecycle state)
3. Authorization engine objects are built from real domain code with a
   mocked logger, so tests can assert on structured log events
"""

import os

# Settings are read at import time by src.main; set before collection.
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-claims-signing-0123456789")
os.environ.setdefault("ENVIRONMENT", "testing")

from collections.abc import Iterator  # noqa: E402
from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402

from src.application.services.access_gate import AccessGate  # noqa: E402
from src.application.services.token_lifecycle_manager import (  # noqa: E402
    TokenLifecycleManager,
)
from src.core.container import clear_container_cache  # noqa: E402
from src.domain.authorization import HierarchyResolver, RoleCatalog  # noqa: E402
from src.domain.entities.principal_claims import PrincipalClaims  # noqa: E402
from src.infrastructure.events import InMemoryEventBus  # noqa: E402

TEST_SECRET_KEY = os.environ["SECRET_KEY"]


def make_claims(
    *,
    subject_id: str = "user-1",
    organization_id: str = "org-1",
    secondary_organization_ids: tuple[str, ...] = (),
    team_hierarchy: int = 0,
    dashboard_hierarchy: int = 0,
    role: str | None = None,
    claims_version: int = 1,
) -> PrincipalClaims:
    """Helper to create PrincipalClaims for testing.

    Usage:
        claims = make_claims(team_hierarchy=90, dashboard_hierarchy=80)
    """
    return PrincipalClaims(
        subject_id=subject_id,
        primary_organization_id=organization_id,
        accessible_organization_ids=PrincipalClaims.merge_organizations(
            organization_id, secondary_organization_ids
        ),
        team_hierarchy=team_hierarchy,
        dashboard_hierarchy=dashboard_hierarchy,
        role=role,
        claims_version=claims_version,
    )


@pytest.fixture(autouse=True)
def reset_container() -> Iterator[None]:
    """Drop container singletons around every test."""
    clear_container_cache()
    yield
    clear_container_cache()


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double recording structured calls."""
    return Mock()


@pytest.fixture
def event_bus(mock_logger: Mock) -> InMemoryEventBus:
    """Real in-memory event bus with no subscribers."""
    return InMemoryEventBus(logger=mock_logger)


@pytest.fixture
def catalog() -> RoleCatalog:
    """Built-in role catalog."""
    return RoleCatalog.default()


@pytest.fixture
def resolver(catalog: RoleCatalog, mock_logger: Mock) -> HierarchyResolver:
    """Resolver over the built-in catalog, fallback level 0."""
    return HierarchyResolver(catalog, mock_logger)


@pytest.fixture
def lifecycle(event_bus: InMemoryEventBus, mock_logger: Mock) -> TokenLifecycleManager:
    """Fresh lifecycle manager."""
    return TokenLifecycleManager(event_bus=event_bus, logger=mock_logger)


@pytest.fixture
def gate(
    lifecycle: TokenLifecycleManager,
    event_bus: InMemoryEventBus,
    mock_logger: Mock,
) -> AccessGate:
    """Access gate over the fresh lifecycle manager."""
    return AccessGate(lifecycle=lifecycle, event_bus=event_bus, logger=mock_logger)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real libraries"
    )
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")

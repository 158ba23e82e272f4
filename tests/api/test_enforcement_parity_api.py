"""API tests for decision parity across enforcement points.

The same claims and the same stored document must get the same answer from:
- the storage rule evaluator (authoritative, data layer)
- the route guard (authoritative, HTTP layer, via require_access)
- the UI render guard (non-authoritative)

Architecture:
- A test router guards GET /documents/{collection} with require_access,
  building the descriptor the same way the storage rules do
- Tokens are issued through the real container
"""

from typing import Annotated

import pytest
from fastapi import APIRouter, Depends, FastAPI, Query
from fastapi.testclient import TestClient

from src.core.container import (
    get_render_guard,
    get_storage_rule_evaluator,
    get_token_service,
)
from src.domain.entities.principal_claims import PrincipalClaims
from src.domain.value_objects.resource_descriptor import ResourceDescriptor
from src.presentation.routers.api.middleware.authorization_dependencies import (
    require_access,
)
from tests.api.conftest import bearer


def document_descriptor(
    collection: str,
    organization_id: Annotated[str, Query()],
    required_hierarchy: Annotated[int | None, Query()] = None,
) -> ResourceDescriptor:
    attributes: dict = {"organizationId": organization_id}
    if required_hierarchy is not None:
        attributes["requiredHierarchy"] = required_hierarchy
    return get_storage_rule_evaluator().descriptor_for(collection, attributes)


DocumentReader = Annotated[PrincipalClaims, Depends(require_access(document_descriptor))]


@pytest.fixture
def guarded_client() -> TestClient:
    router = APIRouter()

    @router.get("/documents/{collection}")
    async def read_document(claims: DocumentReader) -> dict[str, str]:
        return {"subject_id": claims.subject_id}

    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


MEMBERSHIPS = {
    "viewer": {"team_role": "GUEST", "dashboard_role": "VIEWER"},
    "coordinator": {"team_role": "COORDINATOR"},
    "manager": {"team_role": "TEAM_MEMBER", "dashboard_role": "MANAGER"},
    "owner": {"team_role": "OWNER"},
}

DOCUMENTS = [
    ("notes", "org-1", None),
    ("projects", "org-1", None),
    ("timecards", "org-1", None),
    ("timecard_approvals", "org-1", None),
    ("budgets", "org-1", None),
    ("organizations", "org-1", None),
    ("projects", "org-1", 95),
    ("notes", "org-2", None),
]


@pytest.mark.api
class TestEnforcementParity:
    """Test storage rules, route guard and UI guard agree."""

    @pytest.mark.parametrize("subject", sorted(MEMBERSHIPS))
    def test_adapters_agree(self, subject, issue_token, guarded_client):
        """Test every document gets one answer from all three adapters."""
        token = issue_token(subject, **MEMBERSHIPS[subject])
        claims = get_token_service().decode(token).value
        storage = get_storage_rule_evaluator()
        ui_guard = get_render_guard()

        for collection, organization_id, required in DOCUMENTS:
            attributes: dict = {"organizationId": organization_id}
            params: dict = {"organization_id": organization_id}
            if required is not None:
                attributes["requiredHierarchy"] = required
                params["required_hierarchy"] = required

            storage_allowed = storage.check(claims, collection, attributes).allowed
            ui_allowed = ui_guard.can_render(
                claims, storage.descriptor_for(collection, attributes)
            )
            response = guarded_client.get(
                f"/documents/{collection}", params=params, headers=bearer(token)
            )
            route_allowed = response.status_code == 200

            assert storage_allowed == ui_allowed == route_allowed, (
                subject,
                collection,
                organization_id,
            )

    def test_expected_decisions(self, issue_token, guarded_client):
        """Test a few concrete outcomes so parity is not vacuous."""
        manager_token = issue_token("manager", **MEMBERSHIPS["manager"])
        viewer_token = issue_token("viewer", **MEMBERSHIPS["viewer"])

        approvals = guarded_client.get(
            "/documents/timecard_approvals",
            params={"organization_id": "org-1"},
            headers=bearer(manager_token),
        )
        budgets = guarded_client.get(
            "/documents/budgets",
            params={"organization_id": "org-1"},
            headers=bearer(manager_token),
        )
        notes = guarded_client.get(
            "/documents/notes",
            params={"organization_id": "org-1"},
            headers=bearer(viewer_token),
        )
        foreign = guarded_client.get(
            "/documents/notes",
            params={"organization_id": "org-2"},
            headers=bearer(viewer_token),
        )

        assert approvals.status_code == 200
        assert budgets.status_code == 200
        assert notes.status_code == 200
        assert foreign.status_code == 403

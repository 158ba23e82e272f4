"""Route guard dependencies (hierarchy-based authorization).

FastAPI dependencies that run the shared AccessGate for a route. This is the
route-level enforcement adapter: it makes the same decision as the storage
rules and the UI guard for the same claims and resource.

Architecture:
    - Claims authentication (auth_dependencies.py): Verifies the token
    - Route guard (this file): Lifecycle + access decision via AccessGate

Every denial answers 403 with the uniform detail "Access denied". The
precise reason is logged and published as an AccessDenied event only.

Usage:
    # Resource described by a dependency (e.g. loaded from storage)
    @router.get("/projects/{project_id}")
    async def get_project(
        claims: PrincipalClaims = Depends(require_access(project_descriptor)),
    ):
        ...

    # Hierarchy floor within the caller's own organization
    @router.post("/admin/things")
    async def admin_route(
        claims: PrincipalClaims = Depends(require_hierarchy(90)),
    ):
        ...
"""

from collections.abc import Awaitable, Callable, Iterable
from typing import Annotated, Any

from fastapi import Depends, HTTPException, status

from src.application.services.access_gate import AccessGate
from src.core.container import get_access_gate
from src.domain.entities.principal_claims import PrincipalClaims
from src.domain.enums import EnforcementPoint
from src.domain.value_objects.resource_descriptor import ResourceDescriptor
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_claims,
)

ACCESS_DENIED_DETAIL = "Access denied"


def require_access(
    resource_dependency: Callable[..., Any],
) -> Callable[..., Awaitable[PrincipalClaims]]:
    """Create a dependency that gates a route on a resource descriptor.

    Args:
        resource_dependency: FastAPI dependency returning the
            ResourceDescriptor of the target resource. It may itself depend
            on path parameters or on get_current_claims.

    Returns:
        Dependency returning the caller's claims when access is allowed.

    Raises:
        HTTPException 401: If the token is missing or invalid.
        HTTPException 403: If the gate denies access.
    """

    async def access_checker(
        claims: Annotated[PrincipalClaims, Depends(get_current_claims)],
        resource: Annotated[ResourceDescriptor, Depends(resource_dependency)],
        gate: Annotated[AccessGate, Depends(get_access_gate)],
    ) -> PrincipalClaims:
        decision = await gate.check_and_record(
            claims,
            resource,
            adapter=EnforcementPoint.ROUTE_GUARD,
        )
        if not decision.allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=ACCESS_DENIED_DETAIL,
            )
        return claims

    return access_checker


def require_hierarchy(
    required_hierarchy: int,
    *,
    allowed_roles: Iterable[str] = (),
) -> Callable[..., Awaitable[PrincipalClaims]]:
    """Create a dependency requiring a hierarchy level in the caller's organization.

    Shorthand for require_access() with a descriptor scoped to the caller's
    primary organization. Used for administrative routes.

    Args:
        required_hierarchy: Minimum effective hierarchy.
        allowed_roles: Dashboard roles admitted regardless of hierarchy.

    Returns:
        Dependency returning the caller's claims when access is allowed.
    """
    roles = frozenset(allowed_roles)

    async def own_organization_resource(
        claims: Annotated[PrincipalClaims, Depends(get_current_claims)],
    ) -> ResourceDescriptor:
        return ResourceDescriptor(
            organization_id=claims.primary_organization_id,
            required_hierarchy=required_hierarchy,
            allowed_roles=roles,
        )

    return require_access(own_organization_resource)

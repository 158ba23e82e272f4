"""AccessEvaluator - the single access decision predicate.

Every enforcement point (storage rules, route guard, UI guard) calls
``evaluate``. Reimplementing this predicate elsewhere is a defect: decisions
must not drift between call sites.

Algorithm (first match wins):
    1. Resource organization not accessible  -> deny  ORGANIZATION_MISMATCH
    2. effective_hierarchy >= required       -> allow HIERARCHY_SUFFICIENT
    3. claims.role in non-empty allowed_roles -> allow ROLE_OVERRIDE
    4. otherwise                              -> deny  INSUFFICIENT_HIERARCHY

Pure and deterministic: no I/O, no state, constant time. Safe to call from
any number of concurrent callers.
"""

from src.domain.entities.principal_claims import PrincipalClaims
from src.domain.enums import DecisionReason
from src.domain.errors import MalformedResourceError
from src.domain.value_objects.access_decision import AccessDecision
from src.domain.value_objects.resource_descriptor import ResourceDescriptor


def evaluate(claims: PrincipalClaims, resource: ResourceDescriptor) -> AccessDecision:
    """Decide whether claims grant access to a resource.

    Ordinary denials are returned, not raised.

    Args:
        claims: Principal claims (read-only).
        resource: Descriptor of the target resource.

    Returns:
        AccessDecision: allowed flag and reason.

    Raises:
        MalformedResourceError: If resource is not a ResourceDescriptor.
    """
    if not isinstance(resource, ResourceDescriptor):
        raise MalformedResourceError(
            f"Expected ResourceDescriptor, got {type(resource).__name__}"
        )

    if not claims.can_access_organization(resource.organization_id):
        return AccessDecision.deny(DecisionReason.ORGANIZATION_MISMATCH)

    if claims.effective_hierarchy >= resource.required_hierarchy:
        return AccessDecision.allow(DecisionReason.HIERARCHY_SUFFICIENT)

    if resource.allowed_roles and claims.role in resource.allowed_roles:
        return AccessDecision.allow(DecisionReason.ROLE_OVERRIDE)

    return AccessDecision.deny(DecisionReason.INSUFFICIENT_HIERARCHY)

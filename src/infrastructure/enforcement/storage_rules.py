"""Storage rule evaluator - authoritative enforcement at the data layer.

Builds a ResourceDescriptor from a stored document's attributes plus the
collection's policy, then asks the AccessGate. Attributes on the document
(``requiredHierarchy``, ``allowedRoles``) override the collection policy.

Collection policies:
    - Listed collections carry a default required hierarchy and allowed roles
    - Unlisted collections fall back to DEFAULT_POLICY (organization scoping
      only: any subject of the owning organization)

Usage:
    evaluator = StorageRuleEvaluator(gate)
    decision = evaluator.check(claims, "invoices", document_attributes)
    if not decision.allowed:
        raise PermissionError("Access denied")
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from src.application.services.access_gate import AccessGate
from src.domain.entities.principal_claims import PrincipalClaims
from src.domain.enums import DashboardRole, EnforcementPoint
from src.domain.value_objects.access_decision import AccessDecision
from src.domain.value_objects.resource_descriptor import ResourceDescriptor


@dataclass(frozen=True, slots=True, kw_only=True)
class CollectionPolicy:
    """Default access requirements of a collection.

    Attributes:
        required_hierarchy: Level used when a document carries none.
        allowed_roles: Dashboard roles used when a document carries none.
    """

    required_hierarchy: int
    allowed_roles: frozenset[str] = field(default_factory=frozenset)


DEFAULT_POLICY = CollectionPolicy(required_hierarchy=0)

DEFAULT_COLLECTION_POLICIES: Mapping[str, CollectionPolicy] = MappingProxyType(
    {
        # Project management
        "projects": CollectionPolicy(required_hierarchy=30),
        "projectAssignments": CollectionPolicy(required_hierarchy=30),
        "sessions": CollectionPolicy(required_hierarchy=30),
        "workflows": CollectionPolicy(required_hierarchy=40),
        # Media & assets
        "mediaFiles": CollectionPolicy(required_hierarchy=40),
        "assets": CollectionPolicy(required_hierarchy=40),
        # Timecard & scheduling
        "timecards": CollectionPolicy(required_hierarchy=50),
        "timecard_approvals": CollectionPolicy(
            required_hierarchy=60,
            allowed_roles=frozenset({DashboardRole.MANAGER.value}),
        ),
        # Financial
        "budgets": CollectionPolicy(required_hierarchy=70),
        "invoices": CollectionPolicy(required_hierarchy=70),
        "licenses": CollectionPolicy(required_hierarchy=80),
        # User & organization
        "teamMembers": CollectionPolicy(required_hierarchy=70),
        "organizations": CollectionPolicy(
            required_hierarchy=90,
            allowed_roles=frozenset({DashboardRole.ADMIN.value}),
        ),
    }
)


class StorageRuleEvaluator:
    """Data-layer enforcement adapter (authoritative).

    Attributes:
        _gate: Shared access gate.
        _policies: Collection name → policy.
        _default_policy: Policy for unlisted collections.
    """

    def __init__(
        self,
        gate: AccessGate,
        policies: Mapping[str, CollectionPolicy] = DEFAULT_COLLECTION_POLICIES,
        *,
        default_policy: CollectionPolicy = DEFAULT_POLICY,
    ) -> None:
        self._gate = gate
        self._policies = MappingProxyType(dict(policies))
        self._default_policy = default_policy

    def policy_for(self, collection: str) -> CollectionPolicy:
        """Get the policy of a collection (default if unlisted)."""
        return self._policies.get(collection, self._default_policy)

    def descriptor_for(
        self,
        collection: str,
        attributes: Mapping[str, Any],
    ) -> ResourceDescriptor:
        """Build the descriptor of a stored document.

        Raises:
            MalformedResourceError: If the document lacks organizationId.
        """
        policy = self.policy_for(collection)
        return ResourceDescriptor.from_attributes(
            attributes,
            default_required_hierarchy=policy.required_hierarchy,
            default_allowed_roles=policy.allowed_roles,
        )

    def check(
        self,
        claims: PrincipalClaims,
        collection: str,
        attributes: Mapping[str, Any],
    ) -> AccessDecision:
        """Decide access to one stored document.

        Args:
            claims: Decoded principal claims.
            collection: Collection the document lives in.
            attributes: The document's stored attributes.

        Returns:
            AccessDecision from the shared gate.
        """
        return self._gate.check(
            claims,
            self.descriptor_for(collection, attributes),
            adapter=EnforcementPoint.STORAGE_RULES,
        )

    async def check_and_record(
        self,
        claims: PrincipalClaims,
        collection: str,
        attributes: Mapping[str, Any],
    ) -> AccessDecision:
        """Same as check(), publishing AccessDenied on denial."""
        return await self._gate.check_and_record(
            claims,
            self.descriptor_for(collection, attributes),
            adapter=EnforcementPoint.STORAGE_RULES,
        )

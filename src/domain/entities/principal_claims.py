"""PrincipalClaims domain entity.

The authorization claims bundle attached to an authenticated session and
embedded into the signed token. Created by the claims issuer on login or
refresh, consumed read-only by every enforcement point, and superseded (never
mutated) on revocation or version bump.

Invariants:
    - effective_hierarchy == max(team_hierarchy, dashboard_hierarchy).
      It is derived on access, never stored on its own.
    - primary_organization_id ∈ accessible_organization_ids.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.domain.value_objects.role import MAX_LEVEL, MIN_LEVEL


@dataclass(frozen=True, slots=True, kw_only=True)
class PrincipalClaims:
    """Authorization claims of one principal.

    Attributes:
        subject_id: Authenticated subject identifier.
        primary_organization_id: Organization the session is scoped to.
        accessible_organization_ids: Every organization the subject may access,
            including the primary one.
        team_hierarchy: Level of the subject's TEAM role.
        dashboard_hierarchy: Level of the subject's DASHBOARD role.
        role: Subject's DASHBOARD role name (matched against allowed_roles).
        permissions: Permission strings derived from the effective hierarchy.
        claims_version: Version stamp registered with the lifecycle manager.
        issued_at: Issuance time (UTC).

    Raises:
        ValueError: If an invariant is violated at construction.

    Example:
        >>> claims = PrincipalClaims(
        ...     subject_id="user-1",
        ...     primary_organization_id="org-1",
        ...     accessible_organization_ids=frozenset({"org-1"}),
        ...     team_hierarchy=90,
        ...     dashboard_hierarchy=80,
        ...     role="MANAGER",
        ...     claims_version=1,
        ... )
        >>> claims.effective_hierarchy
        90
    """

    subject_id: str
    primary_organization_id: str
    accessible_organization_ids: frozenset[str]
    team_hierarchy: int
    dashboard_hierarchy: int
    role: str | None = None
    permissions: frozenset[str] = field(default_factory=frozenset)
    claims_version: int
    issued_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate invariants and freeze collection fields."""
        if not self.subject_id:
            raise ValueError("subject_id is required")
        if not isinstance(self.accessible_organization_ids, frozenset):
            object.__setattr__(
                self,
                "accessible_organization_ids",
                frozenset(self.accessible_organization_ids),
            )
        if not isinstance(self.permissions, frozenset):
            object.__setattr__(self, "permissions", frozenset(self.permissions))
        if self.primary_organization_id not in self.accessible_organization_ids:
            raise ValueError(
                "primary_organization_id must be one of accessible_organization_ids"
            )
        for name in ("team_hierarchy", "dashboard_hierarchy"):
            level = getattr(self, name)
            if not MIN_LEVEL <= level <= MAX_LEVEL:
                raise ValueError(
                    f"{name} must be between {MIN_LEVEL} and {MAX_LEVEL}, got {level}"
                )
        if self.claims_version < 1:
            raise ValueError(
                f"claims_version must be positive, got {self.claims_version}"
            )

    @property
    def effective_hierarchy(self) -> int:
        """Maximum hierarchy level across both taxonomies."""
        return max(self.team_hierarchy, self.dashboard_hierarchy)

    def can_access_organization(self, organization_id: str) -> bool:
        """Check organization scoping.

        Args:
            organization_id: Organization of the target resource.

        Returns:
            bool: True if the organization is in the accessible set.
        """
        return organization_id in self.accessible_organization_ids

    def has_permission(self, permission: str) -> bool:
        """Check whether a permission string was granted at issuance."""
        return permission in self.permissions

    @staticmethod
    def merge_organizations(
        primary_organization_id: str,
        secondary_organization_ids: Iterable[str],
    ) -> frozenset[str]:
        """Build the accessible organization set (primary plus secondaries).

        Empty identifiers are dropped; duplicates collapse.

        Args:
            primary_organization_id: Session's primary organization.
            secondary_organization_ids: Additionally granted organizations.

        Returns:
            frozenset[str]: Accessible organization identifiers.
        """
        return frozenset(
            org_id
            for org_id in (primary_organization_id, *secondary_organization_ids)
            if org_id
        )

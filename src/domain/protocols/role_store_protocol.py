"""Role/membership store protocol (port).

The role/membership store is the authoritative, read-only source of a
subject's roles and organization memberships. The authorization engine only
reads from it, and only during claims issuance.

Implementations:
    - InMemoryRoleStore: src/infrastructure/role_store/in_memory_role_store.py

Usage:
    membership = await role_store.get_membership("user-123")
    if membership is None:
        # Unknown subject - fail closed
"""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True, slots=True, kw_only=True)
class SubjectMembership:
    """Roles and organizations of one subject, as stored upstream.

    Attributes:
        subject_id: Subject identifier.
        organization_id: Primary organization.
        team_role: TEAM taxonomy role name (raw, may be unknown to the catalog).
        dashboard_role: DASHBOARD taxonomy role name (raw).
        secondary_organization_ids: Additional organizations granted.
    """

    subject_id: str
    organization_id: str
    team_role: str | None = None
    dashboard_role: str | None = None
    secondary_organization_ids: tuple[str, ...] = field(default_factory=tuple)

    @property
    def organization_ids(self) -> tuple[str, ...]:
        """Primary organization followed by secondaries."""
        return (self.organization_id, *self.secondary_organization_ids)


class RoleStoreProtocol(Protocol):
    """Read-only access to subject memberships."""

    async def get_membership(self, subject_id: str) -> SubjectMembership | None:
        """Get a subject's roles and organizations.

        Args:
            subject_id: Subject identifier.

        Returns:
            SubjectMembership, or None if the subject is unknown.

        Raises:
            Exception: Implementations may raise on backend failures; the
                claims issuer treats any exception as a fail-closed outage.
        """
        ...

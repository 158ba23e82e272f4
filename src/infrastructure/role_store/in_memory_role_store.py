"""In-memory role/membership store.

Implements RoleStoreProtocol over a dictionary. Used for single-process
deployments, local development and tests; the upstream membership system
writes through ``put``/``remove`` and the claims issuer only reads.

Writes do not touch issued claims. The caller that changes a membership is
responsible for marking the subject's claims stale (ForceClaimsRefresh).
"""

from collections.abc import Iterable

from src.domain.protocols.role_store_protocol import SubjectMembership


class InMemoryRoleStore:
    """Dictionary-backed RoleStoreProtocol implementation.

    Attributes:
        _memberships: Memberships keyed by subject_id.
    """

    def __init__(self, memberships: Iterable[SubjectMembership] = ()) -> None:
        self._memberships: dict[str, SubjectMembership] = {
            membership.subject_id: membership for membership in memberships
        }

    async def get_membership(self, subject_id: str) -> SubjectMembership | None:
        """Get a subject's membership, or None if unknown."""
        return self._memberships.get(subject_id)

    def put(self, membership: SubjectMembership) -> None:
        """Insert or replace a subject's membership."""
        self._memberships[membership.subject_id] = membership

    def remove(self, subject_id: str) -> None:
        """Delete a subject's membership (no-op if absent)."""
        self._memberships.pop(subject_id, None)

    def __len__(self) -> int:
        return len(self._memberships)

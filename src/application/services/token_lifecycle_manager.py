"""Token lifecycle manager - per-subject claims versioning and revocation.

Tracks one authoritative version counter per subject. Claims are valid only
while their claims_version equals the counter; any upstream change bumps the
counter, which turns every outstanding claims bundle stale.

State Machine (per issued claims):
    VALID   - claims_version == counter, subject not revoked
    STALE   - claims_version behind counter (role/org/permission change,
              superseded by a newer issuance, or never registered here)
    REVOKED - claims issued at or before the last revocation; terminal

Revocation also blocks refresh: only a re-authenticated issuance may register
a new version afterwards, and that creates a fresh VALID version without
resurrecting the revoked ones.

Concurrency:
    Updates for one subject are serialized with a per-subject asyncio.Lock,
    and registration is a compare-and-swap on the counter. A revoke that
    lands between an issuance's read and its registration moves the counter,
    so that registration fails instead of marking a revoked version valid.
    The revocation counter lets the issuer tell such a conflict apart from
    an ordinary role change. state_of() is a lock-free read.

Memory:
    One record (with its lock) per subject ever registered, marked stale or
    revoked, kept for the life of the process. Admin calls on unknown subject
    ids also create records. There is no eviction.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.principal_claims import PrincipalClaims
from src.domain.enums import ClaimsState, MembershipChange
from src.domain.errors import AuthorizationError
from src.domain.events import ClaimsMarkedStale, ClaimsRevoked
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


@dataclass
class SubjectLifecycle:
    """Mutable lifecycle record of one subject.

    Attributes:
        subject_id: Subject identifier.
        current_version: Authoritative claims version counter.
        revoked: True while refresh is blocked pending re-authentication.
        revoked_through: Highest claims version covered by a revocation.
        revoked_reason: Reason of the last revocation.
        revocations: Number of revocations so far.
        updated_at: Last change time.
        lock: Serializes writes for this subject.
    """

    subject_id: str
    current_version: int = 0
    revoked: bool = False
    revoked_through: int = 0
    revoked_reason: str | None = None
    revocations: int = 0
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False, compare=False)


class TokenLifecycleManager:
    """Per-subject claims version and revocation tracking.

    Attributes:
        _subjects: Lifecycle records keyed by subject_id.
        _event_bus: Event bus for lifecycle events.
        _logger: Structured logger.
    """

    def __init__(self, event_bus: EventBusProtocol, logger: LoggerProtocol) -> None:
        """Initialize manager.

        Args:
            event_bus: Event bus for ClaimsMarkedStale/ClaimsRevoked.
            logger: Structured logger.
        """
        self._subjects: dict[str, SubjectLifecycle] = {}
        self._event_bus = event_bus
        self._logger = logger

    # =========================================================================
    # Reads (lock-free)
    # =========================================================================

    def current_version(self, subject_id: str) -> int:
        """Get the subject's authoritative version (0 if never seen)."""
        record = self._subjects.get(subject_id)
        return 0 if record is None else record.current_version

    def is_revoked(self, subject_id: str) -> bool:
        """Check whether refresh is blocked for the subject."""
        record = self._subjects.get(subject_id)
        return record is not None and record.revoked

    def revocation_count(self, subject_id: str) -> int:
        """Get how many times the subject has been revoked (0 if never seen)."""
        record = self._subjects.get(subject_id)
        return 0 if record is None else record.revocations

    def state_of(self, claims: PrincipalClaims) -> ClaimsState:
        """Get the lifecycle state of an issued claims bundle.

        Args:
            claims: Claims to check.

        Returns:
            ClaimsState: REVOKED, VALID or STALE. Subjects this manager has
                never registered are STALE.
        """
        record = self._subjects.get(claims.subject_id)
        if record is None:
            return ClaimsState.STALE
        if record.revoked or claims.claims_version <= record.revoked_through:
            return ClaimsState.REVOKED
        if claims.claims_version == record.current_version:
            return ClaimsState.VALID
        return ClaimsState.STALE

    # =========================================================================
    # Writes (serialized per subject)
    # =========================================================================

    async def register(
        self,
        claims: PrincipalClaims,
        *,
        expected_version: int,
        reauthenticated: bool,
        revocations_seen: int | None = None,
    ) -> Result[int, AuthorizationError]:
        """Register newly issued claims as the subject's current version.

        Compare-and-swap: succeeds only if the counter still equals
        expected_version and claims carry expected_version + 1.

        Args:
            claims: Newly built claims.
            expected_version: Counter value read before building the claims.
            reauthenticated: True for login; False for refresh.
            revocations_seen: revocation_count() read when the issuance
                started. A revocation since then fails the registration even
                for a login, which must authenticate again.

        Returns:
            Success(new version), or Failure(REVOKED_TOKEN) for a refresh of
            a revoked subject or an issuance overtaken by a revocation, or
            Failure(CLAIMS_VERSION_CONFLICT) if the counter moved concurrently.
        """
        subject_id = claims.subject_id
        record = self._record(subject_id)
        async with record.lock:
            revoked_during_issuance = (
                revocations_seen is not None
                and record.revocations != revocations_seen
            )
            if revoked_during_issuance or (record.revoked and not reauthenticated):
                return Failure(
                    error=AuthorizationError(
                        code=ErrorCode.REVOKED_TOKEN,
                        message="Subject revoked; re-authentication required",
                        details={"subject_id": subject_id},
                    )
                )

            if (
                record.current_version != expected_version
                or claims.claims_version != expected_version + 1
            ):
                return Failure(
                    error=AuthorizationError(
                        code=ErrorCode.CLAIMS_VERSION_CONFLICT,
                        message="Claims version changed during issuance",
                        details={
                            "subject_id": subject_id,
                            "expected_version": str(expected_version),
                            "current_version": str(record.current_version),
                        },
                    )
                )

            record.current_version = claims.claims_version
            record.revoked = False
            record.updated_at = datetime.now(UTC)

        self._logger.debug(
            "claims_version_registered",
            subject_id=subject_id,
            claims_version=claims.claims_version,
            reauthenticated=reauthenticated,
        )
        return Success(value=claims.claims_version)

    async def mark_stale(self, subject_id: str, change: MembershipChange) -> int:
        """Mark the subject's outstanding claims stale.

        Called when roles, organization memberships or permissions change
        upstream. Does not block refresh.

        Args:
            subject_id: Subject whose data changed.
            change: What changed.

        Returns:
            int: New authoritative version.
        """
        record = self._record(subject_id)
        async with record.lock:
            record.current_version += 1
            record.updated_at = datetime.now(UTC)
            new_version = record.current_version

        self._logger.info(
            "claims_marked_stale",
            subject_id=subject_id,
            change=change.value,
            current_version=new_version,
        )
        await self._event_bus.publish(
            ClaimsMarkedStale(
                subject_id=subject_id,
                change=change.value,
                current_version=new_version,
            )
        )
        return new_version

    async def revoke(self, subject_id: str, reason: str) -> int:
        """Revoke every claims bundle issued so far and block refresh.

        Args:
            subject_id: Subject to revoke.
            reason: Audit reason.

        Returns:
            int: New authoritative version.
        """
        record = self._record(subject_id)
        async with record.lock:
            record.revoked_through = record.current_version
            record.current_version += 1
            record.revoked = True
            record.revoked_reason = reason
            record.revocations += 1
            record.updated_at = datetime.now(UTC)
            new_version = record.current_version

        self._logger.info(
            "claims_revoked",
            subject_id=subject_id,
            reason=reason,
            current_version=new_version,
        )
        await self._event_bus.publish(
            ClaimsRevoked(
                subject_id=subject_id,
                reason=reason,
                current_version=new_version,
            )
        )
        return new_version

    async def rotate_all(self, reason: str) -> int:
        """Mark every tracked subject stale (global rotation).

        Args:
            reason: Audit reason.

        Returns:
            int: Number of subjects rotated.
        """
        subject_ids = list(self._subjects)
        for subject_id in subject_ids:
            await self.mark_stale(subject_id, MembershipChange.GLOBAL_ROTATION)

        self._logger.info(
            "claims_global_rotation",
            reason=reason,
            subjects=len(subject_ids),
        )
        return len(subject_ids)

    def _record(self, subject_id: str) -> SubjectLifecycle:
        # No await between lookup and insert, so one record per subject.
        return self._subjects.setdefault(
            subject_id, SubjectLifecycle(subject_id=subject_id)
        )

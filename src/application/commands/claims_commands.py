"""Claims lifecycle commands (CQRS write operations).

Admin operations that invalidate issued claims by moving the subject's
authoritative claims version.

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass

from src.domain.enums import MembershipChange


@dataclass(frozen=True, kw_only=True)
class RevokeSubjectClaims:
    """Revoke every claims bundle of a subject and block refresh.

    The subject must re-authenticate to obtain new claims.

    Use cases:
    - Compromised session or credentials
    - Subject removed from the organization
    - Admin action (suspicious activity)

    Attributes:
        subject_id: Subject whose claims to revoke.
        triggered_by: Who triggered revocation (admin subject ID or "system").
        reason: Human-readable reason (for audit).

    Example:
        >>> command = RevokeSubjectClaims(
        ...     subject_id="user-123",
        ...     triggered_by="admin-1",
        ...     reason="credentials_compromised",
        ... )
        >>> result = await handler.handle(command)
    """

    subject_id: str
    triggered_by: str
    reason: str


@dataclass(frozen=True, kw_only=True)
class ForceClaimsRefresh:
    """Mark a subject's claims stale so the next refresh picks up changes.

    Sent after role, organization membership or permission changes.
    Refresh stays allowed; stale claims are refused for hierarchy-elevating
    access until then.

    Attributes:
        subject_id: Subject whose claims changed upstream.
        triggered_by: Who triggered the refresh (admin subject ID or "system").
        change: What changed.
    """

    subject_id: str
    triggered_by: str
    change: MembershipChange = MembershipChange.FORCED_REFRESH


@dataclass(frozen=True, kw_only=True)
class TriggerGlobalClaimsRotation:
    """Mark every tracked subject's claims stale.

    Use cases:
    - Role catalog change (levels re-tuned)
    - Signing key rotation
    - Security incident

    Attributes:
        triggered_by: Admin subject ID or "system".
        reason: Human-readable reason (for audit).
    """

    triggered_by: str
    reason: str


@dataclass(frozen=True, kw_only=True)
class ClaimsVersionResult:
    """Result of a per-subject lifecycle command.

    Attributes:
        subject_id: Affected subject.
        previous_version: Authoritative version before the command.
        new_version: Authoritative version after the command.
    """

    subject_id: str
    previous_version: int
    new_version: int


@dataclass(frozen=True, kw_only=True)
class GlobalClaimsRotationResult:
    """Result of a global claims rotation.

    Attributes:
        rotated_subjects: Number of subjects whose claims became stale.
    """

    rotated_subjects: int

"""Claims lifecycle and access domain events.

Pattern: issuance emits Succeeded/Failed; lifecycle transitions emit one
event each; denials at enforcement points emit AccessDenied.

Handlers:
- LoggingEventHandler: ALL events (INFO for lifecycle, WARNING for failures
  and denials)
"""

from dataclasses import dataclass

from src.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# Issuance
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class ClaimsIssued(DomainEvent):
    """Claims issued and registered as the subject's current version.

    Attributes:
        subject_id: Subject the claims belong to.
        organization_id: Primary organization of the claims.
        claims_version: Version now authoritative for the subject.
        effective_hierarchy: Effective hierarchy baked into the claims.
        reauthenticated: True for login, False for refresh.
    """

    subject_id: str
    organization_id: str
    claims_version: int
    effective_hierarchy: int
    reauthenticated: bool


@dataclass(frozen=True, kw_only=True)
class ClaimsIssuanceFailed(DomainEvent):
    """Claims issuance failed closed.

    Attributes:
        subject_id: Subject whose issuance failed.
        reason: Machine-readable error code.
    """

    subject_id: str
    reason: str


# ═══════════════════════════════════════════════════════════════
# Lifecycle transitions
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class ClaimsMarkedStale(DomainEvent):
    """Subject's outstanding claims became stale.

    Attributes:
        subject_id: Subject whose claims are stale.
        change: What changed upstream (role, organization, permission, ...).
        current_version: Authoritative version after the bump.
    """

    subject_id: str
    change: str
    current_version: int


@dataclass(frozen=True, kw_only=True)
class ClaimsRevoked(DomainEvent):
    """Subject revoked; re-authentication required.

    Attributes:
        subject_id: Revoked subject.
        reason: Why the subject was revoked (audit trail).
        current_version: Authoritative version after the bump.
    """

    subject_id: str
    reason: str
    current_version: int


# ═══════════════════════════════════════════════════════════════
# Enforcement
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class AccessDenied(DomainEvent):
    """An enforcement point denied access.

    Attributes:
        subject_id: Subject that was denied.
        organization_id: Organization of the target resource.
        reason: DecisionReason value.
        adapter: Enforcement point name (storage_rules, route_guard, ui_guard).
        authoritative: False for UI rendering checks.
    """

    subject_id: str
    organization_id: str
    reason: str
    adapter: str
    authoritative: bool

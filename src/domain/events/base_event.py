"""Base domain event class.

Domain events record things that happened in the authorization engine and are
named in past tense (ClaimsIssued, ClaimsRevoked, AccessDenied).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id for correlation
    - occurred_at timestamp (UTC) for ordering

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    >>> class ClaimsRevoked(DomainEvent):
    ...     subject_id: str
    ...     reason: str
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen dataclasses with kw_only=True

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: When the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

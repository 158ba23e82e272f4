"""Domain events.

Usage:
    from src.domain.events import ClaimsIssued, ClaimsRevoked
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.claims_events import (
    AccessDenied,
    ClaimsIssuanceFailed,
    ClaimsIssued,
    ClaimsMarkedStale,
    ClaimsRevoked,
)

__all__ = [
    "AccessDenied",
    "ClaimsIssuanceFailed",
    "ClaimsIssued",
    "ClaimsMarkedStale",
    "ClaimsRevoked",
    "DomainEvent",
]

"""Domain protocols (ports).

Infrastructure adapters implement these structurally (no inheritance).
"""

from src.domain.protocols.claims_token_protocol import ClaimsTokenProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.role_store_protocol import (
    RoleStoreProtocol,
    SubjectMembership,
)

__all__ = [
    "ClaimsTokenProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "RoleStoreProtocol",
    "SubjectMembership",
]

"""Logging event handler for claims lifecycle and access events.

Log Levels:
    - INFO: ClaimsIssued, ClaimsMarkedStale, ClaimsRevoked (normal operations)
    - WARNING: ClaimsIssuanceFailed, AccessDenied (needs attention)

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - subject_id: Subject the event concerns
    - event-specific fields (claims_version, reason, adapter, ...)

Usage:
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> logging_handler.register(event_bus)
"""

from src.domain.events import (
    AccessDenied,
    ClaimsIssuanceFailed,
    ClaimsIssued,
    ClaimsMarkedStale,
    ClaimsRevoked,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    def register(self, event_bus: EventBusProtocol) -> None:
        """Subscribe every handler method to its event type.

        Args:
            event_bus: Bus to subscribe to.
        """
        event_bus.subscribe(ClaimsIssued, self.handle_claims_issued)
        event_bus.subscribe(ClaimsIssuanceFailed, self.handle_claims_issuance_failed)
        event_bus.subscribe(ClaimsMarkedStale, self.handle_claims_marked_stale)
        event_bus.subscribe(ClaimsRevoked, self.handle_claims_revoked)
        event_bus.subscribe(AccessDenied, self.handle_access_denied)

    # =========================================================================
    # Issuance
    # =========================================================================

    async def handle_claims_issued(self, event: ClaimsIssued) -> None:
        """Log claims issuance (INFO level)."""
        self._logger.info(
            "claims_issued_event",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            subject_id=event.subject_id,
            organization_id=event.organization_id,
            claims_version=event.claims_version,
            effective_hierarchy=event.effective_hierarchy,
            reauthenticated=event.reauthenticated,
        )

    async def handle_claims_issuance_failed(
        self,
        event: ClaimsIssuanceFailed,
    ) -> None:
        """Log failed issuance (WARNING level).

        Args:
            event: ClaimsIssuanceFailed event with machine-readable reason.
        """
        self._logger.warning(
            "claims_issuance_failed_event",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            subject_id=event.subject_id,
            error_code=event.reason,
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def handle_claims_marked_stale(self, event: ClaimsMarkedStale) -> None:
        """Log stale transition (INFO level)."""
        self._logger.info(
            "claims_marked_stale_event",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            subject_id=event.subject_id,
            change=event.change,
            current_version=event.current_version,
        )

    async def handle_claims_revoked(self, event: ClaimsRevoked) -> None:
        """Log revocation (INFO level)."""
        self._logger.info(
            "claims_revoked_event",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            subject_id=event.subject_id,
            reason=event.reason,
            current_version=event.current_version,
        )

    # =========================================================================
    # Enforcement
    # =========================================================================

    async def handle_access_denied(self, event: AccessDenied) -> None:
        """Log an enforcement denial (WARNING level).

        Args:
            event: AccessDenied event with the precise reason. The reason is
                server-side only; clients get a uniform message.
        """
        self._logger.warning(
            "access_denied_event",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            subject_id=event.subject_id,
            organization_id=event.organization_id,
            reason=event.reason,
            adapter=event.adapter,
            authoritative=event.authoritative,
        )

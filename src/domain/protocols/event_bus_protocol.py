"""Event bus protocol (port) for domain events.

The domain defines the port; infrastructure provides the adapter
(InMemoryEventBus).

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(ClaimsRevoked, handle_claims_revoked)
    >>> await event_bus.publish(ClaimsRevoked(subject_id="u-1", ...))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async event handler: takes one event, returns None, must not raise."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. Fail-open: one handler failure must not prevent other handlers
           from executing.
        2. Async handlers.
        3. Handlers receive only events of the type they subscribed to.
        4. No ordering guarantees between handlers.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register handler for an event type.

        Args:
            event_type: Exact event class to handle.
            handler: Async handler function.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to every handler registered for its type.

        Args:
            event: Domain event instance.
        """
        ...

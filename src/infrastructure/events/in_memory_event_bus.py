"""In-memory event bus.

Claims lifecycle events are process-local, like the lifecycle manager that
emits them, so a dictionary of subscribers is all the bus needs.

Behavior:
    - Exact type dispatch (subscribing to DomainEvent does not catch all)
    - Subscribers run concurrently via asyncio.gather
    - Fail-open: a subscriber error is logged and swallowed, so a broken
      audit hook can never turn a revocation into an error

Usage:
    event_bus = InMemoryEventBus(logger=get_logger())
    event_bus.subscribe(ClaimsRevoked, log_claims_revoked)
    await event_bus.publish(ClaimsRevoked(subject_id="u-1", ...))
"""

import asyncio
from collections import defaultdict

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """Process-local EventBusProtocol implementation.

    Not thread-safe; intended for a single event loop.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._subscribers: defaultdict[type[DomainEvent], list[EventHandler]] = (
            defaultdict(list)
        )
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Add a subscriber for one concrete event class.

        Registering the same handler twice means it runs twice.
        """
        self._subscribers[event_type].append(handler)

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        """Number of subscribers for an event class."""
        return len(self._subscribers.get(event_type, ()))

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to its subscribers. Never raises."""
        event_name = type(event).__name__
        subscribers = tuple(self._subscribers.get(type(event), ()))
        if not subscribers:
            return

        subject_id = getattr(event, "subject_id", None)
        self._logger.debug(
            "event_publishing",
            event_type=event_name,
            event_id=str(event.event_id),
            subject_id=subject_id,
            handler_count=len(subscribers),
        )

        outcomes = await asyncio.gather(
            *(subscriber(event) for subscriber in subscribers),
            return_exceptions=True,
        )
        for subscriber, outcome in zip(subscribers, outcomes, strict=True):
            if not isinstance(outcome, Exception):
                continue
            self._logger.warning(
                "event_handler_failed",
                event_type=event_name,
                event_id=str(event.event_id),
                subject_id=subject_id,
                handler_name=getattr(subscriber, "__name__", repr(subscriber)),
                error_type=type(outcome).__name__,
                error_message=str(outcome),
            )

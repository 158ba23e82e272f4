"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscribes the
logging handler to every claims and access event at creation.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns:
        InMemoryEventBus with LoggingEventHandler subscribed.

    Usage:
        # Application Layer (direct use)
        event_bus = get_event_bus()
        await event_bus.publish(ClaimsRevoked(...))

        # Presentation Layer (FastAPI Depends)
        event_bus: EventBusProtocol = Depends(get_event_bus)
    """
    from src.core.container.infrastructure import get_logger
    from src.infrastructure.events import InMemoryEventBus
    from src.infrastructure.events.handlers import LoggingEventHandler

    event_bus = InMemoryEventBus(logger=get_logger())
    LoggingEventHandler(logger=get_logger()).register(event_bus)
    return event_bus

"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: Process-local event bus with fail-open behavior

Event Handlers:
    - LoggingEventHandler: Structured logging for claims and access events
"""

from src.infrastructure.events.handlers.logging_event_handler import LoggingEventHandler
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
    "LoggingEventHandler",
]

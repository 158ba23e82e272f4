"""Unit tests for event bus container registry completeness.

Every DomainEvent subclass must have at least one handler registered in the
container's event bus, so events are never emitted into the void.

Pattern:
    Uses reflection to discover all DomainEvent subclasses and verifies each
    has at least one handler registered via the container's get_event_bus().
"""

import pytest

from src.core.container.events import get_event_bus
from src.domain.events import DomainEvent


def _get_all_event_subclasses() -> set[type[DomainEvent]]:
    found: set[type[DomainEvent]] = set()
    pending = list(DomainEvent.__subclasses__())
    while pending:
        event_class = pending.pop()
        if event_class not in found:
            found.add(event_class)
            pending.extend(event_class.__subclasses__())
    return found


@pytest.mark.unit
class TestEventRegistryCompleteness:
    """Test that all domain events are registered with handlers."""

    def test_all_events_have_handlers(self) -> None:
        """Verify every DomainEvent subclass has at least one handler."""
        event_bus = get_event_bus()
        all_event_classes = _get_all_event_subclasses()

        assert len(all_event_classes) > 0, "No domain events found - reflection failed"

        missing = sorted(
            event_class.__name__
            for event_class in all_event_classes
            if event_bus.handler_count(event_class) == 0
        )
        assert missing == [], f"Events without handlers: {missing}"

    def test_event_bus_is_singleton(self) -> None:
        """Verify the container returns one bus per application."""
        assert get_event_bus() is get_event_bus()

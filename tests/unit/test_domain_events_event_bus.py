"""Unit tests for InMemoryEventBus.

Tests cover:
- Subscribe/publish basic flow
- Multiple handlers for same event
- Handler failure doesn't break others (fail-open)
- No handlers registered (no-op)
- Exact type matching
- Error logging for handler failures

Architecture:
- Unit tests with mocked logger
- Tests fail-open behavior (critical requirement)
"""

from unittest.mock import MagicMock

import pytest

from src.domain.events import AccessDenied, ClaimsRevoked
from src.domain.events.base_event import DomainEvent
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus


def _revoked() -> ClaimsRevoked:
    return ClaimsRevoked(subject_id="user-1", reason="compromised", current_version=2)


@pytest.mark.unit
class TestInMemoryEventBusBasicFlow:
    """Test basic subscribe/publish flow."""

    @pytest.mark.asyncio
    async def test_subscribe_and_publish_single_handler(self):
        """Test subscribing single handler and publishing event."""
        # Arrange
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def test_handler(event: DomainEvent) -> None:
            received.append(event)

        event = _revoked()

        # Act
        event_bus.subscribe(ClaimsRevoked, test_handler)
        await event_bus.publish(event)

        # Assert
        assert received == [event]
        assert received[0].reason == "compromised"

    @pytest.mark.asyncio
    async def test_multiple_handlers_all_execute(self):
        """Test multiple handlers for same event type all execute."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        calls = []

        async def handler_1(event: DomainEvent) -> None:
            calls.append("handler_1")

        async def handler_2(event: DomainEvent) -> None:
            calls.append("handler_2")

        event_bus.subscribe(ClaimsRevoked, handler_1)
        event_bus.subscribe(ClaimsRevoked, handler_2)
        await event_bus.publish(_revoked())

        assert sorted(calls) == ["handler_1", "handler_2"]
        assert event_bus.handler_count(ClaimsRevoked) == 2

    @pytest.mark.asyncio
    async def test_publish_without_handlers_is_noop(self):
        """Test publishing with no subscribers does nothing."""
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        await event_bus.publish(_revoked())

        mock_logger.debug.assert_not_called()
        assert event_bus.handler_count(ClaimsRevoked) == 0

    @pytest.mark.asyncio
    async def test_exact_type_match_only(self):
        """Test handlers only receive their own event type."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        received = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event_bus.subscribe(AccessDenied, handler)
        await event_bus.publish(_revoked())

        assert received == []


@pytest.mark.unit
class TestInMemoryEventBusFailOpen:
    """Test fail-open behavior."""

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_break_others(self):
        """Test one failing handler doesn't stop the rest or raise."""
        # Arrange
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        calls = []

        async def failing_handler(event: DomainEvent) -> None:
            raise RuntimeError("handler exploded")

        async def working_handler(event: DomainEvent) -> None:
            calls.append("working")

        event_bus.subscribe(ClaimsRevoked, failing_handler)
        event_bus.subscribe(ClaimsRevoked, working_handler)

        # Act
        await event_bus.publish(_revoked())

        # Assert
        assert calls == ["working"]
        mock_logger.warning.assert_called_once()
        call_args = mock_logger.warning.call_args
        assert call_args[0][0] == "event_handler_failed"
        assert call_args[1]["handler_name"] == "failing_handler"
        assert call_args[1]["error_type"] == "RuntimeError"
        assert call_args[1]["error_message"] == "handler exploded"

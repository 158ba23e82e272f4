"""Unit tests for infrastructure event handlers.

Tests cover:
- LoggingEventHandler: Logs events with correct severity and fields
- register(): Subscribes every handler to its event type
- End-to-end through InMemoryEventBus

Test Strategy:
- Mock LoggerProtocol to isolate the handler
- Verify event names and structured fields
"""

from unittest.mock import MagicMock

import pytest

from src.domain.events import (
    AccessDenied,
    ClaimsIssuanceFailed,
    ClaimsIssued,
    ClaimsMarkedStale,
    ClaimsRevoked,
)
from src.infrastructure.events import InMemoryEventBus, LoggingEventHandler


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test LoggingEventHandler severities and fields."""

    @pytest.mark.asyncio
    async def test_claims_issued_logged_info(self):
        """Test issuance is logged at INFO."""
        mock_logger = MagicMock()
        handler = LoggingEventHandler(logger=mock_logger)
        event = ClaimsIssued(
            subject_id="user-1",
            organization_id="org-1",
            claims_version=3,
            effective_hierarchy=90,
            reauthenticated=True,
        )

        await handler.handle_claims_issued(event)

        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args
        assert call_args[0][0] == "claims_issued_event"
        assert call_args[1]["event_id"] == str(event.event_id)
        assert call_args[1]["claims_version"] == 3
        assert call_args[1]["effective_hierarchy"] == 90

    @pytest.mark.asyncio
    async def test_issuance_failure_logged_warning(self):
        """Test failed issuance is logged at WARNING with the error code."""
        mock_logger = MagicMock()
        handler = LoggingEventHandler(logger=mock_logger)

        await handler.handle_claims_issuance_failed(
            ClaimsIssuanceFailed(subject_id="user-1", reason="role_store_unavailable")
        )

        call_args = mock_logger.warning.call_args
        assert call_args[0][0] == "claims_issuance_failed_event"
        assert call_args[1]["error_code"] == "role_store_unavailable"

    @pytest.mark.asyncio
    async def test_lifecycle_transitions_logged_info(self):
        """Test stale and revoked transitions are logged at INFO."""
        mock_logger = MagicMock()
        handler = LoggingEventHandler(logger=mock_logger)

        await handler.handle_claims_marked_stale(
            ClaimsMarkedStale(subject_id="user-1", change="role", current_version=2)
        )
        await handler.handle_claims_revoked(
            ClaimsRevoked(subject_id="user-1", reason="compromised", current_version=3)
        )

        events = [call[0][0] for call in mock_logger.info.call_args_list]
        assert events == ["claims_marked_stale_event", "claims_revoked_event"]

    @pytest.mark.asyncio
    async def test_access_denied_logged_warning(self):
        """Test denial is logged with precise reason and adapter."""
        mock_logger = MagicMock()
        handler = LoggingEventHandler(logger=mock_logger)

        await handler.handle_access_denied(
            AccessDenied(
                subject_id="user-1",
                organization_id="org-1",
                reason="stale_claims",
                adapter="route_guard",
                authoritative=True,
            )
        )

        call_args = mock_logger.warning.call_args
        assert call_args[0][0] == "access_denied_event"
        assert call_args[1]["reason"] == "stale_claims"
        assert call_args[1]["adapter"] == "route_guard"
        assert call_args[1]["authoritative"] is True


@pytest.mark.unit
class TestLoggingEventHandlerRegistration:
    """Test wiring to the event bus."""

    def test_register_subscribes_all_events(self):
        """Test every event type gets one handler."""
        event_bus = InMemoryEventBus(logger=MagicMock())

        LoggingEventHandler(logger=MagicMock()).register(event_bus)

        for event_type in (
            ClaimsIssued,
            ClaimsIssuanceFailed,
            ClaimsMarkedStale,
            ClaimsRevoked,
            AccessDenied,
        ):
            assert event_bus.handler_count(event_type) == 1

    @pytest.mark.asyncio
    async def test_publish_reaches_handler(self):
        """Test events published on the bus are logged."""
        handler_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=MagicMock())
        LoggingEventHandler(logger=handler_logger).register(event_bus)

        await event_bus.publish(
            ClaimsRevoked(subject_id="user-1", reason="offboarded", current_version=1)
        )

        assert handler_logger.info.call_args[0][0] == "claims_revoked_event"

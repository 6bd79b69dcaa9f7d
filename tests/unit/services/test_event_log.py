"""
Unit tests for EventLog
"""

import pytest
from unittest.mock import AsyncMock
from uuid import uuid4

from sqlalchemy.exc import OperationalError

from session_risk.app.services.event_log import EventLog
from session_risk.domain.entities import RiskEvent


@pytest.mark.asyncio
async def test_record_persists_event(mock_uow):
    user_id = uuid4()

    event_log = EventLog(mock_uow)
    await event_log.record(
        user_id, "alice", 3, 2, 150.0, "OTHER_SESSIONS_INVALIDATED", "description"
    )

    mock_uow.risk_events.create.assert_called_once()
    event = mock_uow.risk_events.create.call_args.args[0]
    assert isinstance(event, RiskEvent)
    assert event.user_id == user_id
    assert event.username == "alice"
    assert event.active_sessions == 3
    assert event.allowed_sessions == 2
    assert event.risk_score == 150.0
    assert event.action_taken == "OTHER_SESSIONS_INVALIDATED"
    assert event.event_time is not None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_record_swallows_audit_write_failure(mock_uow):
    mock_uow.risk_events.create = AsyncMock(
        side_effect=OperationalError("INSERT", {}, Exception("disk I/O error"))
    )

    event_log = EventLog(mock_uow)
    # Must not raise
    await event_log.record(uuid4(), "alice", 3, 2, 150.0, "OTHER_SESSIONS_INVALIDATED", "d")

    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_recent_delegates_with_limit(mock_uow):
    user_id = uuid4()
    events = [RiskEvent(id=2, user_id=user_id, username="alice", active_sessions=3,
                        allowed_sessions=2, risk_score=150.0, action_taken="OTHER_SESSIONS_INVALIDATED")]
    mock_uow.risk_events.get_recent_by_user_id = AsyncMock(return_value=events)

    event_log = EventLog(mock_uow)
    assert await event_log.recent(user_id, 5) == events
    mock_uow.risk_events.get_recent_by_user_id.assert_called_once_with(user_id, 5)


@pytest.mark.asyncio
async def test_recent_with_non_positive_limit(mock_uow):
    event_log = EventLog(mock_uow)
    assert await event_log.recent(uuid4(), 0) == []
    mock_uow.risk_events.get_recent_by_user_id.assert_not_called()

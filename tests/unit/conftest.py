import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.get_by_username = AsyncMock()
    uow.users.create = AsyncMock(side_effect=lambda user: user)

    uow.sessions = MagicMock()
    uow.sessions.get_by_token = AsyncMock()
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.get_active_by_user_id = AsyncMock(return_value=[])
    uow.sessions.count_active_by_user_id = AsyncMock(return_value=0)
    uow.sessions.deactivate_by_token = AsyncMock(return_value=True)
    uow.sessions.deactivate_for_user = AsyncMock(return_value=True)
    uow.sessions.touch = AsyncMock()

    uow.risk_events = MagicMock()
    uow.risk_events.create = AsyncMock(side_effect=lambda event: event)
    uow.risk_events.get_recent_by_user_id = AsyncMock(return_value=[])
    return uow


@pytest.fixture
def mock_terminator():
    terminator = MagicMock()
    terminator.terminate = AsyncMock()
    return terminator

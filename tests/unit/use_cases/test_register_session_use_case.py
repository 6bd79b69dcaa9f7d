"""
Unit tests for Register Session Use Case
"""

import asyncio
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from session_risk.app.services.principal_locks import PrincipalLocks
from session_risk.app.services.risk_policy import RiskPolicy
from session_risk.app.use_cases.sessions import RegisterSessionUseCase
from session_risk.domain.entities import RiskAction, User, UserSession


class CountingStore:
    """Tiny stand-in for the session rows behind the mocked repositories"""

    def __init__(self):
        self.active = []

    async def create(self, session):
        # Yield so concurrent registrations would interleave without the lock
        await asyncio.sleep(0)
        self.active.append(session.token)
        return session

    async def count(self, user_id):
        await asyncio.sleep(0)
        return len(self.active)

    async def get_active(self, user_id):
        return [UserSession(token=t, user_id=user_id) for t in self.active]

    async def deactivate_for_user(self, user_id, token):
        if token in self.active:
            self.active.remove(token)
            return True
        return False


def wire_store(mock_uow, store):
    mock_uow.sessions.create = AsyncMock(side_effect=store.create)
    mock_uow.sessions.count_active_by_user_id = AsyncMock(side_effect=store.count)
    mock_uow.sessions.get_active_by_user_id = AsyncMock(side_effect=store.get_active)
    mock_uow.sessions.deactivate_for_user = AsyncMock(side_effect=store.deactivate_for_user)


@pytest.mark.asyncio
async def test_register_then_evaluate_within_limit(mock_uow, mock_terminator):
    user = User(id=uuid4(), username="alice", password_hash="hash")
    mock_uow.users.get_by_id = AsyncMock(return_value=user)
    store = CountingStore()
    wire_store(mock_uow, store)

    use_case = RegisterSessionUseCase(mock_uow, mock_terminator, RiskPolicy(), PrincipalLocks())
    result = await use_case.execute(user.id, "tok-a", "dev", "10.0.0.1")

    assert result.is_ok()
    assert result.value.session.session_token == "tok-a"
    # The freshly inserted row is counted
    assert result.value.evaluation.active_sessions == 1
    assert result.value.evaluation.action == RiskAction.NONE


@pytest.mark.asyncio
async def test_third_registration_keeps_only_new_session(mock_uow, mock_terminator):
    user = User(id=uuid4(), username="alice", password_hash="hash")
    mock_uow.users.get_by_id = AsyncMock(return_value=user)
    store = CountingStore()
    wire_store(mock_uow, store)

    use_case = RegisterSessionUseCase(mock_uow, mock_terminator, RiskPolicy(), PrincipalLocks())
    await use_case.execute(user.id, "tok-a", None, None)
    await use_case.execute(user.id, "tok-b", None, None)
    result = await use_case.execute(user.id, "tok-c", None, None)

    assert result.value.evaluation.action == RiskAction.OTHER_SESSIONS_INVALIDATED
    assert result.value.evaluation.active_sessions == 3
    assert store.active == ["tok-c"]
    mock_uow.risk_events.create.assert_called_once()


@pytest.mark.asyncio
async def test_concurrent_logins_for_same_user_are_serialized(mock_uow, mock_terminator):
    user = User(id=uuid4(), username="alice", password_hash="hash")
    mock_uow.users.get_by_id = AsyncMock(return_value=user)
    store = CountingStore()
    wire_store(mock_uow, store)
    locks = PrincipalLocks()

    use_case = RegisterSessionUseCase(mock_uow, mock_terminator, RiskPolicy(), locks)
    results = await asyncio.gather(
        *[use_case.execute(user.id, f"tok-{i}", None, None) for i in range(3)]
    )

    counts = [r.value.evaluation.active_sessions for r in results]
    # Each login observed every registration committed before it
    assert counts == [1, 2, 3]
    assert store.active == ["tok-2"]


@pytest.mark.asyncio
async def test_register_unknown_principal(mock_uow, mock_terminator):
    mock_uow.users.get_by_id = AsyncMock(return_value=None)

    use_case = RegisterSessionUseCase(mock_uow, mock_terminator, RiskPolicy(), PrincipalLocks())
    result = await use_case.execute(uuid4(), "tok-a", None, None)

    assert result.is_err()
    assert result.error.code == "PRINCIPAL_NOT_FOUND"

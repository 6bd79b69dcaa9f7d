"""
Unit tests for Signup and Seed Admin Use Cases
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import bcrypt
import pytest
from sqlalchemy.exc import IntegrityError

from session_risk.app.use_cases.auth import (
    GetCurrentUserUseCase,
    SeedAdminUseCase,
    SignupCommand,
    SignupUseCase,
)
from session_risk.domain.entities import User, UserRole


@pytest.mark.asyncio
async def test_signup_creates_regular_user(mock_uow):
    mock_uow.users.get_by_username = AsyncMock(return_value=None)

    result = await SignupUseCase(mock_uow).execute(
        SignupCommand(username="carol", password="CarolPass123!")
    )

    assert result.is_ok()
    assert result.value.username == "carol"
    assert result.value.role == "user"

    created = mock_uow.users.create.call_args.args[0]
    assert created.role == UserRole.user
    assert bcrypt.checkpw(b"CarolPass123!", created.password_hash.encode())
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_signup_rejects_taken_username(mock_uow):
    mock_uow.users.get_by_username = AsyncMock(
        return_value=User(id=uuid4(), username="carol", password_hash="hash")
    )

    result = await SignupUseCase(mock_uow).execute(
        SignupCommand(username="carol", password="CarolPass123!")
    )

    assert result.is_err()
    assert result.error.code == "USERNAME_TAKEN"
    mock_uow.users.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_signup_concurrent_duplicate_is_reported_as_taken(mock_uow):
    mock_uow.users.get_by_username = AsyncMock(return_value=None)
    mock_uow.users.create = AsyncMock(side_effect=IntegrityError("insert", {}, Exception()))

    result = await SignupUseCase(mock_uow).execute(
        SignupCommand(username="carol", password="CarolPass123!")
    )

    assert result.is_err()
    assert result.error.code == "USERNAME_TAKEN"
    mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
async def test_seed_admin_creates_admin_once(mock_uow):
    mock_uow.users.get_by_username = AsyncMock(return_value=None)

    result = await SeedAdminUseCase(mock_uow).execute("root", "RootPass123!")

    assert result.value is True
    created = mock_uow.users.create.call_args.args[0]
    assert created.username == "root"
    assert created.role == UserRole.admin
    assert bcrypt.checkpw(b"RootPass123!", created.password_hash.encode())
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_seed_admin_leaves_existing_account_alone(mock_uow):
    mock_uow.users.get_by_username = AsyncMock(
        return_value=User(id=uuid4(), username="root", password_hash="hash")
    )

    result = await SeedAdminUseCase(mock_uow).execute("root", "RootPass123!")

    assert result.value is False
    mock_uow.users.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("password", [None, ""])
async def test_seed_admin_skipped_without_password(mock_uow, password):
    result = await SeedAdminUseCase(mock_uow).execute("root", password)

    assert result.value is False
    mock_uow.users.get_by_username.assert_not_called()
    mock_uow.users.create.assert_not_called()


@pytest.mark.asyncio
async def test_get_current_user(mock_uow):
    user = User(id=uuid4(), username="alice", password_hash="hash", role=UserRole.admin)
    mock_uow.users.get_by_id = AsyncMock(return_value=user)

    result = await GetCurrentUserUseCase(mock_uow).execute(user.id)

    assert result.value.id == str(user.id)
    assert result.value.role == "admin"


@pytest.mark.asyncio
async def test_get_current_user_unknown(mock_uow):
    mock_uow.users.get_by_id = AsyncMock(return_value=None)
    user_id = uuid4()

    result = await GetCurrentUserUseCase(mock_uow).execute(user_id)

    assert result.error.code == "PRINCIPAL_NOT_FOUND"
    assert result.error.message == f"User not found with ID: {user_id}"

"""
Signup Use Case

Self-service registration of regular users.
"""

import logging

import bcrypt
from sqlalchemy.exc import IntegrityError

from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.domain.entities import User, UserRole
from session_risk.libs.result import Error, Result, Return
from .dtos import SignupCommand, UserInfo

logger = logging.getLogger(__name__)


def user_info(user: User) -> UserInfo:
    return UserInfo(
        id=str(user.id),
        username=user.username,
        role=user.role.value,
        created_at=user.created_at,
    )


class SignupUseCase:
    """
    Use case for user registration.

    Business Rules:
    - Username must not be taken
    - Password hashed with bcrypt cost factor 12
    - Registered accounts always get the user role, admins are bootstrapped
    - No session is opened, the caller logs in afterwards
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[UserInfo]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with validated username and password

        Returns:
            Result with the created account, or Error(USERNAME_TAKEN)
        """
        async with self.uow:
            existing_user = await self.uow.users.get_by_username(command.username)
            if existing_user:
                return Return.err(_username_taken(command.username))

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(12)
            )
            user = User(
                username=command.username,
                password_hash=password_hash.decode("utf-8"),
                role=UserRole.user,
            )
            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                # Lost a race against a concurrent registration
                await self.uow.rollback()
                return Return.err(_username_taken(command.username))

            logger.info(f"User registered: {user.username}")
            return Return.ok(user_info(user))


def _username_taken(username: str) -> Error:
    return Error("USERNAME_TAKEN", f"Username is already taken: {username}")

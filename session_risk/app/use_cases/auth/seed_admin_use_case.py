"""
Seed Admin Use Case

Creates the bootstrap administrator on startup.
"""

import logging
from typing import Optional

import bcrypt

from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.domain.entities import User, UserRole
from session_risk.libs.result import Result, Return

logger = logging.getLogger(__name__)


class SeedAdminUseCase:
    """
    Idempotent creation of the configured admin account.

    An existing account with the same username is left untouched, including
    its password and role. Nothing is created without a password.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str, password: Optional[str]) -> Result[bool]:
        if not password:
            logger.warning("ADMIN_PASSWORD is not configured, skipping admin bootstrap")
            return Return.ok(False)

        async with self.uow:
            if await self.uow.users.get_by_username(username):
                logger.info(f"Admin user {username} already exists")
                return Return.ok(False)

            password_hash = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(12))
            await self.uow.users.create(
                User(
                    username=username,
                    password_hash=password_hash.decode("utf-8"),
                    role=UserRole.admin,
                )
            )
            await self.uow.commit()

        logger.info(f"Created admin user {username}")
        return Return.ok(True)

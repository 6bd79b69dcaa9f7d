"""
Get Current User Use Case

Loads the account behind an authenticated request.
"""

from uuid import UUID

from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.libs.result import Error, Result, Return
from .dtos import UserInfo
from .signup_use_case import user_info


class GetCurrentUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(
                    Error("PRINCIPAL_NOT_FOUND", f"User not found with ID: {user_id}")
                )
            return Return.ok(user_info(user))

"""
Logout Use Case

Ends the caller's current session.
"""

import logging

from session_risk.app.services.live_session_terminator import ILiveSessionTerminator
from session_risk.app.services.session_registry import SessionRegistry
from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.libs.result import Result, Return
from .dtos import LogoutResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for logout.

    Business Rules:
    - Idempotent, an already-ended session logs out successfully
    """

    def __init__(self, uow: UnitOfWork, terminator: ILiveSessionTerminator):
        self.uow = uow
        self.registry = SessionRegistry(uow, terminator)

    async def execute(self, session_token: str) -> Result[LogoutResponse]:
        async with self.uow:
            await self.registry.deactivate(session_token)

        logger.info("Session invalidated and user logged out")
        return Return.ok(
            LogoutResponse(status="success", message="Logged out successfully")
        )

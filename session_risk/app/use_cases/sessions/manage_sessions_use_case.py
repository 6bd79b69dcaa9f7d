"""
Manage Sessions Use Case

Listing, single deactivation and bulk invalidation of user sessions.
"""

from typing import List
from uuid import UUID

from session_risk.app.services.event_log import EventLog
from session_risk.app.services.live_session_terminator import ILiveSessionTerminator
from session_risk.app.services.principal_locks import PrincipalLocks
from session_risk.app.services.risk_evaluator import RiskEvaluator
from session_risk.app.services.risk_policy import RiskPolicy
from session_risk.app.services.session_registry import SessionRegistry
from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.domain.entities import RiskEvaluation
from session_risk.libs.result import Error, Result, Return
from .dtos import DeactivateSessionResponse, SessionInfo


class ManageSessionsUseCase:
    """
    Use case for inspecting and ending sessions.

    Business Rules:
    - Users may end their own sessions only
    - Ending an already-ended session succeeds with deactivated=False
    - Invalidate-all takes the user's lock like a login does
    """

    def __init__(
        self,
        uow: UnitOfWork,
        terminator: ILiveSessionTerminator,
        policy: RiskPolicy,
        locks: PrincipalLocks,
    ):
        self.uow = uow
        self.locks = locks
        self.registry = SessionRegistry(uow, terminator)
        self.evaluator = RiskEvaluator(uow, self.registry, EventLog(uow), policy)

    async def list_active(self, user_id: UUID) -> Result[List[SessionInfo]]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("PRINCIPAL_NOT_FOUND", f"User not found with ID: {user_id}"))

            sessions = await self.registry.list_active(user_id)
            return Return.ok([SessionInfo.from_entity(s) for s in sessions])

    async def deactivate_own(
        self, token: str, requesting_user_id: UUID
    ) -> Result[DeactivateSessionResponse]:
        """
        End one of the requesting user's sessions.

        Tokens of other users are reported as SESSION_NOT_FOUND.
        """
        async with self.uow:
            session = await self.uow.sessions.get_by_token(token)
            if session is None or session.user_id != requesting_user_id:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            changed = await self.registry.deactivate(token)

            return Return.ok(
                DeactivateSessionResponse(session_token=token, deactivated=changed)
            )

    async def invalidate_all(self, user_id: UUID) -> Result[RiskEvaluation]:
        async with self.locks.hold(user_id):
            async with self.uow:
                return await self.evaluator.invalidate_all(user_id)

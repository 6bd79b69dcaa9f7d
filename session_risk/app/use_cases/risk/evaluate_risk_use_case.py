"""
Evaluate Risk Use Case

Manual (admin) evaluation with enforcement, and read-only status for dashboards.
"""

import logging
from typing import Optional
from uuid import UUID

from session_risk.app.services.event_log import EventLog
from session_risk.app.services.live_session_terminator import ILiveSessionTerminator
from session_risk.app.services.principal_locks import PrincipalLocks
from session_risk.app.services.risk_evaluator import RiskEvaluator
from session_risk.app.services.risk_policy import RiskPolicy
from session_risk.app.services.session_registry import SessionRegistry
from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.domain.entities import RiskEvaluation
from session_risk.libs.result import Result

logger = logging.getLogger(__name__)


class EvaluateRiskUseCase:
    """
    Use case for evaluating a user's session risk.

    Business Rules:
    - execute() may deactivate sessions and log an event
    - Without a surviving token every session is deactivated on enforcement
    - peek() never mutates anything
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
        registry = SessionRegistry(uow, terminator)
        self.evaluator = RiskEvaluator(uow, registry, EventLog(uow), policy)

    async def execute(
        self, user_id: UUID, surviving_token: Optional[str] = None
    ) -> Result[RiskEvaluation]:
        logger.info(f"Manual risk evaluation requested for user ID: {user_id}")
        async with self.locks.hold(user_id):
            async with self.uow:
                return await self.evaluator.evaluate(user_id, surviving_token)

    async def peek(self, user_id: UUID) -> Result[RiskEvaluation]:
        async with self.uow:
            return await self.evaluator.peek(user_id)

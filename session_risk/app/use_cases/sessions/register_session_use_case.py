"""
Register Session Use Case

Records a fresh login and immediately evaluates the user's session risk.
"""

from typing import Optional
from uuid import UUID

from session_risk.app.services.event_log import EventLog
from session_risk.app.services.live_session_terminator import ILiveSessionTerminator
from session_risk.app.services.principal_locks import PrincipalLocks
from session_risk.app.services.risk_evaluator import RiskEvaluator
from session_risk.app.services.risk_policy import RiskPolicy
from session_risk.app.services.session_registry import SessionRegistry
from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.libs.result import Result, Return
from .dtos import RegisterSessionResponse, SessionInfo


class RegisterSessionUseCase:
    """
    Use case for registering a session after successful authentication.

    Business Rules:
    - register, count and enforcement run under the user's lock
    - The new session is the surviving token of the evaluation
    - The new row is committed before it is counted
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

    async def execute(
        self,
        user_id: UUID,
        token: str,
        device_id: Optional[str],
        ip_address: Optional[str],
    ) -> Result[RegisterSessionResponse]:
        """
        Execute register session use case.

        Args:
            user_id: Authenticated user
            token: Externally generated session token
            device_id: Device fingerprint
            ip_address: Source network address

        Returns:
            Result with the registered session and its risk evaluation, or Error
        """
        async with self.locks.hold(user_id):
            async with self.uow:
                registered = await self.registry.register(
                    user_id, token, device_id, ip_address
                )
                if registered.is_err():
                    return registered

                session_info = SessionInfo.from_entity(registered.value)

                evaluation = await self.evaluator.evaluate(user_id, token)
                if evaluation.is_err():
                    return evaluation

                return Return.ok(
                    RegisterSessionResponse(
                        session=session_info, evaluation=evaluation.value
                    )
                )

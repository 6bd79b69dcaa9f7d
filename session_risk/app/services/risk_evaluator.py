"""
Risk Evaluator

Turns an active-session count into a decision and executes enforcement.

Risk Score = (Active Sessions / Allowed Sessions) x 100, display only.
Enforcement fires when Active Sessions > Allowed Sessions, nothing else.
"""

import logging
from typing import Optional
from uuid import UUID

from session_risk.app.services.event_log import EventLog
from session_risk.app.services.risk_policy import (
    RiskPolicy,
    calculate_risk_score,
    determine_risk_level,
    limit_exceeded,
)
from session_risk.app.services.session_registry import SessionRegistry
from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.domain.entities import RiskAction, RiskEvaluation
from session_risk.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

MESSAGE_LIMIT_EXCEEDED = "Session limit exceeded. Other sessions have been invalidated for security."
MESSAGE_WITHIN_LIMIT = "Sessions are within acceptable limits."
MESSAGE_READ_ONLY = "Current risk evaluation (read-only)"
MESSAGE_ALL_INVALIDATED = "All sessions have been invalidated by an administrator."


def _principal_not_found(user_id: UUID) -> Error:
    return Error("PRINCIPAL_NOT_FOUND", f"User not found with ID: {user_id}")


def describe_event(
    active_sessions: int, allowed_sessions: int, risk_score: float, action: RiskAction
) -> str:
    return (
        f"Risk threshold reached. User had {active_sessions} active sessions "
        f"(allowed: {allowed_sessions}). Risk score: {risk_score:.2f}%. "
        f"Action: {action.value}."
    )


class RiskEvaluator:
    """
    Session risk evaluation and enforcement.

    Business Rules:
    - Unknown users are reported, never defaulted
    - Only SessionRegistry mutates sessions
    - An event is logged only when sessions were targeted for invalidation
    - peek() never has side effects, whatever the count
    """

    def __init__(
        self,
        uow: UnitOfWork,
        registry: SessionRegistry,
        event_log: EventLog,
        policy: RiskPolicy,
    ):
        self.uow = uow
        self.registry = registry
        self.event_log = event_log
        self.policy = policy

    async def evaluate(
        self, user_id: UUID, surviving_token: Optional[str] = None
    ) -> Result[RiskEvaluation]:
        """
        Evaluate a user and enforce the session cap.

        Args:
            user_id: User to evaluate
            surviving_token: Session kept alive when enforcing, None to keep none

        Returns:
            Result with the RiskEvaluation snapshot, or Error
        """
        user = await self.uow.users.get_by_id(user_id)
        if user is None:
            return Return.err(_principal_not_found(user_id))
        username = user.username

        cap = self.policy.max_allowed_sessions
        active_sessions = await self.registry.count_active(user_id)
        risk_score = calculate_risk_score(active_sessions, cap)

        logger.info(
            f"Risk evaluation for {username}: {active_sessions}/{cap} sessions, "
            f"score {risk_score:.2f}%"
        )

        if not limit_exceeded(active_sessions, cap):
            logger.info(f"Sessions for {username} are within limit ({active_sessions}/{cap})")
            return Return.ok(
                self._snapshot(
                    user_id, username, active_sessions, risk_score,
                    RiskAction.NONE, MESSAGE_WITHIN_LIMIT,
                )
            )

        logger.warning(
            f"SESSION LIMIT EXCEEDED for {username}: {active_sessions} > {cap}, "
            f"keeping session {surviving_token[:8] + '...' if surviving_token else 'none'}"
        )
        return Return.ok(
            await self._enforce(
                user_id, username, active_sessions, risk_score,
                surviving_token, MESSAGE_LIMIT_EXCEEDED,
            )
        )

    async def peek(self, user_id: UUID) -> Result[RiskEvaluation]:
        """Read-only evaluation for dashboards"""
        user = await self.uow.users.get_by_id(user_id)
        if user is None:
            return Return.err(_principal_not_found(user_id))

        active_sessions = await self.registry.count_active(user_id)
        risk_score = calculate_risk_score(active_sessions, self.policy.max_allowed_sessions)

        logger.debug(
            f"Dashboard refresh - {user.username}: "
            f"{active_sessions}/{self.policy.max_allowed_sessions}, {risk_score:.1f}%"
        )
        return Return.ok(
            self._snapshot(
                user_id, user.username, active_sessions, risk_score,
                RiskAction.NONE, MESSAGE_READ_ONLY,
            )
        )

    async def invalidate_all(self, user_id: UUID) -> Result[RiskEvaluation]:
        """
        Deactivate every session of a user (admin kill switch).

        Same enforcement as evaluate() with no surviving token, whatever the count.
        """
        user = await self.uow.users.get_by_id(user_id)
        if user is None:
            return Return.err(_principal_not_found(user_id))
        username = user.username

        active_sessions = await self.registry.count_active(user_id)
        risk_score = calculate_risk_score(active_sessions, self.policy.max_allowed_sessions)

        logger.warning(f"Manual invalidation of all {active_sessions} sessions for {username}")
        return Return.ok(
            await self._enforce(
                user_id, username, active_sessions, risk_score,
                None, MESSAGE_ALL_INVALIDATED,
            )
        )

    async def _enforce(
        self,
        user_id: UUID,
        username: str,
        active_sessions: int,
        risk_score: float,
        surviving_token: Optional[str],
        message: str,
    ) -> RiskEvaluation:
        cap = self.policy.max_allowed_sessions
        action = RiskAction.OTHER_SESSIONS_INVALIDATED
        deactivated = await self.registry.deactivate_all_except(user_id, surviving_token)

        # Nothing was targeted, nothing to audit
        if active_sessions > 0:
            await self.event_log.record(
                user_id,
                username,
                active_sessions,
                cap,
                risk_score,
                action.value,
                describe_event(active_sessions, cap, risk_score, action),
            )

        return self._snapshot(
            user_id, username, active_sessions, risk_score,
            action, message, len(deactivated),
        )

    def _snapshot(
        self,
        user_id: UUID,
        username: str,
        active_sessions: int,
        risk_score: float,
        action: RiskAction,
        message: str,
        deactivated_sessions: int = 0,
    ) -> RiskEvaluation:
        cap = self.policy.max_allowed_sessions
        return RiskEvaluation(
            user_id=user_id,
            username=username,
            active_sessions=active_sessions,
            allowed_sessions=cap,
            risk_score=risk_score,
            risk_level=determine_risk_level(active_sessions, cap),
            threshold_exceeded=limit_exceeded(active_sessions, cap),
            display_threshold=self.policy.display_threshold_percent,
            above_display_threshold=risk_score >= self.policy.display_threshold_percent,
            action=action,
            message=message,
            deactivated_sessions=deactivated_sessions,
        )

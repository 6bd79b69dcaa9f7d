import logging
from typing import List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from session_risk.app.services.unit_of_work import UnitOfWork
from session_risk.domain.entities import RiskEvent

logger = logging.getLogger(__name__)


class EventLog:
    """Append-only audit trail of enforcement actions"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def record(
        self,
        user_id: UUID,
        username: str,
        active_sessions: int,
        allowed_sessions: int,
        risk_score: float,
        action: str,
        description: str,
    ) -> None:
        """
        Persist a risk event.

        Never raises for persistence failures: sessions were already
        deactivated and committed, losing the audit row is tolerated.
        """
        event = RiskEvent(
            user_id=user_id,
            username=username,
            active_sessions=active_sessions,
            allowed_sessions=allowed_sessions,
            risk_score=risk_score,
            action_taken=action,
            description=description,
        )
        try:
            await self.uow.risk_events.create(event)
            await self.uow.commit()
        except SQLAlchemyError as exc:
            await self.uow.rollback()
            logger.error(f"AUDIT_WRITE_FAILURE for user {username} ({action}): {exc}")
            return

        logger.info(f"Risk event persisted for {username}: {action}")

    async def recent(self, user_id: UUID, limit: int) -> List[RiskEvent]:
        """Most recent events first, at most limit of them"""
        if limit <= 0:
            return []
        return await self.uow.risk_events.get_recent_by_user_id(user_id, limit)

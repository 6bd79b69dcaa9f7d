from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from session_risk.app.repositories.risk_event_repository import IRiskEventRepository
from session_risk.domain.entities import RiskEvent


class RiskEventRepository(IRiskEventRepository):
    """RiskEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, risk_event: RiskEvent) -> RiskEvent:
        """Append a risk event (immutable)"""
        self.session.add(risk_event)
        await self.session.flush()
        await self.session.refresh(risk_event)
        return risk_event

    async def get_recent_by_user_id(self, user_id: UUID, limit: int) -> List[RiskEvent]:
        """Most recent events first; id breaks ties within the same timestamp"""
        stmt = (
            select(RiskEvent)
            .where(RiskEvent.user_id == user_id)
            .order_by(RiskEvent.event_time.desc(), RiskEvent.id.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from session_risk.domain.entities import RiskEvent


class IRiskEventRepository(ABC):
    """RiskEvent repository interface - application layer"""

    @abstractmethod
    async def create(self, risk_event: RiskEvent) -> RiskEvent:
        """Append a risk event (immutable)"""
        pass

    @abstractmethod
    async def get_recent_by_user_id(self, user_id: UUID, limit: int) -> List[RiskEvent]:
        """Get the most recent events for a user, newest first"""
        pass

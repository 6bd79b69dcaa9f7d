"""
Risk Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from session_risk.domain.entities import RiskEvent


class RiskEventInfo(BaseModel):
    """Risk event as shown on admin and self-service dashboards"""

    id: int
    user_id: UUID
    username: str
    active_sessions: int
    allowed_sessions: int
    risk_score: float
    action_taken: str
    description: Optional[str]
    event_time: datetime

    @classmethod
    def from_entity(cls, event: RiskEvent) -> "RiskEventInfo":
        return cls(
            id=event.id,
            user_id=event.user_id,
            username=event.username,
            active_sessions=event.active_sessions,
            allowed_sessions=event.allowed_sessions,
            risk_score=event.risk_score,
            action_taken=event.action_taken,
            description=event.description,
            event_time=event.event_time,
        )


class RiskEventsResponse(BaseModel):
    """Response for recent risk events use case"""

    events: List[RiskEventInfo]

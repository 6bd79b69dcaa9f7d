"""
Session Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from session_risk.domain.entities import RiskEvaluation, UserSession


class SessionInfo(BaseModel):
    """Active session as shown on dashboards"""

    id: int
    session_token: str
    device_id: Optional[str]
    ip_address: Optional[str]
    login_time: datetime
    last_accessed_time: Optional[datetime]
    active: bool

    @classmethod
    def from_entity(cls, session: UserSession) -> "SessionInfo":
        return cls(
            id=session.id,
            session_token=session.token,
            device_id=session.device_id,
            ip_address=session.ip_address,
            login_time=session.created_at,
            last_accessed_time=session.last_seen_at,
            active=session.active,
        )


class RegisterSessionResponse(BaseModel):
    """Response for session registration use case"""

    session: SessionInfo
    evaluation: RiskEvaluation


class DeactivateSessionResponse(BaseModel):
    """Response for single session deactivation"""

    session_token: str
    deactivated: bool

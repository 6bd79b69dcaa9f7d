"""
RiskEvaluation Value Object

Snapshot produced by every evaluation. Never persisted, never mutated.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .enums import RiskAction, RiskLevel


class RiskEvaluation(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: UUID
    username: str
    active_sessions: int
    allowed_sessions: int
    risk_score: float
    risk_level: RiskLevel
    threshold_exceeded: bool
    display_threshold: float
    above_display_threshold: bool
    action: RiskAction
    message: str
    deactivated_sessions: int = 0

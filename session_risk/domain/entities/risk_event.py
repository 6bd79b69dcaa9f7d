"""
RiskEvent Entity

Append-only record of enforcement actions.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class RiskEvent(SQLModel, table=True):
    """
    RiskEvent entity - one row per enforcement action.

    Business Rules:
    - Immutable (never updated or deleted by the service)
    - username is denormalized at write time
    """

    __tablename__ = "risk_events"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: UUID = Field(nullable=False, index=True)
    username: str = Field(max_length=100)

    active_sessions: int
    allowed_sessions: int
    risk_score: float

    action_taken: str = Field(max_length=50)
    description: Optional[str] = Field(default=None, max_length=500)

    event_time: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_risk_event_user_time", "user_id", "event_time"),)

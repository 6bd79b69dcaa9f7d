"""
UserSession Entity

One authenticated login, tracked for concurrent-session enforcement.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class UserSession(SQLModel, table=True):
    """
    UserSession entity - one row per successful login.

    Business Rules:
    - Token is unique across all principals and never reused
    - active=False is terminal, a session is never reactivated
    - A session belongs to exactly one user for its lifetime
    - last_seen_at is refreshed on every authenticated request
    """

    __tablename__ = "user_sessions"

    # Surrogate key, gives stable insertion order
    id: Optional[int] = Field(default=None, primary_key=True)

    token: str = Field(unique=True, index=True, max_length=100)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    device_id: Optional[str] = Field(default=None, max_length=255)
    ip_address: Optional[str] = Field(default=None, max_length=45)

    active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    last_seen_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_session_user_active", "user_id", "active"),)

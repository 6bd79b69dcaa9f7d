from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from session_risk.app.repositories.session_repository import ISessionRepository
from session_risk.domain.entities import UserSession


class SessionRepository(ISessionRepository):
    """UserSession repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token(self, token: str) -> Optional[UserSession]:
        """Get session by token"""
        stmt = select(UserSession).where(UserSession.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, session_obj: UserSession) -> UserSession:
        """Insert a new session row"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def get_active_by_user_id(self, user_id: UUID) -> List[UserSession]:
        """Get active sessions for a user in insertion order"""
        stmt = (
            select(UserSession)
            .where(UserSession.user_id == user_id, UserSession.active == True)
            .order_by(UserSession.id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_active_by_user_id(self, user_id: UUID) -> int:
        """Count active sessions for a user"""
        stmt = select(func.count(UserSession.id)).where(
            UserSession.user_id == user_id, UserSession.active == True
        )
        result = await self.session.exec(stmt)
        return int(result.one())

    async def deactivate_by_token(self, token: str) -> bool:
        """Mark a session inactive; no-op for unknown or inactive tokens"""
        stmt = (
            update(UserSession)
            .where(UserSession.token == token, UserSession.active == True)
            .values(active=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def deactivate_for_user(self, user_id: UUID, token: str) -> bool:
        """Mark a session inactive only when it belongs to user_id"""
        stmt = (
            update(UserSession)
            .where(
                UserSession.user_id == user_id,
                UserSession.token == token,
                UserSession.active == True,
            )
            .values(active=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def touch(self, token: str) -> None:
        """Refresh last_seen_at of an active session"""
        stmt = (
            update(UserSession)
            .where(UserSession.token == token, UserSession.active == True)
            .values(last_seen_at=datetime.utcnow())
        )
        await self.session.execute(stmt)
        await self.session.flush()

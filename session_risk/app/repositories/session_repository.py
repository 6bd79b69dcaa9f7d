from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from session_risk.domain.entities import UserSession


class ISessionRepository(ABC):
    """UserSession repository interface - application layer"""

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[UserSession]:
        """Get session by token, active or not"""
        pass

    @abstractmethod
    async def create(self, session: UserSession) -> UserSession:
        """Insert a new session row"""
        pass

    @abstractmethod
    async def get_active_by_user_id(self, user_id: UUID) -> List[UserSession]:
        """Get active sessions for a user in insertion order"""
        pass

    @abstractmethod
    async def count_active_by_user_id(self, user_id: UUID) -> int:
        """Count active sessions for a user"""
        pass

    @abstractmethod
    async def deactivate_by_token(self, token: str) -> bool:
        """Mark a session inactive. Returns True if an active row changed."""
        pass

    @abstractmethod
    async def deactivate_for_user(self, user_id: UUID, token: str) -> bool:
        """Mark a session inactive only if it belongs to user_id. Returns True if changed."""
        pass

    @abstractmethod
    async def touch(self, token: str) -> None:
        """Refresh last_seen_at of an active session"""
        pass

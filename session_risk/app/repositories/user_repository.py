from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from session_risk.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - the credential store"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user"""
        pass

"""
User Entity

Principal record owned by the credential store.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - an authenticated identity.

    Business Rules:
    - Username must be unique and doubles as the display name
    - Password stored as bcrypt hash
    - Role decides access to risk administration
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=100)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role: UserRole = Field(default=UserRole.user)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    @property
    def is_privileged(self) -> bool:
        return self.role == UserRole.admin

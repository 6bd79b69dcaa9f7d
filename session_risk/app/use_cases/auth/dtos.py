"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from session_risk.domain.entities import RiskEvaluation


# ============================================================================
# Commands
# ============================================================================


class LoginCommand(BaseModel):
    """Validated login intent with the client metadata of the request"""

    username: str
    password: str
    device_id: Optional[str] = None
    ip_address: Optional[str] = None


class SignupCommand(BaseModel):
    """Validated registration intent, always creates a regular user"""

    username: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for user login use case"""

    access_token: str
    token_type: str = "bearer"
    session_token: str
    user_id: str
    username: str
    role: str
    risk: RiskEvaluation


class LogoutResponse(BaseModel):
    """Response for user logout use case"""

    status: str
    message: str


class UserInfo(BaseModel):
    """Account details returned by signup and /auth/me"""

    id: str
    username: str
    role: str
    created_at: datetime

from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(user_id: UUID, session_token: str, role: str) -> str:
    """
    Generate JWT access token

    Args:
        user_id: User UUID
        session_token: Tracked session the token is bound to
        role: User role (admin, user)

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "sid": session_token,
        "role": role,
        "exp": now + timedelta(minutes=ApplicationConfig.ACCESS_TOKEN_EXPIRE_MINUTES),
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None

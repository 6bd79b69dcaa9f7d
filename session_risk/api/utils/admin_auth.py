"""
Admin Role Authorization

Guards risk administration endpoints.
"""

from fastapi import Depends, status

from session_risk.api.error import ClientError
from session_risk.depends import get_current_user
from session_risk.domain.entities import UserRole
from session_risk.libs.result import Error


async def require_admin(current_user: dict = Depends(get_current_user)) -> dict:
    """
    Require the privileged role on the caller's JWT.

    Raises:
        ClientError: 403 if the caller is not an admin

    Returns:
        The caller's JWT payload
    """
    if current_user.get("role") != UserRole.admin.value:
        raise ClientError(
            Error("INSUFFICIENT_ROLE", "Admin role required"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return current_user

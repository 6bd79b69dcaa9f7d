"""
Authentication Use Cases

All authentication-related business logic.
"""

from .dtos import LoginCommand, LoginResponse, LogoutResponse, SignupCommand, UserInfo
from .get_current_user_use_case import GetCurrentUserUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .seed_admin_use_case import SeedAdminUseCase
from .signup_use_case import SignupUseCase

__all__ = [
    "LoginUseCase",
    "LogoutUseCase",
    "SignupUseCase",
    "SeedAdminUseCase",
    "GetCurrentUserUseCase",
    "LoginCommand",
    "LoginResponse",
    "LogoutResponse",
    "SignupCommand",
    "UserInfo",
]

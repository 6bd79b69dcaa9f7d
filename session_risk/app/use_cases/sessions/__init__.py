"""
Session Use Cases

Registration and management of tracked sessions.
"""

from .dtos import DeactivateSessionResponse, RegisterSessionResponse, SessionInfo
from .register_session_use_case import RegisterSessionUseCase
from .manage_sessions_use_case import ManageSessionsUseCase

__all__ = [
    "RegisterSessionUseCase",
    "ManageSessionsUseCase",
    "SessionInfo",
    "RegisterSessionResponse",
    "DeactivateSessionResponse",
]

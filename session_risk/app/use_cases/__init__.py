"""
Use Cases

Organized into domain folders:
- auth/: Login and logout
- sessions/: Session registration and management
- risk/: Risk evaluation and risk event log

Import from subdirectories for better organization.
"""

from .auth import (
    LoginUseCase,
    LogoutUseCase,
)
from .sessions import (
    RegisterSessionUseCase,
    ManageSessionsUseCase,
)
from .risk import (
    EvaluateRiskUseCase,
    GetRiskEventsUseCase,
)

__all__ = [
    # Auth
    "LoginUseCase",
    "LogoutUseCase",
    # Sessions
    "RegisterSessionUseCase",
    "ManageSessionsUseCase",
    # Risk
    "EvaluateRiskUseCase",
    "GetRiskEventsUseCase",
]

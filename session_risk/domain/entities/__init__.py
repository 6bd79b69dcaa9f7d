"""
Session Risk Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import RiskAction, RiskLevel, UserRole

# Export all entities
from .user import User
from .session import UserSession
from .risk_event import RiskEvent
from .risk_evaluation import RiskEvaluation

__all__ = [
    # Enums
    "UserRole",
    "RiskLevel",
    "RiskAction",
    # Entities
    "User",
    "UserSession",
    "RiskEvent",
    "RiskEvaluation",
]

"""
Session Risk Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Principal role as reported by the credential store"""

    admin = "admin"
    user = "user"


class RiskLevel(str, Enum):
    """Display tier derived from the share of session capacity in use"""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class RiskAction(str, Enum):
    """Action taken by an evaluation"""

    NONE = "NONE"
    OTHER_SESSIONS_INVALIDATED = "OTHER_SESSIONS_INVALIDATED"

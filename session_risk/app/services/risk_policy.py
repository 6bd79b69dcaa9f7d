"""
Risk Policy

Immutable risk-evaluator configuration and the pure scoring rules.

The enforcement trigger is the strict comparison active > max_allowed_sessions.
The percentage score and the display threshold only drive labels.
"""

from pydantic import BaseModel, ConfigDict, Field

from session_risk.domain.entities import RiskLevel


class RiskPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_allowed_sessions: int = Field(default=2, ge=0)
    display_threshold_percent: float = Field(default=70.0, ge=0)

    @classmethod
    def from_config(cls, config) -> "RiskPolicy":
        return cls(
            max_allowed_sessions=config.MAX_ALLOWED_SESSIONS,
            display_threshold_percent=config.RISK_DISPLAY_THRESHOLD_PERCENT,
        )


def calculate_risk_score(active_sessions: int, allowed_sessions: int) -> float:
    """
    Risk Score = (Active Sessions / Allowed Sessions) x 100

    Not capped, an exceeded limit shows above 100. A zero cap yields 0.0.
    """
    if allowed_sessions == 0:
        return 0.0
    return (active_sessions / allowed_sessions) * 100.0


def determine_risk_level(active_sessions: int, allowed_sessions: int) -> RiskLevel:
    """
    LOW      - up to 50% of capacity
    MEDIUM   - up to 75%
    HIGH     - above 75%, at most at the limit
    CRITICAL - limit exceeded
    """
    if active_sessions > allowed_sessions:
        return RiskLevel.CRITICAL
    pct = calculate_risk_score(active_sessions, allowed_sessions)
    if pct <= 50:
        return RiskLevel.LOW
    elif pct <= 75:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def limit_exceeded(active_sessions: int, allowed_sessions: int) -> bool:
    return active_sessions > allowed_sessions

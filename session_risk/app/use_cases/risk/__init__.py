"""
Risk Use Cases

Risk evaluation, enforcement and the risk event log.
"""

from .dtos import RiskEventInfo, RiskEventsResponse
from .evaluate_risk_use_case import EvaluateRiskUseCase
from .get_risk_events_use_case import GetRiskEventsUseCase

__all__ = [
    "EvaluateRiskUseCase",
    "GetRiskEventsUseCase",
    "RiskEventInfo",
    "RiskEventsResponse",
]

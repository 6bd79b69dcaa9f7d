"""
Unit tests for risk scoring rules
"""

import pytest
from pydantic import ValidationError

from config import ApplicationConfig
from session_risk.app.services.risk_policy import (
    RiskPolicy,
    calculate_risk_score,
    determine_risk_level,
    limit_exceeded,
)
from session_risk.domain.entities import RiskLevel


@pytest.mark.parametrize(
    "active, expected_level",
    [
        (0, RiskLevel.LOW),
        (1, RiskLevel.LOW),
        (2, RiskLevel.LOW),
        (3, RiskLevel.MEDIUM),
        (4, RiskLevel.HIGH),
        (5, RiskLevel.CRITICAL),
    ],
)
def test_risk_level_boundaries_at_cap_four(active, expected_level):
    assert determine_risk_level(active, 4) == expected_level


def test_at_cap_is_high_not_critical():
    assert determine_risk_level(2, 2) == RiskLevel.HIGH
    assert not limit_exceeded(2, 2)


def test_risk_score_is_not_capped():
    assert calculate_risk_score(3, 2) == 150.0
    assert calculate_risk_score(1, 4) == 25.0


def test_zero_cap_never_divides_by_zero():
    assert calculate_risk_score(3, 0) == 0.0
    assert determine_risk_level(0, 0) == RiskLevel.LOW
    assert determine_risk_level(1, 0) == RiskLevel.CRITICAL
    assert limit_exceeded(1, 0)


def test_enforcement_ignores_display_threshold():
    """75% of capacity is above a 70% display threshold but never enforces"""
    assert calculate_risk_score(3, 4) > RiskPolicy().display_threshold_percent
    assert not limit_exceeded(3, 4)


def test_policy_defaults_and_config():
    policy = RiskPolicy()
    assert policy.max_allowed_sessions == 2
    assert policy.display_threshold_percent == 70.0

    from_config = RiskPolicy.from_config(ApplicationConfig)
    assert from_config.max_allowed_sessions == ApplicationConfig.MAX_ALLOWED_SESSIONS


def test_policy_is_immutable_and_validated():
    policy = RiskPolicy(max_allowed_sessions=3)
    with pytest.raises(ValidationError):
        policy.max_allowed_sessions = 5
    with pytest.raises(ValidationError):
        RiskPolicy(max_allowed_sessions=-1)

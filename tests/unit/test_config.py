"""Unit tests for settings validation and defaults"""

import pytest
from pydantic import ValidationError
from card_payoff.config import Settings
from card_payoff.domain.amortization import HORIZON_CAP
from card_payoff.domain.models import MINIMUM_PAYMENT_FLOOR, MinimumPercent


def test_engine_defaults_follow_domain_constants():
    """Test settings and policy defaults share one floor and horizon"""
    config = Settings()

    assert config.horizon_months == HORIZON_CAP
    assert config.minimum_payment_floor == MINIMUM_PAYMENT_FLOOR
    assert MinimumPercent(percent=0.05).floor == MINIMUM_PAYMENT_FLOOR


@pytest.mark.parametrize("horizon", [0, -12])
def test_horizon_must_be_positive(horizon):
    """Test a non-positive horizon never reaches the engine"""
    with pytest.raises(ValidationError):
        Settings(horizon_months=horizon)

"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from card_payoff.api.main import create_app
from card_payoff.api.dependencies import get_settings
from card_payoff.config import Settings
from card_payoff.domain.models import CardEntry


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client with default settings"""
    return TestClient(create_app())


@pytest.fixture
def short_horizon_client() -> TestClient:
    """Test client whose engine gives up after two years"""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: Settings(horizon_months=24)
    return TestClient(app)


@pytest.fixture
def sample_cards() -> list[CardEntry]:
    """Two live cards plus two rows the summary should skip"""
    return [
        CardEntry(name="Bonus", debt=10_000, rate=0.03),
        CardEntry(name="Maximum", debt=30_000, rate=0.04),
        CardEntry(name="Paid off", debt=0, rate=0.05),
        CardEntry(name="Refund", debt=-5, rate=0.05),
    ]

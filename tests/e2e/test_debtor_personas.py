"""
E2E tests walking typical debtors through several calls, the way the web
calculator drives the API.

Personas:
- minimum_payer: pays the card minimum, then checks what a fixed payment saves
- overextended: 250K balance on the top rate tier, minimum below interest
- shopper: splits a purchase into installments, with and without interest
- card_juggler: several cards, wants the blended rate
"""

import pytest
from fastapi.testclient import TestClient


def test_minimum_payer_switches_to_fixed(client: TestClient):
    """
    minimum_payer: 20.000 TL at the auto rate, 5% minimum
    Expected: fixed 2.000 TL/month finishes sooner and saves interest
    """
    minimum = client.post(
        "/v1/minimum",
        json={"debt": "20.000", "rate_mode": "auto", "min_percent": "5"},
    )
    assert minimum.status_code == 200
    minimum_data = minimum.json()
    assert minimum_data["monthly_rate_percent"] == 3.25

    fixed = client.post(
        "/v1/fixed",
        json={
            "debt": "20.000",
            "rate_mode": "auto",
            "fixed_payment": "2.000",
            "previous_minimum": minimum_data["summary"],
        },
    )
    assert fixed.status_code == 200
    fixed_data = fixed.json()

    assert fixed_data["months"] < minimum_data["months"]
    assert fixed_data["savings"] > 0
    assert fixed_data["schedule"][-1]["remaining"] <= 1


def test_overextended_is_told_the_truth(client: TestClient):
    """
    overextended: 250.000 TL, top tier, 4% minimum
    Expected: minimum never clears; an under-interest fixed payment is refused
    with the amount that would work
    """
    rate = client.get("/v1/rates/resolve", params={"debt": 250_000}).json()
    assert rate["rate_percent"] == 4.25

    minimum = client.post(
        "/v1/minimum",
        json={"debt": 250_000, "rate_mode": "auto", "min_percent": 4},
    )
    assert minimum.status_code == 422
    assert minimum.json()["detail"]["error"] == "horizon_exceeded"

    fixed = client.post(
        "/v1/fixed",
        json={"debt": 250_000, "rate_mode": "auto", "fixed_payment": 10_000},
    )
    assert fixed.status_code == 422
    required = fixed.json()["detail"]["minimum_required_payment"]
    assert required == 10_626  # 10.625 interest + 1

    retry = client.post(
        "/v1/fixed",
        json={"debt": 250_000, "rate_mode": "auto", "fixed_payment": 20_000},
    )
    assert retry.status_code == 200


@pytest.mark.parametrize("rate_percent, interest_free", [(0, True), ("2,49", False)])
def test_shopper_installments(client: TestClient, rate_percent, interest_free):
    """
    shopper: 24.000 TL over 6 months
    Expected: 4.000 TL a month interest free, more with interest
    """
    response = client.post(
        "/v1/installment",
        json={"amount": "24.000", "months": 6, "monthly_rate_percent": rate_percent},
    )
    assert response.status_code == 200
    data = response.json()

    assert len(data["schedule"]) == 6
    assert data["total_interest"] == pytest.approx(data["total_payment"] - 24_000)
    if interest_free:
        assert data["monthly_payment"] == pytest.approx(4_000)
        assert data["total_interest"] == 0
    else:
        assert data["monthly_payment"] > 4_000
        assert data["total_interest"] > 0


def test_card_juggler_blended_rate(client: TestClient):
    """
    card_juggler: three cards at different rates
    Expected: blended rate between the extremes, shares adding up to 100%
    """
    response = client.post(
        "/v1/cards",
        json={
            "cards": [
                {"name": "Kart 1", "debt": "5.000", "rate_percent": "3,25"},
                {"name": "Kart 2", "debt": "45.000", "rate_percent": "3,75"},
                {"name": "Kart 3", "debt": "200.000", "rate_percent": "4,25"},
            ]
        },
    )
    assert response.status_code == 200
    data = response.json()

    assert data["card_count"] == 3
    assert 3.25 <= data["weighted_rate_percent"] <= 4.25
    assert sum(card["share"] for card in data["cards"]) == pytest.approx(100)
    assert data["display"]["total_debt"] == "250.000,00 ₺"

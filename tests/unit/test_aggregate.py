"""Unit tests for the multi-card summary"""

import pytest
from card_payoff.domain.aggregate import compute_aggregate
from card_payoff.domain.exceptions import ValidationFailure
from card_payoff.domain.models import CardEntry


def test_aggregate_totals(sample_cards):
    """Test totals skip cards without positive debt"""
    result = compute_aggregate(sample_cards)

    assert result.card_count == 2
    assert result.total_debt == 40_000
    assert result.monthly_interest == pytest.approx(300 + 1_200)
    assert result.weighted_rate == pytest.approx(0.0375)
    assert [card.name for card in result.cards] == ["Bonus", "Maximum"]


def test_aggregate_shares_sum_to_100(sample_cards):
    """Test per-card shares cover the whole debt"""
    result = compute_aggregate(sample_cards)

    assert [card.share for card in result.cards] == pytest.approx([25.0, 75.0])
    assert sum(card.share for card in result.cards) == pytest.approx(100.0)
    assert result.cards[1].monthly_interest == pytest.approx(1_200)


def test_aggregate_weighted_rate_within_card_rates():
    """Test the weighted rate sits between the cheapest and dearest card"""
    cards = [
        CardEntry(name="A", debt=1_234.56, rate=0.0199),
        CardEntry(name="B", debt=98_765.43, rate=0.0442),
        CardEntry(name="C", debt=15_000, rate=0.0375),
    ]
    result = compute_aggregate(cards)

    assert 0.0199 <= result.weighted_rate <= 0.0442


def test_aggregate_single_card():
    """Test one card is its own weighted rate"""
    result = compute_aggregate([CardEntry(name="Only", debt=5_000, rate=0.0425)])

    assert result.weighted_rate == pytest.approx(0.0425)
    assert result.cards[0].share == pytest.approx(100.0)


def test_aggregate_requires_positive_debt():
    """Test an all-zero card list is rejected"""
    with pytest.raises(ValidationFailure):
        compute_aggregate([CardEntry(name="Empty", debt=0, rate=0.03)])
    with pytest.raises(ValidationFailure):
        compute_aggregate([])


def test_aggregate_rejects_negative_rate():
    """Test a negative card rate is a validation failure"""
    with pytest.raises(ValidationFailure):
        compute_aggregate([CardEntry(name="Odd", debt=1_000, rate=-0.01)])

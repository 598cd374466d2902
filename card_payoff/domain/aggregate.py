"""Multi-card debt summary"""

from typing import Iterable
from card_payoff.domain.models import AggregateResult, CardEntry, CardShare
from card_payoff.domain.exceptions import ValidationFailure


def compute_aggregate(cards: Iterable[CardEntry]) -> AggregateResult:
    """
    Summarize several independent card balances.

    Cards with no positive debt are dropped. Each card's rate applies only to
    its own balance, so there is no combined payoff projection, just:
    - total debt
    - debt-weighted average monthly rate
    - one month's interest across all cards
    - each card's share of the total, in percent

    Raises:
        ValidationFailure: If no card has a positive debt
    """
    active = [card for card in cards if card.debt > 0]
    if not active:
        raise ValidationFailure("Provide at least one card with positive debt")

    for card in active:
        if card.rate < 0:
            raise ValidationFailure(f"Rate for {card.name} cannot be negative")

    total_debt = sum(card.debt for card in active)
    monthly_interest = sum(card.debt * card.rate for card in active)

    shares = [
        CardShare(
            name=card.name,
            debt=card.debt,
            rate=card.rate,
            monthly_interest=card.debt * card.rate,
            share=card.debt / total_debt * 100,
        )
        for card in active
    ]

    return AggregateResult(
        card_count=len(active),
        total_debt=total_debt,
        weighted_rate=monthly_interest / total_debt,
        monthly_interest=monthly_interest,
        cards=shares,
    )

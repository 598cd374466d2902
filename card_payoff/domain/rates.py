"""Tiered monthly interest rates for credit card debt"""

import math
from typing import Sequence
from card_payoff.domain.models import RateTier

# 2026 central bank ceilings, scanned in ascending order, first match wins
RATE_TIERS: tuple[RateTier, ...] = (
    RateTier(upper_bound=30_000, rate=3.25, label="< 30K"),
    RateTier(upper_bound=180_000, rate=3.75, label="30K-180K", inclusive=True),
    RateTier(upper_bound=math.inf, rate=4.25, label="> 180K"),
)


def _find_tier(debt: float, tiers: Sequence[RateTier]) -> RateTier:
    for tier in tiers:
        if debt < tier.upper_bound or (tier.inclusive and debt == tier.upper_bound):
            return tier
    # Only reachable with a table that does not end at infinity
    return tiers[-1]


def resolve_rate(debt: float, tiers: Sequence[RateTier] = RATE_TIERS) -> float:
    """
    Map a debt amount to its tiered monthly rate, in percent.

    Default table:
    - debt < 30,000:            3.25
    - 30,000 <= debt <= 180,000: 3.75
    - debt > 180,000:           4.25

    Callers with a bank-specific or hand-entered rate skip this entirely.
    """
    return _find_tier(debt, tiers).rate


def describe_tier(debt: float, tiers: Sequence[RateTier] = RATE_TIERS) -> str:
    """Label of the tier a debt falls into, shown next to an auto-filled rate"""
    return _find_tier(debt, tiers).label

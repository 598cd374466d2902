"""GET /v1/rates - tiered monthly rate table and lookup"""

import math
from fastapi import APIRouter, Query

from card_payoff.api.v1.schemas import RateTierSchema, RatesResponse, ResolvedRateResponse
from card_payoff.domain.rates import RATE_TIERS, describe_tier, resolve_rate

router = APIRouter()


@router.get("/rates", response_model=RatesResponse)
def list_rate_tiers():
    """Rate table in ascending debt order; the last band is open-ended"""
    return RatesResponse(
        tiers=[
            RateTierSchema(
                upper_bound=None if math.isinf(tier.upper_bound) else tier.upper_bound,
                inclusive=tier.inclusive,
                rate_percent=tier.rate,
                label=tier.label,
            )
            for tier in RATE_TIERS
        ]
    )


@router.get("/rates/resolve", response_model=ResolvedRateResponse)
def resolve_rate_for_debt(debt: float = Query(..., ge=0, description="Outstanding balance")):
    """Monthly rate the tier table assigns to a debt"""
    return ResolvedRateResponse(debt=debt, rate_percent=resolve_rate(debt), tier=describe_tier(debt))

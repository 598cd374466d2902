"""POST /v1/minimum, /v1/fixed, /v1/compare - credit card payoff projections"""

import time
from fastapi import APIRouter, Depends, Request

from card_payoff.api.v1.schemas import (
    CompareRequest,
    CompareResponse,
    FixedPaymentRequest,
    FixedPaymentResponse,
    MinimumPaymentRequest,
    MinimumPaymentResponse,
    RatedDebtRequest,
)
from card_payoff.api.v1.presenters import present_fixed, present_minimum
from card_payoff.api.v1.errors import domain_error, unexpected_error
from card_payoff.api.dependencies import get_request_id, get_settings
from card_payoff.config import Settings
from card_payoff.domain.calculators import (
    compare_strategies,
    compute_fixed_payment,
    compute_minimum_payment,
)
from card_payoff.domain.exceptions import DomainException
from card_payoff.domain.models import PaymentSummary
from card_payoff.domain.rates import resolve_rate
from card_payoff.infrastructure.observability.metrics import record_calculation
from card_payoff.infrastructure.observability.logging import log_calculation

router = APIRouter()


def monthly_rate_percent(body: RatedDebtRequest) -> float:
    """Tiered rate in auto mode, otherwise whatever the caller typed or picked from a bank"""
    if body.rate_mode == "auto":
        return resolve_rate(body.debt)
    return body.monthly_rate_percent


@router.post("/minimum", response_model=MinimumPaymentResponse)
def calculate_minimum(
    body: MinimumPaymentRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Project paying only the minimum every month.

    The response's `summary` can be sent back as `previous_minimum` to
    /v1/fixed to get the interest saved by paying a fixed amount instead.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    rate_percent = monthly_rate_percent(body)

    try:
        result = compute_minimum_payment(
            body.debt,
            rate_percent / 100,
            body.min_percent / 100,
            floor=config.minimum_payment_floor,
            horizon=config.horizon_months,
            payoff_threshold=config.payoff_threshold,
        )
    except DomainException as e:
        raise domain_error("minimum", request_id, e)
    except Exception as e:
        raise unexpected_error("minimum", request_id, e)

    record_calculation("minimum", "ok", result.months)
    log_calculation(request_id, "minimum", "ok", result.months, (time.time() - start_time) * 1000)

    return present_minimum(result, rate_percent, body.rate_mode, config.currency_symbol)


@router.post("/fixed", response_model=FixedPaymentResponse)
def calculate_fixed(
    body: FixedPaymentRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Project paying the same amount every month.

    Rejected with 422 and `minimum_required_payment` when the payment does
    not beat the first month's interest.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    rate_percent = monthly_rate_percent(body)

    previous = None
    if body.previous_minimum is not None:
        previous = PaymentSummary(
            months=body.previous_minimum.months,
            total_payment=body.previous_minimum.total_payment,
            total_interest=body.previous_minimum.total_interest,
        )

    try:
        result = compute_fixed_payment(
            body.debt,
            rate_percent / 100,
            body.fixed_payment,
            previous_minimum=previous,
            horizon=config.horizon_months,
            payoff_threshold=config.payoff_threshold,
        )
    except DomainException as e:
        raise domain_error("fixed", request_id, e)
    except Exception as e:
        raise unexpected_error("fixed", request_id, e)

    record_calculation("fixed", "ok", result.months)
    log_calculation(request_id, "fixed", "ok", result.months, (time.time() - start_time) * 1000)

    return present_fixed(result, rate_percent, body.rate_mode, config.currency_symbol)


@router.post("/compare", response_model=CompareResponse)
def calculate_compare(
    body: CompareRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """Minimum vs fixed payment on the same debt, in one request"""
    start_time = time.time()
    request_id = get_request_id(request)
    rate_percent = monthly_rate_percent(body)

    try:
        minimum, fixed = compare_strategies(
            body.debt,
            rate_percent / 100,
            body.min_percent / 100,
            body.fixed_payment,
            floor=config.minimum_payment_floor,
            horizon=config.horizon_months,
            payoff_threshold=config.payoff_threshold,
        )
    except DomainException as e:
        raise domain_error("compare", request_id, e)
    except Exception as e:
        raise unexpected_error("compare", request_id, e)

    record_calculation("compare", "ok", fixed.months)
    log_calculation(request_id, "compare", "ok", fixed.months, (time.time() - start_time) * 1000)

    return CompareResponse(
        minimum=present_minimum(minimum, rate_percent, body.rate_mode, config.currency_symbol),
        fixed=present_fixed(fixed, rate_percent, body.rate_mode, config.currency_symbol),
        savings=fixed.savings,
        months_saved=minimum.months - fixed.months,
    )

"""POST /v1/installment - fixed-term installment schedule"""

import time
from fastapi import APIRouter, Depends, Request

from card_payoff.api.v1.schemas import InstallmentRequest, InstallmentResponse
from card_payoff.api.v1.presenters import present_installment
from card_payoff.api.v1.errors import domain_error, unexpected_error
from card_payoff.api.dependencies import get_request_id, get_settings
from card_payoff.config import Settings
from card_payoff.domain.calculators import compute_installment
from card_payoff.domain.exceptions import DomainException
from card_payoff.infrastructure.observability.metrics import record_calculation
from card_payoff.infrastructure.observability.logging import log_calculation

router = APIRouter()


@router.post("/installment", response_model=InstallmentResponse)
def calculate_installment(
    body: InstallmentRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Split an amount into equal monthly installments.

    A zero rate divides the amount evenly; otherwise the annuity formula sets
    the payment and `annual_rate` reports the compounded yearly cost.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = compute_installment(body.amount, body.months, body.monthly_rate_percent / 100)
    except DomainException as e:
        raise domain_error("installment", request_id, e)
    except Exception as e:
        raise unexpected_error("installment", request_id, e)

    months = len(result.schedule)
    record_calculation("installment", "ok", months)
    log_calculation(request_id, "installment", "ok", months, (time.time() - start_time) * 1000)

    return present_installment(result, config.currency_symbol)

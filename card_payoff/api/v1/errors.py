"""Translate domain exceptions into HTTP 422 responses"""

import logging
from fastapi import HTTPException

from card_payoff.domain.exceptions import (
    DomainException,
    HorizonExceeded,
    PolicyInfeasible,
)
from card_payoff.infrastructure.observability.metrics import record_calculation


def outcome_for(exc: DomainException) -> str:
    if isinstance(exc, PolicyInfeasible):
        return "infeasible"
    if isinstance(exc, HorizonExceeded):
        return "horizon_exceeded"
    return "validation_failure"


def domain_error(mode: str, request_id: str, exc: DomainException) -> HTTPException:
    """
    Build the HTTP error for a rejected calculation.

    Body shape: {"error": <outcome>, "message": ..., plus outcome-specific keys}
    - infeasible: minimum_required_payment
    - horizon_exceeded: months, remaining_balance
    """
    outcome = outcome_for(exc)
    detail = {"error": outcome, "message": str(exc), "mode": mode}

    if isinstance(exc, PolicyInfeasible):
        detail["minimum_required_payment"] = exc.minimum_required_payment
    elif isinstance(exc, HorizonExceeded):
        detail["months"] = exc.schedule.months
        detail["remaining_balance"] = exc.schedule.remaining_balance

    months = exc.schedule.months if isinstance(exc, HorizonExceeded) else None
    record_calculation(mode, outcome, months)
    logging.warning(
        f"Calculation rejected: {exc}",
        extra={"request_id": request_id, "mode": mode, "outcome": outcome},
    )
    return HTTPException(status_code=422, detail=detail)


def unexpected_error(mode: str, request_id: str, exc: Exception) -> HTTPException:
    logging.error(f"Unexpected error: {exc}", extra={"request_id": request_id, "mode": mode})
    return HTTPException(status_code=500, detail="Internal server error")

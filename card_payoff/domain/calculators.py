"""Payoff calculators - validate inputs, run the schedule, summarize"""

import math
from typing import Optional
from card_payoff.domain.models import (
    Annuity,
    DebtPosition,
    FixedAmount,
    FixedPaymentResult,
    MINIMUM_PAYMENT_FLOOR,
    InstallmentResult,
    MinimumPaymentResult,
    MinimumPercent,
    PaymentSummary,
)
from card_payoff.domain.exceptions import HorizonExceeded, PolicyInfeasible, ValidationFailure
from card_payoff.domain.amortization import HORIZON_CAP, PAYOFF_THRESHOLD, run_schedule


def _require_positive(**values: float) -> None:
    for name, value in values.items():
        if value is None or value <= 0:
            raise ValidationFailure(f"{name} must be greater than zero")


def _require_horizon(horizon: int) -> None:
    if isinstance(horizon, bool) or not isinstance(horizon, int) or horizon <= 0:
        raise ValidationFailure("horizon must be a positive whole number of months")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def minimum_required_payment(debt: float, monthly_rate: float) -> float:
    """Smallest whole payment that beats the first month's interest (interest + 1, rounded up)"""
    return float(math.ceil(round(debt * monthly_rate, 2) + 1))


def compute_minimum_payment(
    debt: float,
    monthly_rate: float,
    min_percent: float,
    floor: float = MINIMUM_PAYMENT_FLOOR,
    horizon: int = HORIZON_CAP,
    payoff_threshold: float = PAYOFF_THRESHOLD,
) -> MinimumPaymentResult:
    """
    Project paying only the card's minimum each month.

    Payment is max(balance * min_percent, floor). All of debt, rate and
    percent must be positive.

    Raises:
        ValidationFailure: On a non-positive input or horizon
        HorizonExceeded: If the minimum never catches up with the interest
    """
    _require_positive(debt=debt, monthly_rate=monthly_rate, min_percent=min_percent)
    _require_horizon(horizon)

    schedule = run_schedule(
        DebtPosition(principal=debt, rate=monthly_rate),
        MinimumPercent(percent=min_percent, floor=floor),
        horizon=horizon,
        payoff_threshold=payoff_threshold,
    )
    if not schedule.converged:
        raise HorizonExceeded(schedule)

    return MinimumPaymentResult(
        months=schedule.months,
        total_payment=schedule.total_payment,
        total_interest=schedule.total_interest,
        interest_ratio=_round_half_up(schedule.total_interest / debt * 100),
        schedule=schedule.rows,
    )


def compute_fixed_payment(
    debt: float,
    monthly_rate: float,
    fixed_payment: float,
    previous_minimum: Optional[PaymentSummary] = None,
    horizon: int = HORIZON_CAP,
    payoff_threshold: float = PAYOFF_THRESHOLD,
) -> FixedPaymentResult:
    """
    Project paying the same amount every month.

    The payment has to exceed the first month's interest, otherwise the
    balance never shrinks and the input is rejected up front instead of
    iterating to the horizon.

    Args:
        previous_minimum: Totals of a minimum-payment run for the same debt;
            when given, `savings` is its interest minus this run's interest

    Raises:
        ValidationFailure: On a non-positive input or horizon
        PolicyInfeasible: Payment does not exceed first-month interest
        HorizonExceeded: Payment covers interest but too slowly to finish in time
    """
    _require_positive(debt=debt, monthly_rate=monthly_rate, fixed_payment=fixed_payment)
    _require_horizon(horizon)

    first_interest = debt * monthly_rate
    if fixed_payment <= first_interest:
        required = minimum_required_payment(debt, monthly_rate)
        raise PolicyInfeasible(
            f"Monthly payment must be at least {required:.2f}, otherwise the debt never closes",
            minimum_required_payment=required,
        )

    schedule = run_schedule(
        DebtPosition(principal=debt, rate=monthly_rate),
        FixedAmount(amount=fixed_payment),
        horizon=horizon,
        payoff_threshold=payoff_threshold,
    )
    if not schedule.converged:
        raise HorizonExceeded(schedule)

    savings = None
    if previous_minimum is not None:
        savings = previous_minimum.total_interest - schedule.total_interest

    return FixedPaymentResult(
        months=schedule.months,
        total_payment=schedule.total_payment,
        total_interest=schedule.total_interest,
        savings=savings,
        schedule=schedule.rows,
    )


def compute_installment(amount: float, periods: int, monthly_rate: float = 0.0) -> InstallmentResult:
    """
    Split a purchase into `periods` equal installments.

    Zero rate divides the amount evenly; otherwise the payment comes from the
    annuity formula and the schedule runs exactly `periods` months. The
    effective annual rate, (1+r)^12 - 1, is informational.
    """
    _require_positive(amount=amount)
    if isinstance(periods, bool) or not isinstance(periods, int) or periods <= 0:
        raise ValidationFailure("periods must be a positive whole number")
    if monthly_rate is None or monthly_rate < 0:
        raise ValidationFailure("monthly_rate cannot be negative")

    schedule = run_schedule(DebtPosition(principal=amount, rate=monthly_rate), Annuity(periods=periods))

    return InstallmentResult(
        monthly_payment=schedule.rows[0].payment,
        total_payment=schedule.total_payment,
        total_interest=schedule.total_interest,
        annual_rate=((1 + monthly_rate) ** 12 - 1) * 100,
        schedule=schedule.rows,
    )


def compare_strategies(
    debt: float,
    monthly_rate: float,
    min_percent: float,
    fixed_payment: float,
    floor: float = MINIMUM_PAYMENT_FLOOR,
    horizon: int = HORIZON_CAP,
    payoff_threshold: float = PAYOFF_THRESHOLD,
) -> tuple[MinimumPaymentResult, FixedPaymentResult]:
    """Run the minimum and fixed projections on the same debt; fixed carries the savings"""
    minimum = compute_minimum_payment(
        debt, monthly_rate, min_percent, floor=floor, horizon=horizon, payoff_threshold=payoff_threshold
    )
    fixed = compute_fixed_payment(
        debt,
        monthly_rate,
        fixed_payment,
        previous_minimum=minimum.summary(),
        horizon=horizon,
        payoff_threshold=payoff_threshold,
    )
    return minimum, fixed

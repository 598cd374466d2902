"""Amortization stepping loop shared by every payment policy"""

from typing import Callable, List
from card_payoff.domain.models import (
    Annuity,
    DebtPosition,
    FixedAmount,
    MinimumPercent,
    PaymentPolicy,
    Schedule,
    ScheduleRow,
)

HORIZON_CAP = 600  # 50 years of monthly periods
PAYOFF_THRESHOLD = 1.0  # currency units
BALANCE_EPSILON = 1e-9


def annuity_payment(principal: float, rate: float, periods: int) -> float:
    """
    Constant payment that retires `principal` over `periods` at `rate`.

    Formula: P * r / (1 - (1+r)^-n), or P / n when r == 0. The discount
    factor underflows to 0 for very long terms, so the payment tends to P * r.
    """
    if rate == 0:
        return principal / periods

    discount = (1 + rate) ** -periods
    return principal * rate / (1 - discount)


def payment_rule(policy: PaymentPolicy, position: DebtPosition) -> Callable[[float], float]:
    """Return the policy's payment as a function of the opening balance of a period"""
    if isinstance(policy, MinimumPercent):
        return lambda balance: max(balance * policy.percent, policy.floor)

    if isinstance(policy, FixedAmount):
        return lambda balance: policy.amount

    if isinstance(policy, Annuity):
        # Computed once from the original principal, then held constant
        payment = annuity_payment(position.principal, position.rate, policy.periods)
        return lambda balance: payment

    raise TypeError(f"Unknown payment policy: {policy!r}")


def _linear_schedule(principal: float, periods: int) -> Schedule:
    """Zero-rate installments: equal slices, no interest ever accrues"""
    payment = principal / periods
    rows = []
    for i in range(1, periods + 1):
        remaining = principal - payment * i
        if remaining < BALANCE_EPSILON:
            remaining = 0.0
        rows.append(
            ScheduleRow(period=i, payment=payment, interest=0.0, principal=payment, remaining=remaining)
        )

    return Schedule(rows=rows, total_payment=principal, total_interest=0.0, converged=True)


def run_schedule(
    position: DebtPosition,
    policy: PaymentPolicy,
    horizon: int = HORIZON_CAP,
    payoff_threshold: float = PAYOFF_THRESHOLD,
) -> Schedule:
    """
    Decay a balance period by period under a payment policy.

    Each period:
    - interest accrues on the opening balance
    - payment comes from the policy, capped at balance + interest
    - the balance never goes below zero

    Open-ended policies (minimum, fixed) stop as soon as the balance drops to
    `payoff_threshold` or after `horizon` periods, whichever comes first.
    Annuities run exactly their term and ignore both.

    Returns:
        Schedule with `converged=False` when the horizon was hit first. Callers
        decide how to report that; the loop itself never raises.
    """
    if isinstance(policy, Annuity):
        if position.rate == 0:
            return _linear_schedule(position.principal, policy.periods)
        periods, open_ended = policy.periods, False
    else:
        periods, open_ended = horizon, True

    pay = payment_rule(policy, position)
    balance = position.principal
    total_payment = 0.0
    rows: List[ScheduleRow] = []

    for period in range(1, periods + 1):
        interest = balance * position.rate
        payment = min(pay(balance), balance + interest)
        principal = payment - interest
        balance = balance + interest - payment
        if balance < BALANCE_EPSILON:
            balance = 0.0

        total_payment += payment
        rows.append(
            ScheduleRow(
                period=period,
                payment=payment,
                interest=interest,
                principal=principal,
                remaining=balance,
            )
        )

        if open_ended and balance <= payoff_threshold:
            break

    return Schedule(
        rows=rows,
        total_payment=total_payment,
        total_interest=total_payment - position.principal,
        converged=balance <= payoff_threshold,
    )

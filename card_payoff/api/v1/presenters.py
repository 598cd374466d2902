"""Map domain results onto response schemas, adding locale display strings"""

from typing import List
from card_payoff.domain.models import (
    AggregateResult,
    FixedPaymentResult,
    InstallmentResult,
    MinimumPaymentResult,
    ScheduleRow,
)
from card_payoff.api.v1.schemas import (
    CardShareSchema,
    CardsResponse,
    FixedPaymentResponse,
    InstallmentResponse,
    MinimumPaymentResponse,
    PreviousMinimumSchema,
    ScheduleRowSchema,
)
from card_payoff.utils.locale_format import format_currency, format_percent


def schedule_rows(rows: List[ScheduleRow]) -> List[ScheduleRowSchema]:
    return [
        ScheduleRowSchema(
            period=row.period,
            payment=row.payment,
            interest=row.interest,
            principal=row.principal,
            remaining=row.remaining,
        )
        for row in rows
    ]


def present_minimum(
    result: MinimumPaymentResult, rate_percent: float, rate_mode: str, symbol: str
) -> MinimumPaymentResponse:
    summary = result.summary()
    return MinimumPaymentResponse(
        months=result.months,
        total_payment=result.total_payment,
        total_interest=result.total_interest,
        interest_ratio=result.interest_ratio,
        monthly_rate_percent=rate_percent,
        rate_mode=rate_mode,
        schedule=schedule_rows(result.schedule),
        summary=PreviousMinimumSchema(
            months=summary.months,
            total_payment=summary.total_payment,
            total_interest=summary.total_interest,
        ),
        display={
            "months": str(result.months),
            "total_interest": format_currency(result.total_interest, symbol),
            "total_payment": format_currency(result.total_payment, symbol),
            "interest_ratio": f"%{result.interest_ratio}",
            "monthly_rate": format_percent(rate_percent),
        },
    )


def present_fixed(
    result: FixedPaymentResult, rate_percent: float, rate_mode: str, symbol: str
) -> FixedPaymentResponse:
    # Only an actual saving is worth showing
    savings = format_currency(result.savings, symbol) if result.savings and result.savings > 0 else "-"
    return FixedPaymentResponse(
        months=result.months,
        total_payment=result.total_payment,
        total_interest=result.total_interest,
        savings=result.savings,
        monthly_rate_percent=rate_percent,
        rate_mode=rate_mode,
        schedule=schedule_rows(result.schedule),
        display={
            "months": str(result.months),
            "total_interest": format_currency(result.total_interest, symbol),
            "total_payment": format_currency(result.total_payment, symbol),
            "savings": savings,
            "monthly_rate": format_percent(rate_percent),
        },
    )


def present_installment(result: InstallmentResult, symbol: str) -> InstallmentResponse:
    return InstallmentResponse(
        monthly_payment=result.monthly_payment,
        total_payment=result.total_payment,
        total_interest=result.total_interest,
        annual_rate=result.annual_rate,
        schedule=schedule_rows(result.schedule),
        display={
            "monthly_payment": format_currency(result.monthly_payment, symbol),
            "total_interest": format_currency(result.total_interest, symbol),
            "total_payment": format_currency(result.total_payment, symbol),
            "annual_rate": format_percent(result.annual_rate),
        },
    )


def present_cards(result: AggregateResult, symbol: str) -> CardsResponse:
    return CardsResponse(
        card_count=result.card_count,
        total_debt=result.total_debt,
        weighted_rate_percent=result.weighted_rate * 100,
        monthly_interest=result.monthly_interest,
        cards=[
            CardShareSchema(
                name=card.name,
                debt=card.debt,
                rate_percent=card.rate * 100,
                monthly_interest=card.monthly_interest,
                share=card.share,
            )
            for card in result.cards
        ],
        display={
            "card_count": str(result.card_count),
            "total_debt": format_currency(result.total_debt, symbol),
            "weighted_rate": format_percent(result.weighted_rate * 100),
            "monthly_interest": format_currency(result.monthly_interest, symbol),
        },
    )

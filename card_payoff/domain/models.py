"""Domain models - pure Python dataclasses for debts, payment policies and schedules"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

MINIMUM_PAYMENT_FLOOR = 50.0  # contractual minimum payment, currency units


@dataclass(frozen=True)
class DebtPosition:
    """Outstanding debt and its periodic (monthly) interest rate as a fraction"""

    principal: float
    rate: float  # 0.0375 for 3.75%


@dataclass(frozen=True)
class MinimumPercent:
    """Pay a percentage of the balance, never less than the floor"""

    percent: float
    floor: float = MINIMUM_PAYMENT_FLOOR


@dataclass(frozen=True)
class FixedAmount:
    """Pay the same amount every period"""

    amount: float


@dataclass(frozen=True)
class Annuity:
    """Retire the principal in exactly `periods` equal payments"""

    periods: int


PaymentPolicy = Union[MinimumPercent, FixedAmount, Annuity]


@dataclass(frozen=True)
class ScheduleRow:
    """Single period of an amortization schedule"""

    period: int
    payment: float
    interest: float
    principal: float
    remaining: float


@dataclass
class Schedule:
    """Output of the stepping loop"""

    rows: List[ScheduleRow]
    total_payment: float
    total_interest: float
    converged: bool

    @property
    def months(self) -> int:
        return len(self.rows)

    @property
    def remaining_balance(self) -> float:
        return self.rows[-1].remaining if self.rows else 0.0


@dataclass(frozen=True)
class PaymentSummary:
    """Totals of an earlier minimum-payment calculation, kept by the caller for comparison"""

    months: int
    total_payment: float
    total_interest: float


@dataclass
class MinimumPaymentResult:
    months: int
    total_payment: float
    total_interest: float
    interest_ratio: int  # whole percent of the principal
    schedule: List[ScheduleRow]

    def summary(self) -> PaymentSummary:
        return PaymentSummary(
            months=self.months,
            total_payment=self.total_payment,
            total_interest=self.total_interest,
        )


@dataclass
class FixedPaymentResult:
    months: int
    total_payment: float
    total_interest: float
    savings: Optional[float]  # None when there is no minimum-payment result to compare with
    schedule: List[ScheduleRow]


@dataclass
class InstallmentResult:
    monthly_payment: float
    total_payment: float
    total_interest: float
    annual_rate: float  # effective annual rate, percent
    schedule: List[ScheduleRow]


@dataclass(frozen=True)
class RateTier:
    """Debt band and the monthly rate (percent) applied to it"""

    upper_bound: float
    rate: float
    label: str
    inclusive: bool = False


@dataclass(frozen=True)
class CardEntry:
    """One credit card in a multi-card summary"""

    name: str
    debt: float
    rate: float


@dataclass(frozen=True)
class CardShare:
    name: str
    debt: float
    rate: float
    monthly_interest: float
    share: float  # percent of total debt


@dataclass
class AggregateResult:
    """Weighted summary across independent card balances"""

    card_count: int
    total_debt: float
    weighted_rate: float
    monthly_interest: float
    cards: List[CardShare] = field(default_factory=list)

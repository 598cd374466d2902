"""Pydantic schemas for API request/response validation"""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from card_payoff.utils.locale_format import parse_money, parse_rate


class RatedDebtRequest(BaseModel):
    """Debt plus the way its monthly rate is chosen"""

    debt: float = Field(..., gt=0, allow_inf_nan=False, description="Outstanding balance, '50.000' style strings accepted")
    rate_mode: Literal["manual", "auto"] = Field("manual", description="auto picks the tiered rate for the debt")
    monthly_rate_percent: Optional[float] = Field(None, gt=0, le=100, allow_inf_nan=False, description="Monthly rate, e.g. 3.75")

    @field_validator("debt", mode="before")
    @classmethod
    def _parse_debt(cls, value):
        return parse_money(value)

    @field_validator("monthly_rate_percent", mode="before")
    @classmethod
    def _parse_monthly_rate(cls, value):
        return None if value is None else parse_rate(value)

    @model_validator(mode="after")
    def _rate_required_when_manual(self):
        if self.rate_mode == "manual" and self.monthly_rate_percent is None:
            raise ValueError("monthly_rate_percent is required when rate_mode is 'manual'")
        return self


class PreviousMinimumSchema(BaseModel):
    """Totals returned by an earlier /v1/minimum call"""

    months: int = Field(..., ge=0)
    total_payment: float
    total_interest: float


class MinimumPaymentRequest(RatedDebtRequest):
    """Request body for POST /v1/minimum"""

    min_percent: float = Field(..., gt=0, le=100, allow_inf_nan=False, description="Minimum payment share of balance, percent")

    @field_validator("min_percent", mode="before")
    @classmethod
    def _parse_min_percent(cls, value):
        return parse_rate(value)


class FixedPaymentRequest(RatedDebtRequest):
    """Request body for POST /v1/fixed"""

    fixed_payment: float = Field(..., gt=0, allow_inf_nan=False)
    previous_minimum: Optional[PreviousMinimumSchema] = None

    @field_validator("fixed_payment", mode="before")
    @classmethod
    def _parse_fixed_payment(cls, value):
        return parse_money(value)


class CompareRequest(MinimumPaymentRequest):
    """Request body for POST /v1/compare"""

    fixed_payment: float = Field(..., gt=0, allow_inf_nan=False)

    @field_validator("fixed_payment", mode="before")
    @classmethod
    def _parse_fixed_payment(cls, value):
        return parse_money(value)


class InstallmentRequest(BaseModel):
    """Request body for POST /v1/installment"""

    amount: float = Field(..., gt=0, allow_inf_nan=False)
    months: int = Field(..., gt=0, le=600)
    monthly_rate_percent: float = Field(0.0, ge=0, le=100, allow_inf_nan=False)

    @field_validator("amount", mode="before")
    @classmethod
    def _parse_amount(cls, value):
        return parse_money(value)

    @field_validator("monthly_rate_percent", mode="before")
    @classmethod
    def _parse_monthly_rate(cls, value):
        return parse_rate(value)


class CardInput(BaseModel):
    """One card row; rows without positive debt are skipped, not rejected"""

    name: str = ""
    debt: float = Field(0.0, allow_inf_nan=False)
    rate_percent: float = Field(0.0, ge=0, le=100, allow_inf_nan=False)

    @field_validator("debt", mode="before")
    @classmethod
    def _parse_debt(cls, value):
        return parse_money(value)

    @field_validator("rate_percent", mode="before")
    @classmethod
    def _parse_rate(cls, value):
        return parse_rate(value)


class CardsRequest(BaseModel):
    """Request body for POST /v1/cards"""

    cards: List[CardInput] = Field(..., min_length=1)


class ScheduleRowSchema(BaseModel):
    """Single month of an amortization schedule"""

    period: int
    payment: float
    interest: float
    principal: float
    remaining: float


class MinimumPaymentResponse(BaseModel):
    """Response for POST /v1/minimum"""

    months: int
    total_payment: float
    total_interest: float
    interest_ratio: int
    monthly_rate_percent: float
    rate_mode: str
    schedule: List[ScheduleRowSchema]
    summary: PreviousMinimumSchema
    display: Dict[str, str]


class FixedPaymentResponse(BaseModel):
    """Response for POST /v1/fixed"""

    months: int
    total_payment: float
    total_interest: float
    savings: Optional[float] = None
    monthly_rate_percent: float
    rate_mode: str
    schedule: List[ScheduleRowSchema]
    display: Dict[str, str]


class CompareResponse(BaseModel):
    """Response for POST /v1/compare"""

    minimum: MinimumPaymentResponse
    fixed: FixedPaymentResponse
    savings: float
    months_saved: int


class InstallmentResponse(BaseModel):
    """Response for POST /v1/installment"""

    monthly_payment: float
    total_payment: float
    total_interest: float
    annual_rate: float
    schedule: List[ScheduleRowSchema]
    display: Dict[str, str]


class CardShareSchema(BaseModel):
    """Per-card row of the multi-card summary"""

    name: str
    debt: float
    rate_percent: float
    monthly_interest: float
    share: float


class CardsResponse(BaseModel):
    """Response for POST /v1/cards"""

    card_count: int
    total_debt: float
    weighted_rate_percent: float
    monthly_interest: float
    cards: List[CardShareSchema]
    display: Dict[str, str]


class RateTierSchema(BaseModel):
    """One band of the tiered rate table; open-ended bands have no upper bound"""

    upper_bound: Optional[float] = None
    inclusive: bool
    rate_percent: float
    label: str


class RatesResponse(BaseModel):
    """Response for GET /v1/rates"""

    tiers: List[RateTierSchema]


class ResolvedRateResponse(BaseModel):
    """Response for GET /v1/rates/resolve"""

    debt: float
    rate_percent: float
    tier: str

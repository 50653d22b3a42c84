"""Pydantic schemas for API request/response models."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class PayoffRequest(BaseModel):
    principal: int = Field(..., ge=0, description="Outstanding balance, whole currency units")
    annual_rate_percent: Decimal = Field(..., ge=0, description="e.g. 4.5 for 4.5%/year")
    monthly_payment: int = Field(..., description="Fixed payment per month")


class DebtInput(BaseModel):
    id: str = ""
    name: str = ""
    principal: int = Field(..., ge=0)
    original_principal: int = Field(0, ge=0)
    annual_rate_percent: Decimal = Field(..., ge=0)
    monthly_payment: int
    is_cleared: bool = False

    debt_type: Literal["card", "housing", "car", "education", "business", "personal", "other"] = "other"
    due_day: int | None = Field(None, ge=1, le=31)
    start_month: str = ""
    memo: str = ""


class PortfolioRequest(BaseModel):
    debts: list[DebtInput] = Field(default_factory=list)
    strategy: Literal["snowball", "avalanche"] = "snowball"


class ExtraPaymentRequest(BaseModel):
    debt: DebtInput
    extra: int = Field(..., ge=0, description="Added to the debt's monthly payment")


class SeriesRequest(BaseModel):
    debts: list[DebtInput] = Field(default_factory=list)
    horizon: int | None = Field(None, ge=1, description="Last period to sample")


# ---- Response schemas ----

class ScheduleEntryResponse(BaseModel):
    period_index: int
    interest_portion: int
    principal_portion: int
    remaining_balance: int


class PayoffResponse(BaseModel):
    status: str
    reason: str | None = None
    period_count: int | None = None
    total_interest: int | None = None
    total_paid: int | None = None
    schedule: list[ScheduleEntryResponse] = []


class TotalsResponse(BaseModel):
    total_principal: int
    total_monthly_payment: int
    total_interest: int
    total_paid: int
    non_convergent_ids: list[str]
    original_total: int
    reduced_amount: int
    progress_ratio: Decimal


class HorizonResponse(BaseModel):
    converges: bool
    period_count: int | None = None
    years: Decimal | None = None
    non_convergent_ids: list[str] = []


class RankedDebtResponse(BaseModel):
    rank: int
    id: str
    name: str
    principal: int
    annual_rate_percent: Decimal
    monthly_payment: int
    status: str
    period_count: int | None = None
    total_interest: int | None = None


class PortfolioSummaryResponse(BaseModel):
    strategy: str
    totals: TotalsResponse
    horizon: HorizonResponse
    ranking: list[RankedDebtResponse]


class ExtraPaymentResponse(BaseModel):
    available: bool
    extra: int
    periods_saved: int | None = None
    interest_saved: int | None = None
    baseline: PayoffResponse | None = None
    accelerated: PayoffResponse | None = None


class SeriesPointResponse(BaseModel):
    period: int
    cumulative_principal: int
    cumulative_interest: int
    total: int


class SeriesResponse(BaseModel):
    horizon_cap: int
    points: list[SeriesPointResponse]

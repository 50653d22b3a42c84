from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

from debt_ledger.models.debt import Debt


class PayoffStatus(Enum):
    CONVERGED = "converged"
    NON_CONVERGENT = "non_convergent"


class NonConvergenceReason(Enum):
    INTEREST_EXCEEDS_PAYMENT = "interest_exceeds_payment"
    PERIOD_CEILING = "period_ceiling"
    NO_PAYMENT = "no_payment"


@dataclass(frozen=True)
class ScheduleEntry:
    period_index: int  # 1-based
    interest_portion: int
    principal_portion: int
    remaining_balance: int


@dataclass(frozen=True)
class PayoffResult:
    """Outcome of one amortization run.

    A non-convergent result carries ``None`` for every amount so that the
    "never pays off" outcome cannot leak into arithmetic as a number.
    """

    status: PayoffStatus
    period_count: int | None = None
    total_interest: int | None = None
    total_paid: int | None = None
    schedule: tuple[ScheduleEntry, ...] = ()
    reason: NonConvergenceReason | None = None

    @property
    def converges(self) -> bool:
        return self.status is PayoffStatus.CONVERGED

    @classmethod
    def converged(
        cls, principal: int, total_interest: int, schedule: list[ScheduleEntry]
    ) -> "PayoffResult":
        return cls(
            status=PayoffStatus.CONVERGED,
            period_count=len(schedule),
            total_interest=total_interest,
            total_paid=principal + total_interest,
            schedule=tuple(schedule),
        )

    @classmethod
    def already_paid(cls) -> "PayoffResult":
        return cls(status=PayoffStatus.CONVERGED, period_count=0, total_interest=0, total_paid=0)

    @classmethod
    def non_convergent(cls, reason: NonConvergenceReason) -> "PayoffResult":
        return cls(status=PayoffStatus.NON_CONVERGENT, reason=reason)


@dataclass(frozen=True)
class PortfolioTotals:
    total_principal: int = 0
    total_monthly_payment: int = 0
    total_interest: int = 0  # Convergent debts only
    non_convergent_ids: tuple[str, ...] = ()

    # Progress across every debt, cleared ones included
    original_total: int = 0
    reduced_amount: int = 0

    @property
    def total_paid(self) -> int:
        return self.total_principal + self.total_interest

    @property
    def has_non_convergent(self) -> bool:
        return bool(self.non_convergent_ids)

    @property
    def progress_ratio(self) -> Decimal:
        if self.original_total <= 0:
            return Decimal("0")
        return Decimal(self.reduced_amount) / Decimal(self.original_total)


@dataclass(frozen=True)
class RankedDebt:
    rank: int  # 1-based
    debt: Debt
    result: PayoffResult


@dataclass(frozen=True)
class PayoffHorizon:
    """Longest payoff across a portfolio; one unpayable debt makes it unbounded."""

    converges: bool
    period_count: int | None
    non_convergent_ids: tuple[str, ...] = ()

    @property
    def years(self) -> Decimal | None:
        if self.period_count is None:
            return None
        return (Decimal(self.period_count) / 12).quantize(Decimal("0.1"), ROUND_HALF_UP)


@dataclass(frozen=True)
class ExtraPaymentComparison:
    extra: int
    baseline: PayoffResult
    accelerated: PayoffResult

    @property
    def periods_saved(self) -> int:
        return self.baseline.period_count - self.accelerated.period_count

    @property
    def interest_saved(self) -> int:
        return self.baseline.total_interest - self.accelerated.total_interest


@dataclass(frozen=True)
class SeriesPoint:
    period: int
    cumulative_principal: int = 0
    cumulative_interest: int = 0

    @property
    def total(self) -> int:
        return self.cumulative_principal + self.cumulative_interest


@dataclass(frozen=True)
class PortfolioSummary:
    totals: PortfolioTotals
    horizon: PayoffHorizon
    ranking: list[RankedDebt] = field(default_factory=list)

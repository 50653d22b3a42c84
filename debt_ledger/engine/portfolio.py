"""Portfolio simulation: totals, payoff order, horizon, what-if payments, chart series.

Every operation re-runs the amortization for the debts it is given; nothing
is cached between calls, so callers may change debts freely between requests.
Cleared debts are ignored throughout.
"""

import logging
from typing import Iterable

from debt_ledger.config import settings
from debt_ledger.engine.amortization import payoff_for_debt
from debt_ledger.models.debt import Debt, PayoffStrategy
from debt_ledger.models.results import (
    ExtraPaymentComparison,
    PayoffHorizon,
    PayoffResult,
    PortfolioSummary,
    PortfolioTotals,
    RankedDebt,
    SeriesPoint,
)

logger = logging.getLogger(__name__)


def active_debts(debts: Iterable[Debt]) -> list[Debt]:
    return [d for d in debts if not d.is_cleared]


def portfolio_totals(debts: Iterable[Debt]) -> PortfolioTotals:
    """Sum balances, payments and interest across uncleared debts.

    Non-convergent debts add nothing to ``total_interest``; their ids are
    reported in ``non_convergent_ids`` instead.
    """
    debts = list(debts)
    active = active_debts(debts)

    total_interest = 0
    non_convergent: list[str] = []
    for debt in active:
        result = payoff_for_debt(debt)
        if result.converges:
            total_interest += result.total_interest
        else:
            non_convergent.append(debt.id)

    total_principal = sum(d.principal for d in active)
    # Cleared debts still count toward the original size
    original_total = sum(max(d.original_principal, d.principal) for d in debts)

    return PortfolioTotals(
        total_principal=total_principal,
        total_monthly_payment=sum(d.monthly_payment for d in active),
        total_interest=total_interest,
        non_convergent_ids=tuple(non_convergent),
        original_total=original_total,
        reduced_amount=max(0, original_total - total_principal),
    )


def _priority_key(strategy: PayoffStrategy):
    if strategy is PayoffStrategy.SNOWBALL:
        return lambda d: d.principal
    if strategy is PayoffStrategy.AVALANCHE:
        return lambda d: (-d.annual_rate_percent, -d.principal)
    raise ValueError(f"Unknown payoff strategy: {strategy!r}")


def rank_debts(debts: Iterable[Debt], strategy: PayoffStrategy) -> list[RankedDebt]:
    """Presentation order for paying debts down.

    Snowball: smallest balance first (stable for equal balances).
    Avalanche: highest rate first, equal rates by larger balance.
    """
    ordered = sorted(active_debts(debts), key=_priority_key(strategy))
    return [
        RankedDebt(rank=i, debt=debt, result=payoff_for_debt(debt))
        for i, debt in enumerate(ordered, start=1)
    ]


def payoff_horizon(debts: Iterable[Debt]) -> PayoffHorizon:
    """Longest payoff under actual payments.

    If any single debt never pays off, neither does the portfolio, however
    quickly the rest clear.
    """
    longest = 0
    non_convergent: list[str] = []
    for debt in active_debts(debts):
        result = payoff_for_debt(debt)
        if not result.converges:
            non_convergent.append(debt.id)
        elif result.period_count > longest:
            longest = result.period_count

    if non_convergent:
        return PayoffHorizon(
            converges=False, period_count=None, non_convergent_ids=tuple(non_convergent)
        )
    return PayoffHorizon(converges=True, period_count=longest)


def compare_extra_payment(debt: Debt, extra: int) -> ExtraPaymentComparison | None:
    """Effect of paying ``extra`` more every month on one debt.

    Returns None when either run does not converge: there is nothing to
    compare, which is different from saving nothing.
    """
    if extra < 0:
        raise ValueError("Extra payment must be non-negative")

    baseline = payoff_for_debt(debt)
    accelerated = payoff_for_debt(debt, monthly_payment=debt.monthly_payment + extra)
    if not (baseline.converges and accelerated.converges):
        logger.debug("No extra-payment comparison for debt %r: non-convergent schedule", debt.id)
        return None

    return ExtraPaymentComparison(extra=extra, baseline=baseline, accelerated=accelerated)


def compare_extra_payment_for_strategy(
    debts: Iterable[Debt], strategy: PayoffStrategy, extra: int
) -> tuple[Debt, ExtraPaymentComparison | None] | None:
    """Apply ``extra`` to the debt the strategy ranks first."""
    ranking = rank_debts(debts, strategy)
    if not ranking:
        return None
    target = ranking[0].debt
    return target, compare_extra_payment(target, extra)


def sampling_step(horizon: int) -> int:
    """Coarser sampling for longer horizons keeps the chart readable."""
    if horizon <= settings.fine_step_limit:
        return 1
    if horizon <= settings.medium_step_limit:
        return 3
    return 6


def _cumulative(result: PayoffResult) -> tuple[list[int], list[int]]:
    principal, interest = [0], [0]
    for entry in result.schedule:
        principal.append(principal[-1] + entry.principal_portion)
        interest.append(interest[-1] + entry.interest_portion)
    return principal, interest


def portfolio_series(debts: Iterable[Debt], horizon: int | None = None) -> list[SeriesPoint]:
    """Cumulative principal and interest paid across the portfolio, sampled by period.

    Args:
        debts: Debts to aggregate; cleared ones are skipped
        horizon: Last period to sample. Defaults to the longest payoff among
            debts that do pay off (no points when none does). Always capped
            at ``settings.chart_horizon_cap``.

    Debts that never pay off have no schedule and add nothing.
    """
    active = active_debts(debts)
    if not active:
        return []

    results = [payoff_for_debt(d) for d in active]
    if horizon is None:
        horizon = max((r.period_count for r in results if r.converges), default=0)
    horizon = min(horizon, settings.chart_horizon_cap)
    if horizon <= 0:
        return []

    running = [_cumulative(r) for r in results]
    step = sampling_step(horizon)

    points: list[SeriesPoint] = []
    for period in range(step, horizon + 1, step):
        principal_paid = 0
        interest_paid = 0
        for principal, interest in running:
            idx = min(period, len(principal) - 1)
            principal_paid += principal[idx]
            interest_paid += interest[idx]
        points.append(SeriesPoint(
            period=period,
            cumulative_principal=principal_paid,
            cumulative_interest=interest_paid,
        ))
    return points


def summarize_portfolio(debts: Iterable[Debt], strategy: PayoffStrategy) -> PortfolioSummary:
    debts = list(debts)
    return PortfolioSummary(
        totals=portfolio_totals(debts),
        horizon=payoff_horizon(debts),
        ranking=rank_debts(debts, strategy),
    )

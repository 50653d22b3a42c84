"""Fixed-payment amortization: does a debt reach zero, and how.

Pure functions: integers and Decimal in, dataclass out. No I/O.

The monthly rate is a binary float (`annual / 100 / 12`) and each period's
interest is that float product rounded half away from zero. Exact decimal
arithmetic drifts by a unit on some tie-adjacent balances: 1,000,000 at 15%
paying 30,000 totals 301,706 interest this way and 301,707 in exact decimal.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from debt_ledger.config import settings
from debt_ledger.models.debt import Debt
from debt_ledger.models.results import NonConvergenceReason, PayoffResult, ScheduleEntry

logger = logging.getLogger(__name__)

WHOLE_UNIT = Decimal("1")
MONTHS_PER_YEAR = 12


def _round_unit(amount: Decimal) -> int:
    # Decimal(float) is exact, so ties are judged on the float's true value
    return int(amount.quantize(WHOLE_UNIT, ROUND_HALF_UP))


def monthly_rate(annual_rate_percent) -> float:
    """Periodic rate: 15 (%/year) -> 0.0125 per month."""
    return float(annual_rate_percent) / 100 / MONTHS_PER_YEAR


def periodic_interest(balance: int, annual_rate_percent) -> int:
    """Interest charged on ``balance`` for one month, in whole currency units.

    Rounded to the nearest unit, ties away from zero. The rounded amount is
    what compounds forward, so period counts depend on this rule.
    """
    return _round_unit(Decimal(balance * monthly_rate(annual_rate_percent)))


def _non_convergent(
    reason: NonConvergenceReason, principal: int, annual_rate_percent, monthly_payment: int
) -> PayoffResult:
    logger.debug(
        "Payoff does not converge (%s): principal=%s rate=%s%% payment=%s",
        reason.value, principal, annual_rate_percent, monthly_payment,
    )
    return PayoffResult.non_convergent(reason)


def _interest_free_payoff(principal: int, monthly_payment: int, max_periods: int) -> PayoffResult:
    periods = -(-principal // monthly_payment)
    if periods > max_periods:
        return _non_convergent(NonConvergenceReason.PERIOD_CEILING, principal, 0, monthly_payment)

    schedule: list[ScheduleEntry] = []
    balance = principal
    for period in range(1, periods + 1):
        principal_paid = min(monthly_payment, balance)
        balance = max(0, balance - principal_paid)
        schedule.append(ScheduleEntry(
            period_index=period,
            interest_portion=0,
            principal_portion=principal_paid,
            remaining_balance=balance,
        ))

    return PayoffResult.converged(principal, 0, schedule)


def compute_payoff(
    principal: int,
    annual_rate_percent,
    monthly_payment: int,
    max_periods: int | None = None,
) -> PayoffResult:
    """Simulate a fixed monthly payment against a compounding balance.

    Args:
        principal: Outstanding balance in whole currency units
        annual_rate_percent: Annual rate in percent (e.g. 4.5 for 4.5%)
        monthly_payment: Fixed amount paid every period
        max_periods: Iteration ceiling; defaults to ``settings.max_periods``.
            A schedule still open at the ceiling is reported as non-convergent.

    Never raises for bad input and never loops past the ceiling. Results are
    recomputed from the arguments on every call.
    """
    limit = settings.max_periods if max_periods is None else max_periods

    if principal <= 0:
        return PayoffResult.already_paid()
    if monthly_payment <= 0:
        return _non_convergent(
            NonConvergenceReason.NO_PAYMENT, principal, annual_rate_percent, monthly_payment
        )

    rate = monthly_rate(annual_rate_percent)
    if rate <= 0:
        return _interest_free_payoff(principal, monthly_payment, limit)

    schedule: list[ScheduleEntry] = []
    balance = principal
    total_interest = 0

    for period in range(1, limit + 1):
        interest = _round_unit(Decimal(balance * rate))
        if interest >= monthly_payment:
            # Payment never gets past the interest; the balance cannot shrink
            return _non_convergent(
                NonConvergenceReason.INTEREST_EXCEEDS_PAYMENT,
                principal, annual_rate_percent, monthly_payment,
            )

        principal_paid = min(monthly_payment - interest, balance)
        balance = max(0, balance - principal_paid)
        total_interest += interest

        schedule.append(ScheduleEntry(
            period_index=period,
            interest_portion=interest,
            principal_portion=principal_paid,
            remaining_balance=balance,
        ))

        if balance == 0:
            return PayoffResult.converged(principal, total_interest, schedule)

    return _non_convergent(
        NonConvergenceReason.PERIOD_CEILING, principal, annual_rate_percent, monthly_payment
    )


def payoff_for_debt(
    debt: Debt, monthly_payment: int | None = None, max_periods: int | None = None
) -> PayoffResult:
    """Run ``compute_payoff`` on a ``Debt``, optionally with a hypothetical payment."""
    payment = debt.monthly_payment if monthly_payment is None else monthly_payment
    return compute_payoff(debt.principal, debt.annual_rate_percent, payment, max_periods=max_periods)

"""Single-debt payoff routes."""

import logging

from fastapi import APIRouter

from debt_ledger.api.schemas import DebtInput, PayoffRequest, PayoffResponse, ScheduleEntryResponse
from debt_ledger.engine.amortization import compute_payoff
from debt_ledger.models.debt import Debt, DebtType
from debt_ledger.models.results import PayoffResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["payoff"])


def to_debt(d: DebtInput) -> Debt:
    """Convert a request debt into the engine's Debt."""
    return Debt(
        id=d.id,
        name=d.name,
        principal=d.principal,
        original_principal=d.original_principal,
        annual_rate_percent=d.annual_rate_percent,
        monthly_payment=d.monthly_payment,
        is_cleared=d.is_cleared,
        debt_type=DebtType(d.debt_type),
        due_day=d.due_day,
        start_month=d.start_month,
        memo=d.memo,
    )


def payoff_to_response(result: PayoffResult) -> PayoffResponse:
    return PayoffResponse(
        status=result.status.value,
        reason=result.reason.value if result.reason else None,
        period_count=result.period_count,
        total_interest=result.total_interest,
        total_paid=result.total_paid,
        schedule=[
            ScheduleEntryResponse(
                period_index=e.period_index,
                interest_portion=e.interest_portion,
                principal_portion=e.principal_portion,
                remaining_balance=e.remaining_balance,
            )
            for e in result.schedule
        ],
    )


@router.post("/payoff", response_model=PayoffResponse)
async def payoff(req: PayoffRequest):
    """Principal, rate and payment → payoff duration, interest and schedule."""
    result = compute_payoff(req.principal, req.annual_rate_percent, req.monthly_payment)
    if not result.converges:
        logger.info("Payoff request does not converge: %s", result.reason.value)
    return payoff_to_response(result)

"""Portfolio simulation routes: summary, extra-payment what-if, chart series."""

from fastapi import APIRouter, HTTPException

from debt_ledger.api.routes.payoff import payoff_to_response, to_debt
from debt_ledger.api.schemas import (
    ExtraPaymentRequest,
    ExtraPaymentResponse,
    HorizonResponse,
    PortfolioRequest,
    PortfolioSummaryResponse,
    RankedDebtResponse,
    SeriesPointResponse,
    SeriesRequest,
    SeriesResponse,
    TotalsResponse,
)
from debt_ledger.config import settings
from debt_ledger.engine.portfolio import compare_extra_payment, portfolio_series, summarize_portfolio
from debt_ledger.models.debt import PayoffStrategy

router = APIRouter(prefix="/api/v1/portfolio", tags=["portfolio"])


@router.post("/summary", response_model=PortfolioSummaryResponse)
async def summary(req: PortfolioRequest):
    """Totals, payoff horizon and the strategy's payoff order."""
    strategy = PayoffStrategy(req.strategy)
    result = summarize_portfolio([to_debt(d) for d in req.debts], strategy)

    t = result.totals
    totals = TotalsResponse(
        total_principal=t.total_principal,
        total_monthly_payment=t.total_monthly_payment,
        total_interest=t.total_interest,
        total_paid=t.total_paid,
        non_convergent_ids=list(t.non_convergent_ids),
        original_total=t.original_total,
        reduced_amount=t.reduced_amount,
        progress_ratio=t.progress_ratio,
    )

    h = result.horizon
    horizon = HorizonResponse(
        converges=h.converges,
        period_count=h.period_count,
        years=h.years,
        non_convergent_ids=list(h.non_convergent_ids),
    )

    ranking = [
        RankedDebtResponse(
            rank=r.rank,
            id=r.debt.id,
            name=r.debt.name,
            principal=r.debt.principal,
            annual_rate_percent=r.debt.annual_rate_percent,
            monthly_payment=r.debt.monthly_payment,
            status=r.result.status.value,
            period_count=r.result.period_count,
            total_interest=r.result.total_interest,
        )
        for r in result.ranking
    ]

    return PortfolioSummaryResponse(
        strategy=strategy.value, totals=totals, horizon=horizon, ranking=ranking
    )


@router.post("/extra-payment", response_model=ExtraPaymentResponse)
async def extra_payment(req: ExtraPaymentRequest):
    """What-if: pay ``extra`` more each month on one debt."""
    try:
        comparison = compare_extra_payment(to_debt(req.debt), req.extra)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if comparison is None:
        return ExtraPaymentResponse(available=False, extra=req.extra)

    return ExtraPaymentResponse(
        available=True,
        extra=comparison.extra,
        periods_saved=comparison.periods_saved,
        interest_saved=comparison.interest_saved,
        baseline=payoff_to_response(comparison.baseline),
        accelerated=payoff_to_response(comparison.accelerated),
    )


@router.post("/series", response_model=SeriesResponse)
async def series(req: SeriesRequest):
    """Cumulative principal/interest paid, sampled for a stacked chart."""
    points = portfolio_series([to_debt(d) for d in req.debts], horizon=req.horizon)
    return SeriesResponse(
        horizon_cap=settings.chart_horizon_cap,
        points=[
            SeriesPointResponse(
                period=p.period,
                cumulative_principal=p.cumulative_principal,
                cumulative_interest=p.cumulative_interest,
                total=p.total,
            )
            for p in points
        ],
    )

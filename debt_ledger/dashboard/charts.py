"""Figure builders for the dashboard. Pure functions of engine output."""

import plotly.graph_objects as go

from debt_ledger.models.results import PayoffResult, SeriesPoint

PRINCIPAL_COLOR = "#1a1a2e"
INTEREST_COLOR = "#e94560"


def _empty_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(text=message, showarrow=False, font={"size": 16, "color": "#888"})
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    return fig


def build_series_figure(points: list[SeriesPoint]) -> go.Figure:
    """Stacked bars: cumulative principal below, cumulative interest on top."""
    if not points or all(p.total == 0 for p in points):
        return _empty_figure("No payoff schedule to chart")

    periods = [p.period for p in points]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=periods,
        y=[p.cumulative_principal for p in points],
        name="Principal",
        marker_color=PRINCIPAL_COLOR,
    ))
    fig.add_trace(go.Bar(
        x=periods,
        y=[p.cumulative_interest for p in points],
        name="Interest",
        marker_color=INTEREST_COLOR,
    ))
    fig.update_layout(
        barmode="stack",
        title="Cumulative Repayment",
        xaxis_title="Month",
        yaxis_title="Paid to date",
        hovermode="x unified",
    )
    return fig


def build_balance_figure(result: PayoffResult, name: str = "") -> go.Figure:
    """Remaining balance after each payment for one debt."""
    if not result.converges:
        return _empty_figure("Payment never covers the interest: this debt does not pay off")
    if not result.schedule:
        return _empty_figure("Already paid off")

    fig = go.Figure(go.Scatter(
        x=[e.period_index for e in result.schedule],
        y=[e.remaining_balance for e in result.schedule],
        mode="lines",
        name=name or "Balance",
        line=dict(color=PRINCIPAL_COLOR, width=3),
    ))
    fig.update_layout(
        title=f"Remaining Balance: {name}" if name else "Remaining Balance",
        xaxis_title="Month",
        yaxis_title="Balance",
    )
    return fig

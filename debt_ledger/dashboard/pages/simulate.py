"""Simulation page: editable debts, payoff plan, extra-payment what-if and the stacked chart."""

import dash
from dash import html, dcc, dash_table, callback, Input, Output, State

from debt_ledger.dashboard.charts import build_series_figure
from debt_ledger.dashboard.inputs import (
    EXTRA_SLIDER_FLOOR,
    TABLE_COLUMNS,
    extra_slider_max,
    new_row,
    revise_rows,
    rows_to_debts,
    with_row_ids,
)
from debt_ledger.engine.portfolio import (
    compare_extra_payment_for_strategy,
    portfolio_series,
    summarize_portfolio,
)
from debt_ledger.models.debt import PayoffStrategy

dash.register_page(__name__, path="/", name="Simulate")

CARD_STYLE = {
    "backgroundColor": "white",
    "border": "1px solid #ddd",
    "borderRadius": "8px",
    "padding": "1rem 1.5rem",
    "marginBottom": "1rem",
}

WARN_COLOR = "#e94560"
GOOD_COLOR = "#2ecc71"

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

layout = html.Div([
    html.H2("Repayment Simulation"),

    dash_table.DataTable(
        id="debts-table",
        columns=TABLE_COLUMNS,
        editable=True,
        row_deletable=True,
        style_cell={"padding": "0.5rem"},
    ),
    html.Button("Add debt", id="add-debt-btn", n_clicks=0, style={"margin": "0.75rem 0"}),

    html.Div([
        html.Label("Strategy"),
        dcc.RadioItems(
            id="strategy-select",
            options=[
                {"label": " Snowball (smallest balance first)", "value": PayoffStrategy.SNOWBALL.value},
                {"label": " Avalanche (highest rate first)", "value": PayoffStrategy.AVALANCHE.value},
            ],
            value=PayoffStrategy.SNOWBALL.value,
            inline=True,
        ),
    ], style={"margin": "1rem 0"}),

    html.Div([
        html.Label("Extra monthly payment on the first debt in the plan"),
        dcc.Slider(id="extra-slider", min=0, max=EXTRA_SLIDER_FLOOR, step=1000, value=0,
                   tooltip={"placement": "bottom"}),
    ], style={"marginBottom": "1.5rem"}),

    html.Div(id="simulation-results"),
])


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


@callback(
    [Output("debts-table", "data"), Output("debts-store", "data")],
    [Input("debts-table", "data"), Input("add-debt-btn", "n_clicks")],
    State("debts-store", "data"),
)
def sync_table(rows, n_clicks, stored):
    if rows is None:
        # First render: fill the table from the session store
        rows = with_row_ids(stored)
    else:
        rows = with_row_ids(revise_rows(stored, rows))
    if dash.ctx.triggered_id == "add-debt-btn":
        rows.append(new_row())
    return rows, rows


@callback(
    Output("extra-slider", "max"),
    Input("debts-store", "data"),
)
def size_extra_slider(rows):
    return extra_slider_max(rows_to_debts(rows))


@callback(
    Output("simulation-results", "children"),
    [Input("debts-store", "data"), Input("strategy-select", "value"), Input("extra-slider", "value")],
)
def render_simulation(rows, strategy_value, extra):
    debts = rows_to_debts(rows)
    strategy = PayoffStrategy(strategy_value)
    summary = summarize_portfolio(debts, strategy)
    if not summary.ranking:
        return html.P("Add a debt to see the simulation.", style={"color": "#888"})

    return html.Div([
        _summary_card(summary),
        _plan_card(summary.ranking),
        _extra_card(debts, strategy, int(extra or 0)),
        dcc.Graph(figure=build_series_figure(portfolio_series(debts))),
    ])


# ---------------------------------------------------------------------------
# Cards
# ---------------------------------------------------------------------------


def _row(label, value, color=None):
    value_style = {"fontWeight": "bold"}
    if color:
        value_style["color"] = color
    return html.Div([
        html.Span(label, style={"color": "#666"}),
        html.Span(value, style=value_style),
    ], style={"display": "flex", "justifyContent": "space-between", "marginBottom": "0.5rem"})


def _summary_card(summary):
    horizon = summary.horizon
    totals = summary.totals
    if horizon.converges:
        horizon_text = f"{horizon.period_count} months ({horizon.years} years)"
    else:
        horizon_text = "Never pays off"

    return html.Div([
        html.H3("Summary"),
        _row("Longest payoff", horizon_text, GOOD_COLOR if horizon.converges else WARN_COLOR),
        _row("Total balance", f"{totals.total_principal:,}"),
        _row("Monthly payments", f"{totals.total_monthly_payment:,}"),
        _row("Total to pay", f"{totals.total_paid:,}", WARN_COLOR),
        _row("Repaid so far", f"{float(totals.progress_ratio) * 100:.1f}%"),
    ], style=CARD_STYLE)


def _plan_card(ranking):
    items = []
    for r in ranking:
        if r.result.converges:
            status = f"{r.result.period_count} months left"
        else:
            status = "never pays off"
        items.append(html.Li(
            f"{r.rank}. {r.debt.name}: {r.debt.principal:,} at {r.debt.annual_rate_percent}%: {status}"
        ))
    return html.Div([html.H3("Payoff Plan"), html.Ol(items, style={"listStyle": "none"})], style=CARD_STYLE)


def _extra_card(debts, strategy, extra):
    if extra == 0:
        return html.Div("Move the slider to see the effect of paying extra.", style=CARD_STYLE)

    target, comparison = compare_extra_payment_for_strategy(debts, strategy, extra)
    if comparison is None:
        return html.Div(
            f"No comparison available for {target.name}: a schedule does not pay off.",
            style=CARD_STYLE,
        )
    return html.Div([
        html.H3(f"Focus on {target.name}"),
        _row("Months saved", f"{comparison.periods_saved}", GOOD_COLOR),
        _row("Interest saved", f"{comparison.interest_saved:,}", GOOD_COLOR),
    ], style=CARD_STYLE)

"""Ledger page: payoff detail and balance curve for one debt, plus recording repayments."""

import dash
from dash import html, dcc, callback, Input, Output, State, no_update

from debt_ledger.dashboard.charts import build_balance_figure
from debt_ledger.dashboard.inputs import repay_row, rows_to_debts
from debt_ledger.engine.amortization import payoff_for_debt

dash.register_page(__name__, path="/ledger", name="Ledger")

CARD_STYLE = {
    "backgroundColor": "white",
    "border": "1px solid #ddd",
    "borderRadius": "8px",
    "padding": "1rem 1.5rem",
    "marginBottom": "1rem",
}

layout = html.Div([
    html.H2("Ledger"),
    dcc.Dropdown(id="ledger-debt-select", placeholder="Choose a debt", clearable=False),
    html.Div(id="ledger-detail", style={"marginTop": "1rem"}),
    html.Div([
        dcc.Input(id="repay-amount", type="number", min=1, placeholder="Repayment amount"),
        html.Button("Record repayment", id="repay-btn", n_clicks=0, style={"marginLeft": "0.5rem"}),
    ], style={"marginTop": "1rem"}),
])


@callback(
    [Output("ledger-debt-select", "options"), Output("ledger-debt-select", "value")],
    Input("debts-store", "data"),
    State("ledger-debt-select", "value"),
)
def list_debts(rows, selected):
    debts = rows_to_debts(rows)
    options = [{"label": d.name, "value": d.id} for d in debts]
    ids = {d.id for d in debts}
    if selected not in ids:
        selected = debts[0].id if debts else None
    return options, selected


@callback(
    Output("ledger-detail", "children"),
    [Input("ledger-debt-select", "value"), Input("debts-store", "data")],
)
def render_detail(debt_id, rows):
    debt = next((d for d in rows_to_debts(rows) if d.id == debt_id), None)
    if debt is None:
        return html.P("No debt selected.", style={"color": "#888"})

    result = payoff_for_debt(debt)
    if debt.is_cleared:
        status = "Cleared"
    elif result.converges:
        status = f"{result.period_count} months left"
    else:
        status = "Never pays off"

    interest = f"{result.total_interest:,}" if result.converges else "-"
    return html.Div([
        html.Div([
            html.H3(debt.name),
            html.P(f"Balance: {debt.principal:,}"),
            html.P(f"Rate: {debt.annual_rate_percent}% / year"),
            html.P(f"Monthly payment: {debt.monthly_payment:,}"),
            html.P(f"Status: {status}"),
            html.P(f"Total interest: {interest}"),
            html.P(f"Repaid: {float(debt.progress_ratio) * 100:.1f}%"),
        ], style=CARD_STYLE),
        dcc.Graph(figure=build_balance_figure(result, debt.name)),
    ])


@callback(
    Output("debts-store", "data", allow_duplicate=True),
    Input("repay-btn", "n_clicks"),
    [State("repay-amount", "value"), State("ledger-debt-select", "value"), State("debts-store", "data")],
    prevent_initial_call=True,
)
def record_repayment(n_clicks, amount, debt_id, rows):
    if not amount or int(amount) <= 0 or debt_id is None:
        return no_update
    return repay_row(rows, debt_id, int(amount))

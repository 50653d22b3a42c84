"""Plotly Dash application, multi-page layout."""

import logging

import dash
from dash import Dash, html, dcc, page_container

from debt_ledger.config import settings
from debt_ledger.dashboard.inputs import SAMPLE_ROWS

logging.basicConfig(level=settings.log_level)

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title="Debt Ledger",
)

app.layout = html.Div([
    # Global session store: the debt table shared by every page
    dcc.Store(id="debts-store", storage_type="session", data=SAMPLE_ROWS),

    # Navigation
    html.Nav([
        html.Div([
            html.H1("Debt Ledger", style={"fontSize": "1.5rem", "margin": "0"}),
            html.Div([
                dcc.Link("Simulate", href="/", style={"marginRight": "1rem", "color": "white"}),
                dcc.Link("Ledger", href="/ledger", style={"marginRight": "1rem", "color": "white"}),
            ]),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "maxWidth": "1200px",
            "margin": "0 auto",
            "padding": "0 1rem",
        }),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    # Page content
    html.Div(
        page_container,
        style={"maxWidth": "1200px", "margin": "0 auto", "padding": "0 1rem"},
    ),
])


if __name__ == "__main__":
    app.run(debug=settings.debug, port=8050)

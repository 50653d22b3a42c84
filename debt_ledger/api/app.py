"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from debt_ledger.api.routes import payoff, portfolio
from debt_ledger.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Debt Ledger",
    description="Debt repayment simulation engine",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(payoff.router)
app.include_router(portfolio.router)


@app.get("/health")
async def health():
    return {"status": "ok"}

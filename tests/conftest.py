"""Canonical debts used across engine, API and dashboard tests.

small_loan: 1,200 at 12%/yr (1%/month), 100/month -> 13 payments, 86 interest.
interest_free: 1,000 at 0%, 300/month -> 4 payments.
unpayable: 100,000 at 24%/yr -> 2,000 interest/month against a 1,500 payment.
"""

import pytest
from decimal import Decimal

from debt_ledger.models.debt import Debt, DebtType


@pytest.fixture
def small_loan() -> Debt:
    return Debt(
        id="small",
        name="Small loan",
        principal=1200,
        original_principal=1200,
        annual_rate_percent=Decimal("12"),
        monthly_payment=100,
        debt_type=DebtType.PERSONAL,
    )


@pytest.fixture
def interest_free() -> Debt:
    return Debt(
        id="free",
        name="Family loan",
        principal=1000,
        original_principal=1000,
        annual_rate_percent=Decimal("0"),
        monthly_payment=300,
    )


@pytest.fixture
def unpayable() -> Debt:
    return Debt(
        id="card",
        name="Card",
        principal=100000,
        original_principal=100000,
        annual_rate_percent=Decimal("24"),
        monthly_payment=1500,
        debt_type=DebtType.CARD,
    )


@pytest.fixture
def ordering_portfolio() -> list[Debt]:
    """Principals [500, 100, 2000] with rates [5, 20, 10]."""
    return [
        Debt(id="a", principal=500, original_principal=500,
             annual_rate_percent=Decimal("5"), monthly_payment=100),
        Debt(id="b", principal=100, original_principal=100,
             annual_rate_percent=Decimal("20"), monthly_payment=50),
        Debt(id="c", principal=2000, original_principal=2000,
             annual_rate_percent=Decimal("10"), monthly_payment=200),
    ]

"""Turn dashboard table rows into engine debts, and apply ledger edits back onto rows."""

import logging
from decimal import Decimal, InvalidOperation
from uuid import uuid4

from debt_ledger.engine.ledger import apply_repayment, revise_debt
from debt_ledger.models.debt import Debt

logger = logging.getLogger(__name__)

EXTRA_SLIDER_FLOOR = 100000

TABLE_COLUMNS = [
    {"name": "Name", "id": "name"},
    {"name": "Balance", "id": "principal", "type": "numeric"},
    {"name": "Original", "id": "original_principal", "type": "numeric"},
    {"name": "Rate (%/yr)", "id": "annual_rate_percent", "type": "numeric"},
    {"name": "Monthly", "id": "monthly_payment", "type": "numeric"},
]

SAMPLE_ROWS = [
    {"id": "sample-card", "name": "Card A", "principal": 500000, "original_principal": 800000,
     "annual_rate_percent": 15, "monthly_payment": 30000},
    {"id": "sample-car", "name": "Car loan", "principal": 1200000, "original_principal": 1500000,
     "annual_rate_percent": 4.5, "monthly_payment": 35000},
    {"id": "sample-personal", "name": "Personal", "principal": 100000, "original_principal": 100000,
     "annual_rate_percent": 0, "monthly_payment": 20000},
]


def new_row() -> dict:
    """Blank table row with an id that survives reordering and deletion."""
    return {"id": uuid4().hex, "name": "", "principal": None, "original_principal": None,
            "annual_rate_percent": None, "monthly_payment": None}


def with_row_ids(rows: list[dict] | None) -> list[dict]:
    return [row if row.get("id") else {**row, "id": uuid4().hex} for row in rows or []]


def _row_id(row: dict, position: int) -> str:
    return str(row.get("id") or f"row-{position}")


def _parse_row(row: dict, position: int) -> Debt | None:
    try:
        principal = int(row["principal"])
        rate = Decimal(str(row["annual_rate_percent"]))
        payment = int(row["monthly_payment"])
        original = int(row.get("original_principal") or principal)
    except (KeyError, TypeError, ValueError, InvalidOperation) as e:
        logger.warning("Skipping debt row %d: %s", position, e)
        return None
    if principal < 0 or rate < 0:
        logger.warning("Skipping debt row %d: negative balance or rate", position)
        return None

    return Debt(
        id=_row_id(row, position),
        name=row.get("name") or f"Debt {position}",
        principal=principal,
        original_principal=max(original, principal),
        annual_rate_percent=rate,
        monthly_payment=payment,
        is_cleared=principal == 0,
    )


def rows_to_debts(rows: list[dict] | None) -> list[Debt]:
    """Parse table rows; incomplete or malformed rows are skipped."""
    parsed = (_parse_row(row, i) for i, row in enumerate(rows or [], start=1))
    return [d for d in parsed if d is not None]


def repay_row(rows: list[dict] | None, debt_id: str, amount: int) -> list[dict]:
    """Record a repayment on the row with ``debt_id``; every other row passes through as is."""
    updated = []
    for i, row in enumerate(rows or [], start=1):
        debt = _parse_row(row, i) if _row_id(row, i) == debt_id else None
        if debt is not None:
            row = {**row, "principal": apply_repayment(debt, amount).principal}
        updated.append(row)
    return updated


def revise_rows(previous: list[dict] | None, rows: list[dict]) -> list[dict]:
    """Carry balance edits through ``revise_debt`` so a raised balance becomes the new original."""
    before = {}
    for i, row in enumerate(previous or [], start=1):
        debt = _parse_row(row, i)
        if debt is not None:
            before[debt.id] = debt

    revised = []
    for i, row in enumerate(rows, start=1):
        current = _parse_row(row, i)
        old = before.get(current.id) if current is not None else None
        if old is not None and old.principal != current.principal:
            debt = revise_debt(old, principal=current.principal)
            row = {**row, "original_principal": max(debt.original_principal, current.original_principal)}
        revised.append(row)
    return revised


def extra_slider_max(debts: list[Debt]) -> int:
    """Slider ceiling: twice the active monthly payments, never below the floor."""
    total_monthly = sum(d.monthly_payment for d in debts if not d.is_cleared)
    return max(EXTRA_SLIDER_FLOOR, total_monthly * 2)

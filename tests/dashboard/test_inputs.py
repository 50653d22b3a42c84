from dataclasses import replace
from decimal import Decimal

from debt_ledger.dashboard.inputs import (
    EXTRA_SLIDER_FLOOR,
    SAMPLE_ROWS,
    extra_slider_max,
    new_row,
    repay_row,
    revise_rows,
    rows_to_debts,
    with_row_ids,
)

DRAFT = {"id": "draft", "name": "Half typed", "principal": 3000,
         "annual_rate_percent": None, "monthly_payment": None}


def _loan(**overrides) -> dict:
    row = {"id": "loan", "name": "Loan", "principal": 5000, "original_principal": 5000,
           "annual_rate_percent": 12, "monthly_payment": 500}
    row.update(overrides)
    return row


class TestRowsToDebts:
    def test_parses_rows(self):
        debts = rows_to_debts([
            {"name": "Card", "principal": 5000, "original_principal": 8000,
             "annual_rate_percent": 15.5, "monthly_payment": 300},
        ])
        assert len(debts) == 1
        debt = debts[0]
        assert debt.id == "row-1"
        assert debt.principal == 5000
        assert debt.original_principal == 8000
        assert debt.annual_rate_percent == Decimal("15.5")
        assert not debt.is_cleared

    def test_skips_incomplete_rows(self):
        debts = rows_to_debts([
            {"name": "Blank", "principal": None, "annual_rate_percent": None, "monthly_payment": None},
            {"name": "Text", "principal": "abc", "annual_rate_percent": 5, "monthly_payment": 10},
            {"name": "Missing", "principal": 100},
            {"name": "Negative", "principal": -5, "annual_rate_percent": 5, "monthly_payment": 10},
            {"name": "Ok", "principal": 100, "annual_rate_percent": 0, "monthly_payment": 10},
        ])
        assert [d.name for d in debts] == ["Ok"]
        assert debts[0].id == "row-5"

    def test_defaults(self):
        debt = rows_to_debts([{"principal": 0, "annual_rate_percent": 3, "monthly_payment": 10}])[0]
        assert debt.name == "Debt 1"
        assert debt.is_cleared
        assert debt.original_principal == 0

    def test_none(self):
        assert rows_to_debts(None) == []

    def test_keeps_row_id(self):
        assert rows_to_debts([_loan()])[0].id == "loan"


class TestRowIds:
    def test_new_rows_get_distinct_ids(self):
        first, second = new_row(), new_row()
        assert first["id"] and second["id"]
        assert first["id"] != second["id"]
        assert first["principal"] is None

    def test_missing_ids_filled_existing_kept(self):
        rows = with_row_ids([_loan(), {"name": "No id", "principal": 10}])
        assert rows[0]["id"] == "loan"
        assert rows[1]["id"]
        assert rows[1]["name"] == "No id"

    def test_id_follows_row_after_deletion(self):
        rows = with_row_ids([_loan(id="first"), _loan(id="second", name="Second")])
        remaining = rows_to_debts(rows[1:])
        assert remaining[0].id == "second"

    def test_sample_rows_have_unique_ids(self):
        ids = [row["id"] for row in SAMPLE_ROWS]
        assert all(ids)
        assert len(set(ids)) == len(ids)

    def test_none(self):
        assert with_row_ids(None) == []


class TestRepayRow:
    def test_only_matching_row_changes(self):
        rows = repay_row([_loan(), DRAFT], "loan", 1000)
        assert len(rows) == 2
        assert rows[0]["principal"] == 4000
        assert rows[0]["original_principal"] == 5000
        assert rows[1] == DRAFT

    def test_incomplete_rows_survive_positional_ids(self):
        complete = _loan(id=None)
        incomplete = {"name": "", "principal": None, "annual_rate_percent": None, "monthly_payment": None}
        rows = repay_row([complete, incomplete], "row-1", 1000)
        assert len(rows) == 2
        assert rows[0]["principal"] == 4000
        assert rows[1] == incomplete

    def test_overpayment_clears(self):
        rows = repay_row([_loan()], "loan", 9000)
        assert rows[0]["principal"] == 0
        assert rows_to_debts(rows)[0].is_cleared

    def test_unknown_id_leaves_rows_alone(self):
        rows = [_loan(), DRAFT]
        assert repay_row(rows, "missing", 1000) == rows

    def test_input_rows_not_mutated(self):
        original = _loan()
        repay_row([original], "loan", 1000)
        assert original["principal"] == 5000


class TestReviseRows:
    def test_raised_balance_becomes_original(self):
        rows = revise_rows([_loan()], [_loan(principal=7000)])
        assert rows[0]["principal"] == 7000
        assert rows[0]["original_principal"] == 7000

    def test_lowered_balance_keeps_original(self):
        rows = revise_rows([_loan()], [_loan(principal=2000)])
        assert rows[0]["original_principal"] == 5000
        assert rows_to_debts(rows)[0].progress_ratio == Decimal("0.6")

    def test_unchanged_and_incomplete_rows_pass_through(self):
        previous = [_loan(), DRAFT]
        current = [_loan(), DRAFT, new_row()]
        assert revise_rows(previous, current) == current

    def test_new_row_without_history(self):
        rows = revise_rows([], [_loan(principal=9000, original_principal=None)])
        assert rows[0]["original_principal"] is None


class TestExtraSliderMax:
    def test_floor(self):
        assert extra_slider_max([]) == EXTRA_SLIDER_FLOOR == 100000

    def test_twice_monthly_payments(self):
        debts = rows_to_debts([_loan(monthly_payment=60000), _loan(id="b", monthly_payment=10000)])
        assert extra_slider_max(debts) == 140000

    def test_cleared_debts_ignored(self):
        debt = rows_to_debts([_loan(monthly_payment=80000)])[0]
        assert extra_slider_max([debt, replace(debt, id="x", is_cleared=True)]) == 160000

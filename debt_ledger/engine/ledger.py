"""Ledger transitions on debt records. Each returns a new Debt."""

from dataclasses import replace

from debt_ledger.models.debt import Debt


def apply_repayment(debt: Debt, amount: int) -> Debt:
    """Record a repayment; a debt paid down to zero is marked cleared."""
    if amount <= 0:
        raise ValueError("Repayment amount must be positive")
    remaining = debt.principal - amount
    if remaining <= 0:
        return replace(debt, principal=0, is_cleared=True)
    return replace(debt, principal=remaining)


def revise_debt(debt: Debt, **changes) -> Debt:
    """Edit a debt.

    Raising the principal also raises ``original_principal`` so progress is
    measured against the larger amount; any positive principal reopens a
    cleared debt.
    """
    revised = replace(debt, **changes)
    if "principal" in changes:
        revised = replace(
            revised,
            original_principal=max(debt.original_principal, revised.principal),
            is_cleared=revised.principal <= 0,
        )
    return revised

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class DebtType(Enum):
    CARD = "card"
    HOUSING = "housing"
    CAR = "car"
    EDUCATION = "education"
    BUSINESS = "business"
    PERSONAL = "personal"
    OTHER = "other"


@dataclass(frozen=True)
class Debt:
    principal: int  # Current outstanding balance, whole currency units
    annual_rate_percent: Decimal  # e.g. Decimal("4.5") for 4.5%/year
    monthly_payment: int
    original_principal: int = 0  # Principal at creation or last increase
    is_cleared: bool = False

    # Ledger details (never read by the calculator)
    id: str = ""
    name: str = ""
    debt_type: DebtType = DebtType.OTHER
    due_day: int | None = None  # Day of month, 1-31
    start_month: str = ""  # YYYY-MM
    memo: str = ""

    @property
    def progress_ratio(self) -> Decimal:
        """Share of the original principal already repaid, clamped to [0, 1]."""
        if self.original_principal <= 0:
            return Decimal("0")
        ratio = 1 - Decimal(self.principal) / Decimal(self.original_principal)
        return min(Decimal("1"), max(Decimal("0"), ratio))


class PayoffStrategy(Enum):
    SNOWBALL = "snowball"  # Smallest balance first
    AVALANCHE = "avalanche"  # Highest rate first

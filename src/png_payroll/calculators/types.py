"""Type definitions for the tax calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


class BaseTaxMode(str, Enum):
    """Where the engine takes each bracket's base tax from."""

    STORED = "stored"  # Trust the base_tax column as entered
    DERIVED = "derived"  # Recompute from lower brackets' widths and rates


@dataclass(frozen=True)
class TaxBracket:
    """Graduated tax bracket for one tax year."""

    bracket_number: int
    min_income: Decimal
    max_income: Decimal | None  # None = no upper limit
    tax_rate: Decimal  # Percentage, e.g. 22 for 22%
    base_tax: Decimal = Decimal("0")  # Tax owed on all income below min_income

    @property
    def is_unbounded(self) -> bool:
        return self.max_income is None


@dataclass(frozen=True)
class TaxCalculationResult:
    """Derived tax figures for an annual income. Never persisted."""

    annual_income: Decimal
    tax_bracket: int
    annual_tax: Decimal
    monthly_tax: Decimal
    fortnightly_tax: Decimal
    net_annual: Decimal
    net_monthly: Decimal
    net_fortnightly: Decimal
    effective_rate: Decimal

    def to_dict(self) -> dict[str, Any]:
        """Return JSON-friendly dict (amounts as strings)."""
        return {
            "annual_income": str(self.annual_income),
            "tax_bracket": self.tax_bracket,
            "annual_tax": str(self.annual_tax),
            "monthly_tax": str(self.monthly_tax),
            "fortnightly_tax": str(self.fortnightly_tax),
            "net_annual": str(self.net_annual),
            "net_monthly": str(self.net_monthly),
            "net_fortnightly": str(self.net_fortnightly),
            "effective_rate": str(self.effective_rate),
        }

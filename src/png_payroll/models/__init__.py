"""ORM models."""

from png_payroll.models.base import Base, TimestampMixin
from png_payroll.models.shift import Shift
from png_payroll.models.tax import TaxBracketRecord, TaxConfiguration

__all__ = [
    "Base",
    "Shift",
    "TaxBracketRecord",
    "TaxConfiguration",
    "TimestampMixin",
]

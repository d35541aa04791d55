"""Payroll services."""

from png_payroll.services.shift_service import ShiftNotFoundError, ShiftService
from png_payroll.services.tax_calculation_service import TaxCalculationService
from png_payroll.services.tax_table_service import BracketNotFoundError, TaxTableService

__all__ = [
    "BracketNotFoundError",
    "ShiftNotFoundError",
    "ShiftService",
    "TaxCalculationService",
    "TaxTableService",
]

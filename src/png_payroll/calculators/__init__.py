"""Payroll calculation engine."""

from png_payroll.calculators.errors import InvalidInputError, NoBracketsError, PayrollError
from png_payroll.calculators.shift_hours import calculate_working_hours, working_days
from png_payroll.calculators.tax_engine import (
    compute_tax,
    derive_base_taxes,
    example_tax,
    validate_bracket_table,
)
from png_payroll.calculators.types import BaseTaxMode, TaxBracket, TaxCalculationResult

__all__ = [
    "BaseTaxMode",
    "InvalidInputError",
    "NoBracketsError",
    "PayrollError",
    "TaxBracket",
    "TaxCalculationResult",
    "calculate_working_hours",
    "compute_tax",
    "derive_base_taxes",
    "example_tax",
    "validate_bracket_table",
    "working_days",
]

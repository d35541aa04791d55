"""Calculation errors."""

from __future__ import annotations

from typing import Any


class PayrollError(Exception):
    """Base class for payroll calculation errors."""

    code = "PAYROLL_ERROR"


class InvalidInputError(PayrollError):
    """Raised when a calculation input is missing, malformed, or out of range."""

    code = "INVALID_INPUT"

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class NoBracketsError(PayrollError):
    """Raised when no tax brackets are available for a calculation."""

    code = "NO_BRACKETS"

    def __init__(self, tax_year: int | None = None):
        self.tax_year = tax_year
        if tax_year is None:
            msg = "No tax brackets supplied"
        else:
            msg = f"No active tax brackets found for tax year {tax_year}"
        super().__init__(msg)

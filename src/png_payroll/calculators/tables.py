"""Published PNG salary and wages tax tables and bracket payload parsing."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable, Mapping

from png_payroll.calculators.errors import InvalidInputError
from png_payroll.calculators.types import TaxBracket

D = Decimal

# Lower bounds start one toea above the previous maximum, as published.
PNG_2025_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(1, D("0.00"), D("12500.00"), D("0.00"), D("0.00")),
    TaxBracket(2, D("12500.01"), D("20000.00"), D("22.00"), D("0.00")),
    TaxBracket(3, D("20000.01"), D("33000.00"), D("30.00"), D("1650.00")),
    TaxBracket(4, D("33000.01"), D("70000.00"), D("35.00"), D("5550.00")),
    TaxBracket(5, D("70000.01"), D("250000.00"), D("40.00"), D("18500.00")),
    TaxBracket(6, D("250000.01"), None, D("42.00"), D("90500.00")),
)

BUILTIN_TABLES: dict[int, tuple[TaxBracket, ...]] = {
    2025: PNG_2025_BRACKETS,
}

# key -> (value, description, data_type)
DEFAULT_TAX_CONFIGURATION: dict[str, tuple[str, str, str]] = {
    "current_tax_year": ("2025", "Current tax year", "number"),
    "tax_calculation_method": ("graduated", "Tax calculation method", "text"),
    "tax_rounding_method": ("nearest", "Tax rounding method", "text"),
    "minimum_taxable_income": (
        "12500.00",
        "Minimum annual income before tax applies",
        "number",
    ),
}


def _decimal(row: Mapping[str, Any], key: str, default: Any = None) -> Decimal | None:
    value = row.get(key, default)
    if value is None:
        return None
    try:
        return Decimal(str(value))
    except ArithmeticError:
        raise InvalidInputError(key, value, "must be a number") from None


def bracket_from_payload(row: Mapping[str, Any]) -> TaxBracket:
    """Build a bracket from a JSON-style row (tax_brackets column names)."""
    try:
        number = int(row["bracket_number"])
        min_income = _decimal(row, "min_income")
        tax_rate = _decimal(row, "tax_rate")
    except KeyError as exc:
        raise InvalidInputError(str(exc.args[0]), None, "a value is required") from None
    except (TypeError, ValueError):
        raise InvalidInputError("bracket_number", row.get("bracket_number"), "must be an integer") from None
    if min_income is None or tax_rate is None:
        raise InvalidInputError("bracket", dict(row), "min_income and tax_rate are required")

    return TaxBracket(
        bracket_number=number,
        min_income=min_income,
        max_income=_decimal(row, "max_income"),
        tax_rate=tax_rate,
        base_tax=_decimal(row, "base_tax", 0) or D("0"),
    )


def brackets_from_payload(rows: Iterable[Mapping[str, Any]]) -> list[TaxBracket]:
    """Parse rows, skipping any explicitly marked inactive."""
    brackets = []
    for row in rows:
        if not isinstance(row, Mapping):
            raise InvalidInputError("bracket", row, "each bracket must be an object")
        if row.get("is_active", True):
            brackets.append(bracket_from_payload(row))
    return brackets


def load_brackets_file(path: str | Path) -> list[TaxBracket]:
    """Load brackets from a JSON file holding a list of row objects."""
    try:
        with open(path, encoding="utf-8") as fh:
            payload = json.load(fh)
    except OSError as exc:
        raise InvalidInputError("brackets", str(path), exc.strerror or "cannot be read") from None
    except json.JSONDecodeError as exc:
        raise InvalidInputError("brackets", str(path), f"is not valid JSON ({exc.msg})") from None

    if isinstance(payload, Mapping):
        payload = payload.get("brackets", [])
    if not isinstance(payload, list):
        raise InvalidInputError("brackets", str(path), "expected a list of bracket objects")
    return brackets_from_payload(payload)

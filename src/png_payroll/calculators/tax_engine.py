"""Graduated income tax calculation over a bracket table.

Brackets are stored the way the tax office publishes them: each row carries
its bounds, its marginal rate as a percentage, and ``base_tax``, the tax owed
on all income below the bracket. The engine finds the bracket containing the
income and adds the in-bracket tax to that bracket's base, so it never sums
lower brackets itself unless asked to (``BaseTaxMode.DERIVED``).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import replace
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

from png_payroll.calculators.errors import InvalidInputError, NoBracketsError
from png_payroll.calculators.types import BaseTaxMode, TaxBracket, TaxCalculationResult

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")
MONTHS_PER_YEAR = Decimal("12")
FORTNIGHTS_PER_YEAR = Decimal("26")

# Illustrative income above the lower bound of the top bracket
EXAMPLE_TOP_BRACKET_SPAN = Decimal("50000")


def to_amount(value: Any, field: str = "annual_income") -> Decimal:
    """Coerce a user-supplied amount to a finite, non-negative Decimal."""
    if value is None:
        raise InvalidInputError(field, value, "a value is required")
    if isinstance(value, bool):
        raise InvalidInputError(field, value, "must be a number")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidInputError(field, value, "must be a number") from None
    else:
        raise InvalidInputError(field, value, "must be a number")

    if not amount.is_finite():
        raise InvalidInputError(field, value, "must be a finite number")
    if amount < 0:
        raise InvalidInputError(field, value, "must not be negative")
    return amount


def compute_tax(
    annual_income: Any,
    brackets: Iterable[TaxBracket],
    *,
    base_tax_mode: BaseTaxMode | str = BaseTaxMode.STORED,
) -> TaxCalculationResult:
    """Calculate annual tax and the derived period and net figures.

    Args:
        annual_income: Gross annual income, >= 0.
        brackets: Active brackets for a single tax year.
        base_tax_mode: Use each bracket's stored base tax, or derive it from
            the lower brackets first.

    Raises:
        InvalidInputError: If the income is missing, non-numeric or negative,
            or the base tax mode is unknown.
        NoBracketsError: If the bracket table is empty or missing.
    """
    income = to_amount(annual_income)
    try:
        mode = BaseTaxMode(base_tax_mode)
    except ValueError:
        raise InvalidInputError("base_tax_mode", base_tax_mode, "must be 'stored' or 'derived'") from None

    if brackets is None:
        raise NoBracketsError()
    ordered = sorted(brackets, key=lambda b: b.min_income)
    if not ordered:
        raise NoBracketsError()
    if mode is BaseTaxMode.DERIVED:
        ordered = derive_base_taxes(ordered)

    total_tax = ZERO
    applicable_bracket = ordered[0].bracket_number

    for bracket in ordered:
        if income <= bracket.min_income:
            continue

        if not bracket.is_unbounded and income > bracket.max_income:
            taxable_in_bracket = bracket.max_income - bracket.min_income
        else:
            taxable_in_bracket = income - bracket.min_income

        tax_in_bracket = taxable_in_bracket * bracket.tax_rate / HUNDRED
        # base_tax already covers every lower bracket
        total_tax = bracket.base_tax + tax_in_bracket
        applicable_bracket = bracket.bracket_number

        if bracket.is_unbounded or income <= bracket.max_income:
            break

    net_annual = income - total_tax
    effective_rate = (total_tax / income) * HUNDRED if income else ZERO

    return TaxCalculationResult(
        annual_income=income,
        tax_bracket=applicable_bracket,
        annual_tax=total_tax,
        monthly_tax=total_tax / MONTHS_PER_YEAR,
        fortnightly_tax=total_tax / FORTNIGHTS_PER_YEAR,
        net_annual=net_annual,
        net_monthly=net_annual / MONTHS_PER_YEAR,
        net_fortnightly=net_annual / FORTNIGHTS_PER_YEAR,
        effective_rate=effective_rate,
    )


def derive_base_taxes(brackets: Iterable[TaxBracket]) -> list[TaxBracket]:
    """Return brackets with base_tax recomputed from the brackets below.

    Each bracket's width is measured from the previous bracket's upper bound,
    so a table whose lower bounds start one cent above the previous maximum
    derives the same bases as a table with shared boundaries.
    """
    derived: list[TaxBracket] = []
    cumulative = ZERO
    lower_edge: Decimal | None = None

    for bracket in sorted(brackets, key=lambda b: b.min_income):
        derived.append(replace(bracket, base_tax=cumulative))
        if bracket.is_unbounded:
            continue
        start = bracket.min_income if lower_edge is None else lower_edge
        cumulative += (bracket.max_income - start) * bracket.tax_rate / HUNDRED
        lower_edge = bracket.max_income

    return derived


def validate_bracket_table(brackets: Iterable[TaxBracket]) -> list[str]:
    """Check a year's bracket table for consistency.

    Returns a list of problems; an empty list means the table is usable.
    """
    ordered = sorted(brackets, key=lambda b: b.min_income)
    if not ordered:
        return ["No tax brackets defined"]

    issues: list[str] = []

    counts = Counter(b.bracket_number for b in ordered)
    for number, count in sorted(counts.items()):
        if count > 1:
            issues.append(f"Bracket number {number} is used {count} times")

    numbers = [b.bracket_number for b in ordered]
    if numbers != sorted(numbers):
        issues.append("Bracket numbers are not in ascending income order")

    for bracket in ordered:
        n = bracket.bracket_number
        if bracket.min_income < 0:
            issues.append(f"Bracket {n} has a negative minimum income")
        if not ZERO <= bracket.tax_rate <= HUNDRED:
            issues.append(f"Bracket {n} tax rate {bracket.tax_rate} is outside 0-100")
        if not bracket.is_unbounded and bracket.max_income <= bracket.min_income:
            issues.append(f"Bracket {n} maximum income is not above its minimum")

    for prev, cur in zip(ordered, ordered[1:]):
        if prev.is_unbounded:
            issues.append(
                f"Bracket {prev.bracket_number} has no upper limit but is not the highest bracket"
            )
            continue
        gap = cur.min_income - prev.max_income
        if gap < 0:
            issues.append(
                f"Bracket {cur.bracket_number} overlaps bracket {prev.bracket_number}"
            )
        elif gap > CENT:
            issues.append(
                f"Gap between bracket {prev.bracket_number} and bracket {cur.bracket_number}"
            )

    unbounded = sum(1 for b in ordered if b.is_unbounded)
    if unbounded == 0:
        issues.append("No bracket without an upper limit")
    elif unbounded > 1:
        issues.append(f"{unbounded} brackets have no upper limit")

    for stored, derived in zip(ordered, derive_base_taxes(ordered)):
        if abs(stored.base_tax - derived.base_tax) > CENT:
            issues.append(
                f"Bracket {stored.bracket_number} base tax {stored.base_tax} does not match "
                f"{derived.base_tax.quantize(CENT)} derived from lower brackets"
            )

    return issues


def example_tax(bracket: TaxBracket) -> tuple[Decimal, Decimal]:
    """Illustrative (income, tax) pair shown beside a bracket in the tax table."""
    if not bracket.is_unbounded:
        income = bracket.max_income
    else:
        income = bracket.min_income + EXAMPLE_TOP_BRACKET_SPAN
    tax = bracket.base_tax + (income - bracket.min_income) * bracket.tax_rate / HUNDRED
    return income, tax

"""Tax calculation service - runs the tax engine against stored tables."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from png_payroll.calculators import BaseTaxMode, TaxCalculationResult, compute_tax
from png_payroll.calculators.tax_engine import to_amount
from png_payroll.config import get_settings
from png_payroll.services.tax_table_service import TaxTableService

logger = logging.getLogger(__name__)


class TaxCalculationService:
    """Calculates salary and wages tax for an annual income."""

    def __init__(
        self,
        session: AsyncSession,
        base_tax_mode: BaseTaxMode | None = None,
    ):
        self.session = session
        self.tables = TaxTableService(session)
        self.base_tax_mode = base_tax_mode or get_settings().base_tax_mode

    async def calculate(
        self,
        annual_income: Any,
        tax_year: int | None = None,
    ) -> TaxCalculationResult:
        """Calculate tax using the active brackets for a tax year.

        Args:
            annual_income: Gross annual income
            tax_year: Tax year; defaults to the configured current year

        Raises:
            InvalidInputError: If the income is invalid
            NoBracketsError: If the year has no active brackets
        """
        # Reject bad input before touching the database
        income = to_amount(annual_income)
        year = tax_year if tax_year is not None else await self.tables.current_tax_year()

        brackets = await self.tables.load_brackets(year)
        result = compute_tax(income, brackets, base_tax_mode=self.base_tax_mode)

        logger.debug(
            "Calculated tax for year %s: bracket %s, annual tax %s",
            year,
            result.tax_bracket,
            result.annual_tax,
        )
        return result

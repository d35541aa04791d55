"""Tax table service - loads and maintains graduated tax brackets."""

from __future__ import annotations

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from png_payroll.calculators import NoBracketsError, PayrollError, TaxBracket
from png_payroll.config import get_settings
from png_payroll.models import TaxBracketRecord, TaxConfiguration

logger = logging.getLogger(__name__)


class BracketNotFoundError(PayrollError):
    """Raised when a tax bracket row does not exist."""

    code = "BRACKET_NOT_FOUND"

    def __init__(self, bracket_id: UUID):
        self.bracket_id = bracket_id
        super().__init__(f"Tax bracket {bracket_id} not found")


class TaxTableService:
    """Service for reading and maintaining the png_tax_brackets table.

    Operations:
    - list_brackets: All rows for a year, for the tax tables screen
    - load_brackets: Active rows for a year as engine brackets
    - toggle_active: Activate/deactivate a bracket
    - upsert_bracket: Insert or update by (tax_year, bracket_number)
    - current_tax_year: Configured tax year
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_brackets(
        self,
        tax_year: int,
        active_only: bool = False,
    ) -> list[TaxBracketRecord]:
        """List bracket rows for a tax year ordered by bracket number."""
        query = select(TaxBracketRecord).where(TaxBracketRecord.tax_year == tax_year)
        if active_only:
            query = query.where(TaxBracketRecord.is_active.is_(True))
        query = query.order_by(TaxBracketRecord.bracket_number)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def load_brackets(self, tax_year: int) -> list[TaxBracket]:
        """Load active brackets for a tax year.

        Raises:
            NoBracketsError: If the year has no active brackets
        """
        records = await self.list_brackets(tax_year, active_only=True)
        if not records:
            logger.warning("No active tax brackets for tax year %s", tax_year)
            raise NoBracketsError(tax_year)

        logger.debug("Loaded %d tax brackets for tax year %s", len(records), tax_year)
        return [record.to_bracket() for record in records]

    async def get_bracket(self, bracket_id: UUID) -> TaxBracketRecord:
        """Get a bracket row by id."""
        record = await self.session.get(TaxBracketRecord, bracket_id)
        if record is None:
            raise BracketNotFoundError(bracket_id)
        return record

    async def toggle_active(self, bracket_id: UUID) -> TaxBracketRecord:
        """Flip a bracket's is_active flag."""
        record = await self.get_bracket(bracket_id)
        record.is_active = not record.is_active
        await self.session.flush()

        logger.info(
            "Tax bracket %s (year %s, bracket %s) %s",
            record.id,
            record.tax_year,
            record.bracket_number,
            "activated" if record.is_active else "deactivated",
        )
        return record

    async def upsert_bracket(
        self,
        tax_year: int,
        bracket_number: int,
        min_income: Decimal,
        max_income: Decimal | None,
        tax_rate: Decimal,
        base_tax: Decimal = Decimal("0"),
        is_active: bool = True,
    ) -> TaxBracketRecord:
        """Insert a bracket, or update the existing row for (tax_year, bracket_number)."""
        result = await self.session.execute(
            select(TaxBracketRecord).where(
                TaxBracketRecord.tax_year == tax_year,
                TaxBracketRecord.bracket_number == bracket_number,
            )
        )
        record = result.scalar_one_or_none()

        if record is None:
            record = TaxBracketRecord(tax_year=tax_year, bracket_number=bracket_number)
            self.session.add(record)

        record.min_income = min_income
        record.max_income = max_income
        record.tax_rate = tax_rate
        record.base_tax = base_tax
        record.is_active = is_active

        await self.session.flush()
        return record

    async def current_tax_year(self) -> int:
        """Configured current tax year, falling back to settings."""
        config = await self.session.get(TaxConfiguration, "current_tax_year")
        if config is not None:
            try:
                return int(config.config_value)
            except ValueError:
                logger.warning(
                    "Ignoring non-numeric current_tax_year %r", config.config_value
                )
        return get_settings().current_tax_year

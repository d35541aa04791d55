"""Seed data for tax tables and tax configuration."""

from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from png_payroll.calculators import TaxBracket, validate_bracket_table
from png_payroll.calculators.tables import DEFAULT_TAX_CONFIGURATION, PNG_2025_BRACKETS
from png_payroll.models import TaxConfiguration
from png_payroll.services import TaxTableService

logger = logging.getLogger(__name__)


async def seed_tax_brackets(
    session: AsyncSession,
    tax_year: int = 2025,
    brackets: Iterable[TaxBracket] = PNG_2025_BRACKETS,
) -> int:
    """Upsert a year's brackets. Returns the number of rows written."""
    table = list(brackets)
    for issue in validate_bracket_table(table):
        logger.warning("Tax year %s: %s", tax_year, issue)

    service = TaxTableService(session)
    for bracket in table:
        await service.upsert_bracket(
            tax_year=tax_year,
            bracket_number=bracket.bracket_number,
            min_income=bracket.min_income,
            max_income=bracket.max_income,
            tax_rate=bracket.tax_rate,
            base_tax=bracket.base_tax,
        )

    logger.info("Seeded %d tax brackets for %s", len(table), tax_year)
    return len(table)


async def seed_tax_configuration(session: AsyncSession) -> int:
    """Insert any missing tax configuration keys. Existing values are kept."""
    created = 0
    for key, (value, description, data_type) in DEFAULT_TAX_CONFIGURATION.items():
        if await session.get(TaxConfiguration, key) is not None:
            continue
        session.add(
            TaxConfiguration(
                config_key=key,
                config_value=value,
                description=description,
                data_type=data_type,
            )
        )
        created += 1

    await session.flush()
    logger.info("Seeded %d tax configuration settings", created)
    return created

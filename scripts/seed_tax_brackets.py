"""Seed script for PNG tax brackets and tax configuration.

Run with:
    python scripts/seed_tax_brackets.py

This upserts the 2025 graduated tax table and the default tax settings.
"""

from __future__ import annotations

import asyncio
import logging

from png_payroll.database import get_session
from png_payroll.seed import seed_tax_brackets, seed_tax_configuration


async def main() -> None:
    """Run seed script."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    print("Seeding PNG tax tables...")

    async with get_session() as session:
        brackets = await seed_tax_brackets(session)
        settings = await seed_tax_configuration(session)

    print(f"\nDone! {brackets} tax brackets and {settings} new settings seeded.")


if __name__ == "__main__":
    asyncio.run(main())

#!/usr/bin/env python
"""Create the payroll tables in the configured database.

Usage:
    python scripts/create_tables.py
    python scripts/create_tables.py --database-url postgresql+asyncpg://...
    python scripts/create_tables.py --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.schema import CreateTable

from png_payroll.config import get_settings
from png_payroll.models import Base


async def create_tables(database_url: str) -> None:
    engine = create_async_engine(database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await engine.dispose()


def main() -> int:
    parser = argparse.ArgumentParser(description="Create payroll tables")
    parser.add_argument(
        "--database-url",
        type=str,
        help="Async database URL (default: $DATABASE_URL)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the DDL without executing it",
    )
    args = parser.parse_args()

    if args.dry_run:
        for table in Base.metadata.sorted_tables:
            print(f"{CreateTable(table)};")
        return 0

    url = args.database_url or get_settings().database_url
    asyncio.run(create_tables(url))
    print(f"Created {len(Base.metadata.tables)} tables.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

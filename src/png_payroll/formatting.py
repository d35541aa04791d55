"""Display formatting for Kina amounts and rates."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def format_kina(amount: Decimal | int | float, places: int = 2) -> str:
    """Format an amount as Kina, e.g. ``K50,000.00``."""
    value = Decimal(str(amount))
    quantum = Decimal(1).scaleb(-places)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}K{abs(rounded):,.{places}f}"


def format_percent(rate: Decimal | int | float, places: int = 2) -> str:
    """Format a percentage value, e.g. ``23.00%``."""
    value = Decimal(str(rate))
    quantum = Decimal(1).scaleb(-places)
    return f"{value.quantize(quantum, rounding=ROUND_HALF_UP):.{places}f}%"

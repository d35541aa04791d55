"""Shift working-hours calculation."""

from __future__ import annotations

from datetime import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from png_payroll.calculators.errors import InvalidInputError

MINUTES_PER_DAY = 24 * 60

WEEKDAYS: tuple[tuple[str, str], ...] = (
    ("monday", "Mon"),
    ("tuesday", "Tue"),
    ("wednesday", "Wed"),
    ("thursday", "Thu"),
    ("friday", "Fri"),
    ("saturday", "Sat"),
    ("sunday", "Sun"),
)


def _minutes_since_midnight(value: str | time, field: str) -> int:
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    try:
        hour_str, minute_str = value.strip().split(":")[:2]
        hour, minute = int(hour_str), int(minute_str)
    except (AttributeError, ValueError):
        raise InvalidInputError(field, value, "expected HH:MM") from None
    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise InvalidInputError(field, value, "expected HH:MM")
    return hour * 60 + minute


def calculate_working_hours(
    start_time: str | time,
    end_time: str | time,
    break_minutes: int = 0,
) -> Decimal:
    """Paid hours in a shift, rounded to one decimal place.

    An end time at or before the start time means the shift runs past
    midnight.
    """
    start = _minutes_since_midnight(start_time, "start_time")
    end = _minutes_since_midnight(end_time, "end_time")
    if break_minutes is None or break_minutes < 0:
        raise InvalidInputError("break_minutes", break_minutes, "must not be negative")

    if end <= start:
        end += MINUTES_PER_DAY

    working_minutes = end - start - break_minutes
    if working_minutes < 0:
        raise InvalidInputError("break_minutes", break_minutes, "longer than the shift")

    hours = Decimal(working_minutes) / Decimal(60)
    return hours.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def working_days(shift: Any) -> list[str]:
    """Short day names for the weekdays a shift is scheduled on."""
    return [label for attr, label in WEEKDAYS if getattr(shift, attr, False)]

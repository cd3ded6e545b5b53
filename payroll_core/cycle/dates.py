"""Calendar helpers shared by the cycle resolver and working-day counter."""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import AbstractSet, Iterator

from payroll_core.common.constants import MONTH_NAMES


def _check_month_index(month_index0: int) -> None:
    if not 0 <= month_index0 <= 11:
        raise ValueError(f"month index must be 0..11, got {month_index0}")


def last_day_of_month(year: int, month_index0: int) -> date:
    """Return the last calendar day of a month (``month_index0``: 0 = January)."""
    _check_month_index(month_index0)
    month = month_index0 + 1
    return date(year, month, calendar.monthrange(year, month)[1])


def month_name(month_index0: int) -> str:
    _check_month_index(month_index0)
    return MONTH_NAMES[month_index0]


def is_weekend(day: date, weekly_off_days: AbstractSet[int]) -> bool:
    """True when the weekday of *day* (0 = Monday) is a weekly off."""
    return day.weekday() in weekly_off_days


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every date from *start* to *end* inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)

"""Working-day counting over an inclusive date range."""

from __future__ import annotations

from datetime import date
from typing import AbstractSet, Iterable, Optional, Union

from payroll_core.common.constants import DEFAULT_WEEKLY_OFFS
from payroll_core.cycle.dates import is_weekend, iter_dates
from payroll_core.cycle.schemas import Holiday

HolidayLike = Union[date, Holiday]


def holiday_dates(
    holidays: Iterable[HolidayLike],
    jurisdiction: Optional[str] = None,
) -> set[date]:
    """Flatten holidays into a set of dates.

    Plain dates always apply. Holiday records apply when they carry no
    jurisdiction tag, or when no *jurisdiction* filter is given, or when
    the tags match.
    """
    result: set[date] = set()
    for item in holidays:
        if isinstance(item, Holiday):
            if (
                jurisdiction is None
                or item.jurisdiction is None
                or item.jurisdiction == jurisdiction
            ):
                result.add(item.date)
        else:
            result.add(item)
    return result


def count_working_days(
    start_date: date,
    end_date: date,
    holidays: Iterable[HolidayLike] = (),
    weekly_off_days: AbstractSet[int] = DEFAULT_WEEKLY_OFFS,
    jurisdiction: Optional[str] = None,
) -> int:
    """Count days in ``[start_date, end_date]`` that are neither a weekly
    off nor a holiday. An inverted range yields 0."""
    if start_date > end_date:
        return 0

    off_dates = holiday_dates(holidays, jurisdiction)
    return sum(
        1
        for d in iter_dates(start_date, end_date)
        if not is_weekend(d, weekly_off_days) and d not in off_dates
    )

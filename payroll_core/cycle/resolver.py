"""Salary cycle resolver — maps a reference date to its pay period.

Cycle rules:
  - monthly: ``start_day`` → ``end_day`` of the reference month (``"last"``
    means month end). When ``end_day`` is before ``start_day`` the cycle is
    offset: it starts in the previous month (e.g. 26 Jan – 25 Feb) and a
    reference date after ``end_day`` belongs to the next month's cycle.
  - semi_monthly: 1st–15th and 16th–month end.
  - bi_weekly: 14-day blocks anchored on 1 January of the reference year.
    The last block of a year may run into the next year; it is not clipped.
  - weekly: Monday to Sunday.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

from payroll_core.common.constants import (
    BI_WEEKLY_DAYS,
    DATE_FORMAT,
    END_OF_MONTH,
    SEMI_MONTHLY_SPLIT_DAY,
    WEEKLY_DAYS,
    SalaryCycleType,
)
from payroll_core.cycle.dates import last_day_of_month, month_name
from payroll_core.cycle.schemas import Period, SalaryCycleConfig

logger = logging.getLogger(__name__)


# ── Per-type resolvers ──────────────────────────────────────────────

def _clamped_day(year: int, month_index0: int, day: int) -> date:
    last = last_day_of_month(year, month_index0)
    return last.replace(day=min(day, last.day))


def _previous_month(year: int, month_index0: int) -> tuple[int, int]:
    if month_index0 == 0:
        return year - 1, 11
    return year, month_index0 - 1


def _next_month(year: int, month0: int) -> tuple[int, int]:
    if month0 == 11:
        return year + 1, 0
    return year, month0 + 1


def _offset_monthly(year: int, month0: int, config: SalaryCycleConfig) -> Period:
    """Offset cycle closing on ``end_day`` of the given month.

    The start never falls on or before the previous cycle's end, so a start
    day clamped to a short month (e.g. 31 → 28 Feb) moves to the next day.
    """
    prev_year, prev_month0 = _previous_month(year, month0)
    previous_end = _clamped_day(prev_year, prev_month0, config.end_day)
    start = max(
        _clamped_day(prev_year, prev_month0, config.start_day),
        previous_end + timedelta(days=1),
    )
    return Period(
        start_date=start,
        end_date=_clamped_day(year, month0, config.end_day),
        label=f"{month_name(month0)} {year}",
    )


def _monthly(reference: date, config: SalaryCycleConfig) -> Period:
    year, month0 = reference.year, reference.month - 1

    if config.end_day != END_OF_MONTH and config.end_day < config.start_day:
        # Past this month's end day: the reference belongs to next month's cycle
        if reference > _clamped_day(year, month0, config.end_day):
            year, month0 = _next_month(year, month0)
        return _offset_monthly(year, month0, config)

    if config.end_day == END_OF_MONTH:
        end = last_day_of_month(year, month0)
    else:
        end = _clamped_day(year, month0, config.end_day)
    start = _clamped_day(year, month0, config.start_day)

    return Period(
        start_date=start,
        end_date=end,
        label=f"{month_name(month0)} {year}",
    )


def _semi_monthly(reference: date) -> Period:
    year, month0 = reference.year, reference.month - 1
    name = month_name(month0)

    if reference.day <= SEMI_MONTHLY_SPLIT_DAY:
        return Period(
            start_date=date(year, reference.month, 1),
            end_date=date(year, reference.month, SEMI_MONTHLY_SPLIT_DAY),
            label=f"{name} 1-{SEMI_MONTHLY_SPLIT_DAY}, {year}",
        )
    return Period(
        start_date=date(year, reference.month, SEMI_MONTHLY_SPLIT_DAY + 1),
        end_date=last_day_of_month(year, month0),
        label=f"{name} {SEMI_MONTHLY_SPLIT_DAY + 1}-End, {year}",
    )


def _bi_weekly(reference: date) -> Period:
    anchor = date(reference.year, 1, 1)
    index = (reference - anchor).days // BI_WEEKLY_DAYS
    start = anchor + timedelta(days=BI_WEEKLY_DAYS * index)
    return Period(
        start_date=start,
        end_date=start + timedelta(days=BI_WEEKLY_DAYS - 1),
        label=f"Week {2 * index + 1}-{2 * index + 2}, {reference.year}",
    )


def _weekly(reference: date) -> Period:
    start = reference - timedelta(days=reference.weekday())
    return Period(
        start_date=start,
        end_date=start + timedelta(days=WEEKLY_DAYS - 1),
        label=f"Week of {start.strftime(DATE_FORMAT)}",
    )


# ── Public API ──────────────────────────────────────────────────────

def resolve_period(reference: date, config: SalaryCycleConfig) -> Period:
    """Return the pay period that *reference* falls in."""
    if config.type == SalaryCycleType.monthly:
        return _monthly(reference, config)
    if config.type == SalaryCycleType.semi_monthly:
        return _semi_monthly(reference)
    if config.type == SalaryCycleType.bi_weekly:
        return _bi_weekly(reference)
    return _weekly(reference)


def yearly_periods(year: int, config: SalaryCycleConfig) -> list[Period]:
    """Enumerate, in order, every period of *year* for the configured cycle.

    Monthly and semi-monthly cycles are sampled on fixed days of each month.
    Bi-weekly and weekly cycles step from the first period of the year until
    a period starts after 31 December; the first weekly period may begin in
    the previous year and the last bi-weekly/weekly period may end in the
    next one.
    """
    periods: list[Period] = []

    if config.type == SalaryCycleType.monthly:
        # The 1st is never past end_day, so offset cycles map to their own month
        periods = [
            resolve_period(date(year, month, 1), config)
            for month in range(1, 13)
        ]
    elif config.type == SalaryCycleType.semi_monthly:
        for month in range(1, 13):
            periods.append(resolve_period(date(year, month, 10), config))
            periods.append(resolve_period(date(year, month, 20), config))
    else:
        step = BI_WEEKLY_DAYS if config.type == SalaryCycleType.bi_weekly else WEEKLY_DAYS
        year_end = date(year, 12, 31)
        period = resolve_period(date(year, 1, 1), config)
        while period.start_date <= year_end:
            periods.append(period)
            period = resolve_period(period.start_date + timedelta(days=step), config)

    logger.debug(
        "Resolved %d %s periods for %d", len(periods), config.type.value, year,
    )
    return periods

"""Pro-rata salary for partial periods (mid-cycle joining or exit)."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import AbstractSet, Iterable, Optional

from payroll_core.common.constants import DEFAULT_WEEKLY_OFFS
from payroll_core.common.exceptions import ensure_non_negative
from payroll_core.common.money import ZERO, Number, round2, to_decimal
from payroll_core.cycle.schemas import Period
from payroll_core.cycle.working_days import HolidayLike, count_working_days
from payroll_core.salary.schemas import ProRataResult

logger = logging.getLogger(__name__)


def prorate(
    period_salary: Number,
    actual_working_days: int,
    total_working_days: int,
) -> Decimal:
    """Scale a period salary by ``actual / total`` working days.

    A period with no working days pays nothing rather than failing.
    """
    salary = to_decimal(period_salary)
    ensure_non_negative("period_salary", salary)
    ensure_non_negative("actual_working_days", actual_working_days)
    ensure_non_negative("total_working_days", total_working_days)

    if total_working_days == 0:
        return ZERO
    # Multiply before dividing so actual == total returns the salary exactly.
    return round2(salary * actual_working_days / total_working_days)


def mid_cycle_period(
    employee_start: date,
    employee_end: Optional[date],
    cycle_start: date,
    cycle_end: date,
) -> Optional[tuple[date, date]]:
    """Clip an employee's tenure to a cycle.

    Returns ``None`` when the tenure and the cycle do not overlap.
    ``employee_end=None`` means the employee has not exited.
    """
    effective_start = max(employee_start, cycle_start)
    effective_end = cycle_end if employee_end is None else min(employee_end, cycle_end)
    if effective_start > effective_end:
        return None
    return effective_start, effective_end


def mid_cycle_salary(
    period_salary: Number,
    period: Period,
    employee_start: date,
    employee_end: Optional[date] = None,
    holidays: Iterable[HolidayLike] = (),
    weekly_off_days: AbstractSet[int] = DEFAULT_WEEKLY_OFFS,
    jurisdiction: Optional[str] = None,
) -> ProRataResult:
    """Salary owed for the working days of *period* the employee was active."""
    holidays = list(holidays)
    total_days = count_working_days(
        period.start_date, period.end_date, holidays, weekly_off_days, jurisdiction,
    )

    clipped = mid_cycle_period(
        employee_start, employee_end, period.start_date, period.end_date,
    )
    if clipped is None:
        logger.debug(
            "No overlap between tenure %s..%s and period %s",
            employee_start, employee_end, period.label,
        )
        return ProRataResult(
            period=period,
            total_working_days=total_days,
            actual_working_days=0,
            amount=ZERO,
        )

    effective_start, effective_end = clipped
    actual_days = count_working_days(
        effective_start, effective_end, holidays, weekly_off_days, jurisdiction,
    )
    return ProRataResult(
        period=period,
        effective_start=effective_start,
        effective_end=effective_end,
        total_working_days=total_days,
        actual_working_days=actual_days,
        amount=prorate(period_salary, actual_days, total_days),
    )

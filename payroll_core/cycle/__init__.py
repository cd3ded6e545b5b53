"""Salary cycle module — calendar math, working days, period resolution."""

from payroll_core.cycle.dates import is_weekend, iter_dates, last_day_of_month
from payroll_core.cycle.resolver import resolve_period, yearly_periods
from payroll_core.cycle.schemas import Holiday, Period, SalaryCycleConfig
from payroll_core.cycle.service import load_cycle_config, validate_cycle_config
from payroll_core.cycle.working_days import count_working_days, holiday_dates

__all__ = [
    "Holiday",
    "Period",
    "SalaryCycleConfig",
    "count_working_days",
    "holiday_dates",
    "is_weekend",
    "iter_dates",
    "last_day_of_month",
    "load_cycle_config",
    "resolve_period",
    "validate_cycle_config",
    "yearly_periods",
]

"""Overtime pay from a monthly salary and the cycle's working-hours setup."""

from __future__ import annotations

from decimal import Decimal

from payroll_core.common.exceptions import ensure_non_negative
from payroll_core.common.money import Number, round2, to_decimal
from payroll_core.cycle.schemas import SalaryCycleConfig


def hourly_rate(base_monthly_salary: Number, config: SalaryCycleConfig) -> Decimal:
    """Unrounded hourly rate: salary / (working days × hours per day)."""
    salary = to_decimal(base_monthly_salary)
    ensure_non_negative("base_monthly_salary", salary)
    return salary / (config.working_days_per_month * config.working_hours_per_day)


def overtime_pay(
    base_monthly_salary: Number,
    overtime_hours: Number,
    config: SalaryCycleConfig,
) -> Decimal:
    """Overtime hours paid at ``hourly_rate × overtime_multiplier``."""
    hours = to_decimal(overtime_hours)
    ensure_non_negative("overtime_hours", hours)
    rate = hourly_rate(base_monthly_salary, config)
    return round2(rate * hours * config.overtime_multiplier)

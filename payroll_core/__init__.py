"""Payroll calculation core.

Stateless library functions for salary cycles, working days, pro-rata,
overtime and CTC breakdowns. The FastAPI app (``payroll_core.main``) and the
settings store (``payroll_core.settings_store``) are imported separately.
"""

from payroll_core.cycle import (
    Holiday,
    Period,
    SalaryCycleConfig,
    count_working_days,
    load_cycle_config,
    resolve_period,
    validate_cycle_config,
    yearly_periods,
)
from payroll_core.fnf import FnFService
from payroll_core.salary import (
    CompensationBreakdown,
    NegativeNetPayWarning,
    TaxConfig,
    TaxSlab,
    compute_breakdown,
    mid_cycle_period,
    mid_cycle_salary,
    overtime_pay,
    prorate,
    validate_template,
)

__all__ = [
    "CompensationBreakdown",
    "FnFService",
    "Holiday",
    "NegativeNetPayWarning",
    "Period",
    "SalaryCycleConfig",
    "TaxConfig",
    "TaxSlab",
    "compute_breakdown",
    "count_working_days",
    "load_cycle_config",
    "mid_cycle_period",
    "mid_cycle_salary",
    "overtime_pay",
    "prorate",
    "resolve_period",
    "validate_cycle_config",
    "validate_template",
    "yearly_periods",
]

"""Salary module — pro-rata, overtime, templates, CTC breakdown engine."""

from payroll_core.salary.breakdown import (
    compute_annual_tax,
    compute_breakdown,
    load_tax_config,
)
from payroll_core.salary.overtime import hourly_rate, overtime_pay
from payroll_core.salary.proration import mid_cycle_period, mid_cycle_salary, prorate
from payroll_core.salary.schemas import (
    CompensationBreakdown,
    NegativeNetPayWarning,
    ProRataResult,
    TaxConfig,
    TaxSlab,
    TemplateValidation,
)
from payroll_core.salary.templates import (
    parse_template,
    require_valid_template,
    validate_template,
)

__all__ = [
    "CompensationBreakdown",
    "NegativeNetPayWarning",
    "ProRataResult",
    "TaxConfig",
    "TaxSlab",
    "TemplateValidation",
    "compute_annual_tax",
    "compute_breakdown",
    "hourly_rate",
    "load_tax_config",
    "mid_cycle_period",
    "mid_cycle_salary",
    "overtime_pay",
    "parse_template",
    "prorate",
    "require_valid_template",
    "validate_template",
]

"""Salary Pydantic v2 schemas — tax configuration, templates, breakdowns."""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Literal, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, model_validator

from payroll_core.common.constants import DEFAULT_SALARY_TEMPLATE, DEFAULT_WEEKLY_OFFS
from payroll_core.config import settings
from payroll_core.cycle.schemas import Holiday, Period, SalaryCycleConfig, WeekdayIndex

SalaryTemplate = Dict[str, Decimal]


# ═════════════════════════════════════════════════════════════════════
# Tax configuration
# ═════════════════════════════════════════════════════════════════════


class TaxSlab(BaseModel):
    """Marginal rate (percent) charged on annual income above ``threshold``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    threshold: Decimal = Field(ge=0)
    rate: Decimal = Field(ge=0, le=100)


DEFAULT_TAX_SLABS: List[TaxSlab] = [
    TaxSlab(threshold=Decimal("300000"), rate=Decimal("5")),
    TaxSlab(threshold=Decimal("700000"), rate=Decimal("10")),
    TaxSlab(threshold=Decimal("1000000"), rate=Decimal("15")),
    TaxSlab(threshold=Decimal("1200000"), rate=Decimal("20")),
    TaxSlab(threshold=Decimal("1500000"), rate=Decimal("30")),
]


class TaxConfig(BaseModel):
    """Statutory deduction parameters. Percentages are 0–100.

    ``pf_wage_ceiling=None`` disables the PF cap.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pf_employee_pct: Decimal = Field(Decimal("12"), ge=0, le=100)
    pf_employer_pct: Decimal = Field(Decimal("12"), ge=0, le=100)
    pf_wage_ceiling: Optional[Decimal] = Field(Decimal("15000"), ge=0)
    esi_employee_pct: Decimal = Field(Decimal("0.75"), ge=0, le=100)
    esi_employer_pct: Decimal = Field(Decimal("3.25"), ge=0, le=100)
    esi_wage_ceiling: Decimal = Field(Decimal("21000"), ge=0)
    professional_tax: Decimal = Field(Decimal("200"), ge=0)
    tds_enabled: bool = True
    standard_deduction: Decimal = Field(settings.STANDARD_DEDUCTION, ge=0)
    tax_slabs: List[TaxSlab] = Field(default_factory=lambda: list(DEFAULT_TAX_SLABS))

    @model_validator(mode="after")
    def _slabs_ascending(self) -> "TaxConfig":
        thresholds = [slab.threshold for slab in self.tax_slabs]
        if any(a >= b for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError("tax slabs must be sorted ascending by threshold")
        return self


# ═════════════════════════════════════════════════════════════════════
# Template validation
# ═════════════════════════════════════════════════════════════════════


class TemplateValidation(BaseModel):
    valid: bool
    total_pct: Decimal


# ═════════════════════════════════════════════════════════════════════
# Compensation breakdown
# ═════════════════════════════════════════════════════════════════════


class NegativeNetPayWarning(BaseModel):
    """Deductions exceed gross pay. Surfaced on the breakdown, never raised."""

    model_config = ConfigDict(frozen=True)

    code: Literal["negative_net_pay"] = "negative_net_pay"
    message: str
    gross_salary: Decimal
    total_deductions: Decimal
    net_salary: Decimal


class CompensationBreakdown(BaseModel):
    """Monthly payroll figures derived from an annual CTC."""

    model_config = ConfigDict(frozen=True)

    annual_ctc: Decimal
    monthly_gross: Decimal
    earnings: Dict[str, Decimal]
    gross_salary: Decimal

    pf_employee: Decimal
    pf_employer: Decimal
    esi_employee: Decimal
    esi_employer: Decimal
    professional_tax: Decimal
    tds: Decimal

    annual_taxable_income: Decimal
    annual_tax: Decimal

    total_deductions: Decimal
    net_salary: Decimal
    employer_monthly_cost: Decimal
    annual_cost_to_company: Decimal

    warnings: List[NegativeNetPayWarning] = []


# ═════════════════════════════════════════════════════════════════════
# Pro-rata
# ═════════════════════════════════════════════════════════════════════


class ProRataResult(BaseModel):
    """Salary owed for the part of a period an employee was on the rolls."""

    model_config = ConfigDict(frozen=True)

    period: Period
    effective_start: Optional[date] = None
    effective_end: Optional[date] = None
    total_working_days: int
    actual_working_days: int
    amount: Decimal


# ═════════════════════════════════════════════════════════════════════
# API request / response bodies
# ═════════════════════════════════════════════════════════════════════


class ProrateRequest(BaseModel):
    amount: Decimal
    actual_working_days: int
    total_working_days: int


class AmountOut(BaseModel):
    amount: Decimal


class MidCycleRequest(BaseModel):
    period_salary: Decimal
    reference_date: date
    employee_start: date
    employee_end: Optional[date] = None
    config: SalaryCycleConfig = SalaryCycleConfig()
    holidays: List[Holiday] = []
    jurisdiction: Optional[str] = None
    weekly_off_days: Set[WeekdayIndex] = set(DEFAULT_WEEKLY_OFFS)


class OvertimeRequest(BaseModel):
    base_monthly_salary: Decimal
    overtime_hours: Decimal
    config: SalaryCycleConfig = SalaryCycleConfig()


class BreakdownRequest(BaseModel):
    annual_ctc: Decimal
    template: SalaryTemplate = Field(default_factory=lambda: dict(DEFAULT_SALARY_TEMPLATE))
    tax_config: TaxConfig = TaxConfig()

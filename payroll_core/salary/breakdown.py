"""Compensation breakdown engine — annual CTC → monthly payroll figures.

Steps:
  1. Monthly gross = CTC / 12; each template component is rounded once.
  2. Gross salary is the sum of the rounded components, so the displayed
     earnings always add up to the displayed gross.
  3. PF on ``min(basic, pf_wage_ceiling)``; ESI only when gross is at or
     under the ESI ceiling (hard cliff); flat professional tax.
  4. TDS from a progressive slab walk over annual taxable income
     (12 × gross − 12 × employee PF − standard deduction).
  5. Net = gross − employee-side deductions. A negative net is reported as
     a :class:`NegativeNetPayWarning`, never clamped.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping, Sequence, Union

from pydantic import ValidationError

from payroll_core.common.constants import BASIC_COMPONENT, MONTHS_PER_YEAR
from payroll_core.common.exceptions import ConfigValidationError, ensure_non_negative
from payroll_core.common.money import ZERO, Number, money_sum, round2, to_decimal
from payroll_core.salary.schemas import (
    CompensationBreakdown,
    NegativeNetPayWarning,
    TaxConfig,
    TaxSlab,
)
from payroll_core.salary.templates import HUNDRED, require_valid_template

logger = logging.getLogger(__name__)


# ── Tax configuration ───────────────────────────────────────────────

def load_tax_config(data: Union[TaxConfig, Mapping[str, Any]]) -> TaxConfig:
    """Parse a tax configuration or raise :class:`ConfigValidationError`."""
    if isinstance(data, TaxConfig):
        return data
    try:
        return TaxConfig.model_validate(dict(data))
    except ValidationError as exc:
        errors: dict[str, list[str]] = {}
        for err in exc.errors():
            loc = err.get("loc", ())
            field = ".".join(str(p) for p in loc) if loc else "tax_config"
            errors.setdefault(field, []).append(err.get("msg", "Invalid value"))
        raise ConfigValidationError(errors) from exc


# ── Progressive tax ─────────────────────────────────────────────────

def compute_annual_tax(taxable_income: Number, slabs: Sequence[TaxSlab]) -> Decimal:
    """Sum each slab's marginal rate over the income band above its threshold.

    Slabs are walked from the highest threshold down; income at or below the
    lowest threshold is untaxed. Non-positive income yields zero.
    """
    remaining = to_decimal(taxable_income)
    tax = Decimal("0")
    if remaining <= 0:
        return tax

    for slab in reversed(slabs):
        if remaining > slab.threshold:
            tax += (remaining - slab.threshold) * slab.rate / HUNDRED
            remaining = slab.threshold
    return tax


# ── Breakdown ───────────────────────────────────────────────────────

def _basic_amount(earnings: Mapping[str, Decimal]) -> Decimal:
    for name, amount in earnings.items():
        if name.strip().lower() == BASIC_COMPONENT:
            return amount
    return ZERO


def _pct_of(base: Decimal, pct: Decimal) -> Decimal:
    return round2(base * pct / HUNDRED)


def compute_breakdown(
    annual_ctc: Number,
    template: Mapping[str, Number],
    tax_config: Union[TaxConfig, Mapping[str, Any], None] = None,
) -> CompensationBreakdown:
    """Turn an annual CTC into a monthly :class:`CompensationBreakdown`.

    *tax_config* may be a :class:`TaxConfig` or plain mapping data.

    Raises:
        NegativeInputError: ``annual_ctc`` is negative.
        TemplateValidationError: template percentages do not total 100%.
        ConfigValidationError: the tax configuration or a template
            percentage is malformed.
    """
    tax_config = TaxConfig() if tax_config is None else load_tax_config(tax_config)

    ctc = to_decimal(annual_ctc)
    ensure_non_negative("annual_ctc", ctc)
    require_valid_template(template)

    monthly_gross = ctc / MONTHS_PER_YEAR
    earnings = {
        name: _pct_of(monthly_gross, to_decimal(pct))
        for name, pct in template.items()
    }
    gross_salary = money_sum(earnings.values())

    # Provident fund
    basic = _basic_amount(earnings)
    pf_base = basic
    if tax_config.pf_wage_ceiling is not None:
        pf_base = min(basic, tax_config.pf_wage_ceiling)
    pf_employee = _pct_of(pf_base, tax_config.pf_employee_pct)
    pf_employer = _pct_of(pf_base, tax_config.pf_employer_pct)

    # State insurance
    if gross_salary <= tax_config.esi_wage_ceiling:
        esi_employee = _pct_of(gross_salary, tax_config.esi_employee_pct)
        esi_employer = _pct_of(gross_salary, tax_config.esi_employer_pct)
    else:
        esi_employee = esi_employer = ZERO

    professional_tax = round2(tax_config.professional_tax)

    # Income tax withheld at source
    annual_taxable_income = (
        gross_salary * MONTHS_PER_YEAR
        - pf_employee * MONTHS_PER_YEAR
        - tax_config.standard_deduction
    )
    if tax_config.tds_enabled:
        annual_tax = compute_annual_tax(annual_taxable_income, tax_config.tax_slabs)
    else:
        annual_tax = Decimal("0")
    tds = round2(annual_tax / MONTHS_PER_YEAR)

    total_deductions = pf_employee + esi_employee + professional_tax + tds
    net_salary = gross_salary - total_deductions

    warnings: list[NegativeNetPayWarning] = []
    if net_salary < 0:
        logger.warning(
            "Negative net pay %s for CTC %s (gross %s, deductions %s)",
            net_salary, ctc, gross_salary, total_deductions,
        )
        warnings.append(
            NegativeNetPayWarning(
                message="Deductions exceed gross salary; review the tax configuration.",
                gross_salary=gross_salary,
                total_deductions=total_deductions,
                net_salary=net_salary,
            )
        )

    employer_monthly_cost = round2(monthly_gross) + pf_employer + esi_employer

    return CompensationBreakdown(
        annual_ctc=ctc,
        monthly_gross=round2(monthly_gross),
        earnings=earnings,
        gross_salary=gross_salary,
        pf_employee=pf_employee,
        pf_employer=pf_employer,
        esi_employee=esi_employee,
        esi_employer=esi_employer,
        professional_tax=professional_tax,
        tds=tds,
        annual_taxable_income=annual_taxable_income,
        annual_tax=round2(annual_tax),
        total_deductions=total_deductions,
        net_salary=net_salary,
        employer_monthly_cost=employer_monthly_cost,
        annual_cost_to_company=employer_monthly_cost * MONTHS_PER_YEAR,
    )

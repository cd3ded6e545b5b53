"""Salary router — pro-rata, overtime, templates, CTC breakdowns."""

from decimal import Decimal
from typing import Dict

from fastapi import APIRouter, Body

from payroll_core.cycle.resolver import resolve_period
from payroll_core.salary.breakdown import compute_breakdown
from payroll_core.salary.overtime import overtime_pay
from payroll_core.salary.proration import mid_cycle_salary, prorate
from payroll_core.salary.schemas import (
    AmountOut,
    BreakdownRequest,
    CompensationBreakdown,
    MidCycleRequest,
    OvertimeRequest,
    ProRataResult,
    ProrateRequest,
    TemplateValidation,
)
from payroll_core.salary.templates import validate_template

router = APIRouter(prefix="", tags=["salary"])


# ── POST /prorate ────────────────────────────────────────────────────

@router.post("/prorate", response_model=AmountOut)
async def prorate_amount(payload: ProrateRequest):
    """Prorate an amount by actual over total working days."""
    amount = prorate(
        payload.amount, payload.actual_working_days, payload.total_working_days,
    )
    return AmountOut(amount=amount)


# ── POST /mid-cycle ──────────────────────────────────────────────────

@router.post("/mid-cycle", response_model=ProRataResult)
async def mid_cycle(payload: MidCycleRequest):
    """Salary for an employee joining or leaving inside the period of
    ``reference_date``."""
    period = resolve_period(payload.reference_date, payload.config)
    return mid_cycle_salary(
        payload.period_salary,
        period,
        payload.employee_start,
        payload.employee_end,
        payload.holidays,
        payload.weekly_off_days,
        payload.jurisdiction,
    )


# ── POST /overtime ───────────────────────────────────────────────────

@router.post("/overtime", response_model=AmountOut)
async def overtime(payload: OvertimeRequest):
    """Overtime pay for a number of extra hours."""
    amount = overtime_pay(
        payload.base_monthly_salary, payload.overtime_hours, payload.config,
    )
    return AmountOut(amount=amount)


# ── POST /templates/validate ─────────────────────────────────────────

@router.post("/templates/validate", response_model=TemplateValidation)
async def check_template(template: Dict[str, Decimal] = Body(...)):
    """Check that a template's percentages total 100%."""
    return validate_template(template)


# ── POST /breakdown ──────────────────────────────────────────────────

@router.post("/breakdown", response_model=CompensationBreakdown)
async def breakdown(payload: BreakdownRequest):
    """Monthly breakdown of an annual CTC."""
    return compute_breakdown(payload.annual_ctc, payload.template, payload.tax_config)

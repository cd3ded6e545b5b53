"""Salary cycle router — period resolution, yearly calendars, working days."""

from typing import Any, Dict

from fastapi import APIRouter, Body

from payroll_core.cycle.resolver import resolve_period, yearly_periods
from payroll_core.cycle.schemas import (
    CycleConfigValidation,
    Period,
    PeriodRequest,
    WorkingDaysOut,
    WorkingDaysRequest,
    YearlyPeriodsOut,
    YearlyPeriodsRequest,
)
from payroll_core.cycle.service import validate_cycle_config
from payroll_core.cycle.working_days import count_working_days

router = APIRouter(prefix="", tags=["cycle"])


# ── POST /validate ───────────────────────────────────────────────────

@router.post("/validate", response_model=CycleConfigValidation)
async def validate_config(config: Dict[str, Any] = Body(...)):
    """Validate a salary cycle configuration without applying it."""
    return validate_cycle_config(config)


# ── POST /period ─────────────────────────────────────────────────────

@router.post("/period", response_model=Period)
async def get_period(payload: PeriodRequest):
    """Resolve the pay period containing ``reference_date``."""
    return resolve_period(payload.reference_date, payload.config)


# ── POST /yearly ─────────────────────────────────────────────────────

@router.post("/yearly", response_model=YearlyPeriodsOut)
async def get_yearly_periods(payload: YearlyPeriodsRequest):
    """List every pay period of a year."""
    periods = yearly_periods(payload.year, payload.config)
    return YearlyPeriodsOut(year=payload.year, data=periods, total=len(periods))


# ── POST /working-days ───────────────────────────────────────────────

@router.post("/working-days", response_model=WorkingDaysOut)
async def get_working_days(payload: WorkingDaysRequest):
    """Count working days between two dates (inclusive)."""
    days = count_working_days(
        payload.start_date,
        payload.end_date,
        payload.holidays,
        payload.weekly_off_days,
        jurisdiction=payload.jurisdiction,
    )
    return WorkingDaysOut(
        start_date=payload.start_date,
        end_date=payload.end_date,
        working_days=days,
    )

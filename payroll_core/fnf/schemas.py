"""FnF (Full & Final) Pydantic v2 schemas — settlement input and result."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from payroll_core.config import settings


# ═════════════════════════════════════════════════════════════════════
# Input
# ═════════════════════════════════════════════════════════════════════


class SettlementInput(BaseModel):
    """Everything needed to settle an exiting employee's dues."""

    employee_id: Optional[str] = None
    annual_ctc: Decimal
    date_of_joining: date
    exit_date: date
    resignation_date: Optional[date] = None
    unused_leave_days: Decimal = Decimal("0")
    annual_bonus: Decimal = Decimal("0")
    pending_reimbursements: Decimal = Decimal("0")
    notice_period_days: int = Field(settings.NOTICE_PERIOD_DAYS, ge=0)


# ═════════════════════════════════════════════════════════════════════
# Result
# ═════════════════════════════════════════════════════════════════════


class SettlementBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    pro_rata_salary: Decimal
    leave_encashment: Decimal
    gratuity: Decimal
    pro_rated_bonus: Decimal
    pending_reimbursements: Decimal
    notice_period_recovery: Decimal


class SettlementSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    gross_amount: Decimal
    total_deductions: Decimal
    net_settlement: Decimal


class SettlementDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    worked_days: int
    days_in_month: int
    unused_leave_days: Decimal
    tenure_years: Decimal
    notice_days_served: int
    notice_period_shortfall: int


class SettlementOut(BaseModel):
    """Full & Final settlement computation."""

    model_config = ConfigDict(frozen=True)

    employee_id: Optional[str] = None
    exit_date: date
    breakdown: SettlementBreakdown
    summary: SettlementSummary
    details: SettlementDetails

"""FnF service layer — Full & Final settlement for exiting employees.

Business logic:
  - Pro-rata salary for the exit month (calendar days worked / days in month)
  - Unused leave encashment at a 30-day daily rate
  - Notice-period shortfall recovery at the same daily rate
  - Gratuity once tenure reaches the configured minimum years
  - Annual bonus pro-rated by months elapsed in the exit year
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from payroll_core.common.constants import MONTHS_PER_YEAR
from payroll_core.common.exceptions import NegativeInputError, ensure_non_negative
from payroll_core.common.money import ZERO, money_sum, round2
from payroll_core.config import settings
from payroll_core.cycle.dates import last_day_of_month
from payroll_core.fnf.schemas import (
    SettlementBreakdown,
    SettlementDetails,
    SettlementInput,
    SettlementOut,
    SettlementSummary,
)
from payroll_core.salary.proration import prorate

logger = logging.getLogger(__name__)

DAYS_PER_MONTH_FOR_RATE = 30
DAYS_PER_YEAR = 365
GRATUITY_DAYS = 15
GRATUITY_DIVISOR = 26


class FnFService:
    """Full & Final settlement calculations."""

    @staticmethod
    def _notice_days_served(
        resignation_date: Optional[date],
        exit_date: date,
        notice_period_days: int,
    ) -> int:
        """Days between resignation and exit; full notice when unknown."""
        if resignation_date is None:
            return notice_period_days
        return abs((exit_date - resignation_date).days)

    @staticmethod
    def compute_settlement(payload: SettlementInput) -> SettlementOut:
        """Compute every settlement line, then the gross / net summary."""
        for field in ("annual_ctc", "unused_leave_days", "annual_bonus", "pending_reimbursements"):
            ensure_non_negative(field, getattr(payload, field))

        tenure_days = (payload.exit_date - payload.date_of_joining).days
        if tenure_days < 0:
            raise NegativeInputError("tenure_days", tenure_days)

        exit_date = payload.exit_date
        monthly_salary = payload.annual_ctc / MONTHS_PER_YEAR
        daily_rate = monthly_salary / DAYS_PER_MONTH_FOR_RATE

        # 1. Pro-rata salary for the exit month
        days_in_month = last_day_of_month(exit_date.year, exit_date.month - 1).day
        worked_days = exit_date.day
        pro_rata_salary = prorate(monthly_salary, worked_days, days_in_month)

        # 2. Leave encashment
        leave_encashment = round2(payload.unused_leave_days * daily_rate)

        # 3. Notice-period recovery
        served = FnFService._notice_days_served(
            payload.resignation_date, exit_date, payload.notice_period_days,
        )
        shortfall = max(0, payload.notice_period_days - served)
        notice_recovery = round2(shortfall * daily_rate)

        # 4. Gratuity
        tenure_years = Decimal(tenure_days) / DAYS_PER_YEAR
        if tenure_years >= settings.GRATUITY_MIN_YEARS:
            gratuity = round2(monthly_salary * GRATUITY_DAYS * tenure_years / GRATUITY_DIVISOR)
        else:
            gratuity = ZERO

        # 5. Pro-rated bonus
        pro_rated_bonus = round2(payload.annual_bonus * exit_date.month / MONTHS_PER_YEAR)

        reimbursements = round2(payload.pending_reimbursements)

        breakdown = SettlementBreakdown(
            pro_rata_salary=pro_rata_salary,
            leave_encashment=leave_encashment,
            gratuity=gratuity,
            pro_rated_bonus=pro_rated_bonus,
            pending_reimbursements=reimbursements,
            notice_period_recovery=notice_recovery,
        )
        gross = money_sum(
            [pro_rata_salary, leave_encashment, gratuity, pro_rated_bonus, reimbursements]
        )
        summary = SettlementSummary(
            gross_amount=gross,
            total_deductions=notice_recovery,
            net_settlement=gross - notice_recovery,
        )
        details = SettlementDetails(
            worked_days=worked_days,
            days_in_month=days_in_month,
            unused_leave_days=payload.unused_leave_days,
            tenure_years=round2(tenure_years),
            notice_days_served=served,
            notice_period_shortfall=shortfall,
        )

        logger.info(
            "FnF settlement for %s: gross=%s deductions=%s net=%s",
            payload.employee_id or "<unknown>", gross, notice_recovery, summary.net_settlement,
        )
        return SettlementOut(
            employee_id=payload.employee_id,
            exit_date=exit_date,
            breakdown=breakdown,
            summary=summary,
            details=details,
        )

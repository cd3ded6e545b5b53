"""Enums and constants for the payroll core."""

from __future__ import annotations

import enum
from decimal import Decimal


# ── Salary cycles ───────────────────────────────────────────────────

class SalaryCycleType(str, enum.Enum):
    monthly = "monthly"
    semi_monthly = "semi_monthly"    # 1st-15th, 16th-end
    bi_weekly = "bi_weekly"          # every 2 weeks from Jan 1
    weekly = "weekly"                # Monday to Sunday


class Weekday(int, enum.Enum):
    """Python weekday numbering (``date.weekday()``)."""

    monday = 0
    tuesday = 1
    wednesday = 2
    thursday = 3
    friday = 4
    saturday = 5
    sunday = 6


DEFAULT_WEEKLY_OFFS: frozenset[int] = frozenset(
    {Weekday.saturday.value, Weekday.sunday.value}
)

END_OF_MONTH = "last"

MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

SEMI_MONTHLY_SPLIT_DAY = 15
BI_WEEKLY_DAYS = 14
WEEKLY_DAYS = 7


# ── Salary template ─────────────────────────────────────────────────

BASIC_COMPONENT = "basic"

DEFAULT_SALARY_TEMPLATE: dict[str, Decimal] = {
    "basic": Decimal("40"),
    "hra": Decimal("16"),
    "medical": Decimal("4"),
    "transport": Decimal("8.6"),
    "shift": Decimal("16"),
    "attendance": Decimal("15.4"),
}


# ── Settings-store keys ─────────────────────────────────────────────

class SettingKey(str, enum.Enum):
    salary_cycle = "salary_cycle"
    tax_config = "tax_config"
    salary_template = "salary_template"


# ── Misc constants ──────────────────────────────────────────────────

MONTHS_PER_YEAR = 12
DATE_FORMAT = "%d-%b-%Y"          # Indian format: 19-Feb-2026

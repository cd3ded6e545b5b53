"""Salary cycle Pydantic v2 schemas — configuration, periods, holidays."""

from datetime import date
from decimal import Decimal
from typing import Annotated, List, Literal, Optional, Set, Union

from pydantic import BaseModel, ConfigDict, Field

from payroll_core.common.constants import (
    DEFAULT_WEEKLY_OFFS,
    END_OF_MONTH,
    SalaryCycleType,
)
from payroll_core.config import settings

DayOfMonth = Annotated[int, Field(ge=1, le=31)]
WeekdayIndex = Annotated[int, Field(ge=0, le=6)]


# ═════════════════════════════════════════════════════════════════════
# Configuration
# ═════════════════════════════════════════════════════════════════════


class SalaryCycleConfig(BaseModel):
    """Pay-period definition.

    ``start_day`` / ``end_day`` only apply to monthly cycles; the other
    cycle types derive their boundaries from the reference date.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: SalaryCycleType = SalaryCycleType.monthly
    start_day: DayOfMonth = 1
    end_day: Union[Literal["last"], DayOfMonth] = END_OF_MONTH
    working_days_per_month: int = Field(
        settings.DEFAULT_WORKING_DAYS_PER_MONTH, ge=1, le=31,
    )
    working_hours_per_day: Decimal = Field(
        settings.DEFAULT_WORKING_HOURS_PER_DAY, ge=1, le=24,
    )
    overtime_multiplier: Decimal = Field(
        settings.DEFAULT_OVERTIME_MULTIPLIER, ge=1,
    )


class CycleConfigValidation(BaseModel):
    """Outcome of validating a cycle configuration."""

    valid: bool
    errors: List[str] = []


# ═════════════════════════════════════════════════════════════════════
# Periods & holidays
# ═════════════════════════════════════════════════════════════════════


class Period(BaseModel):
    """Concrete pay period, inclusive on both ends."""

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date
    label: str

    @property
    def length_days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


class Holiday(BaseModel):
    """Reference holiday; ``jurisdiction=None`` applies everywhere."""

    model_config = ConfigDict(frozen=True)

    date: date
    jurisdiction: Optional[str] = None
    name: Optional[str] = None


# ═════════════════════════════════════════════════════════════════════
# API request / response bodies
# ═════════════════════════════════════════════════════════════════════


class PeriodRequest(BaseModel):
    reference_date: date
    config: SalaryCycleConfig = SalaryCycleConfig()


class YearlyPeriodsRequest(BaseModel):
    year: int = Field(ge=1, le=9998)
    config: SalaryCycleConfig = SalaryCycleConfig()


class YearlyPeriodsOut(BaseModel):
    year: int
    data: List[Period]
    total: int


class WorkingDaysRequest(BaseModel):
    start_date: date
    end_date: date
    holidays: List[Union[date, Holiday]] = []
    jurisdiction: Optional[str] = None
    weekly_off_days: Set[WeekdayIndex] = set(DEFAULT_WEEKLY_OFFS)


class WorkingDaysOut(BaseModel):
    start_date: date
    end_date: date
    working_days: int

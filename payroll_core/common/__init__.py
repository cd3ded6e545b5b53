"""Common module — shared constants, exceptions and money helpers."""

from payroll_core.common.constants import (
    DATE_FORMAT,
    DEFAULT_SALARY_TEMPLATE,
    DEFAULT_WEEKLY_OFFS,
    MONTH_NAMES,
    SalaryCycleType,
    SettingKey,
    Weekday,
)
from payroll_core.common.exceptions import (
    AppException,
    ConfigValidationError,
    NegativeInputError,
    NotFoundException,
    TemplateValidationError,
    ensure_non_negative,
    register_exception_handlers,
)
from payroll_core.common.money import money_sum, round2, to_decimal

__all__ = [
    # Constants / Enums
    "DATE_FORMAT",
    "DEFAULT_SALARY_TEMPLATE",
    "DEFAULT_WEEKLY_OFFS",
    "MONTH_NAMES",
    "SalaryCycleType",
    "SettingKey",
    "Weekday",
    # Exceptions
    "AppException",
    "ConfigValidationError",
    "NegativeInputError",
    "NotFoundException",
    "TemplateValidationError",
    "ensure_non_negative",
    "register_exception_handlers",
    # Money
    "money_sum",
    "round2",
    "to_decimal",
]

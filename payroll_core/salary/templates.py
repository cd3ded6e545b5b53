"""Salary template validation — earnings percentages must total 100%."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

from payroll_core.common.exceptions import ConfigValidationError, TemplateValidationError
from payroll_core.common.money import Number, to_decimal
from payroll_core.config import settings
from payroll_core.salary.schemas import TemplateValidation

HUNDRED = Decimal("100")


def parse_template(template: Mapping[str, Number]) -> dict[str, Decimal]:
    """Convert component percentages to ``Decimal``.

    Raises:
        ConfigValidationError: a percentage is not a finite number.
    """
    parsed: dict[str, Decimal] = {}
    errors: dict[str, list[str]] = {}
    for name, pct in template.items():
        try:
            value = to_decimal(pct)
        except (InvalidOperation, TypeError):
            value = None
        if value is None or not value.is_finite():
            errors[str(name)] = ["Percentage must be a finite number."]
        else:
            parsed[name] = value
    if errors:
        raise ConfigValidationError(errors)
    return parsed


def validate_template(
    template: Mapping[str, Number],
    tolerance: Optional[Decimal] = None,
) -> TemplateValidation:
    """Sum the component percentages and check them against 100%."""
    if tolerance is None:
        tolerance = settings.TEMPLATE_TOLERANCE_PCT
    total = sum(parse_template(template).values(), Decimal("0"))
    return TemplateValidation(
        valid=abs(total - HUNDRED) <= tolerance,
        total_pct=total,
    )


def require_valid_template(
    template: Mapping[str, Number],
    tolerance: Optional[Decimal] = None,
) -> TemplateValidation:
    """Like :func:`validate_template` but raise on an invalid template."""
    if tolerance is None:
        tolerance = settings.TEMPLATE_TOLERANCE_PCT
    result = validate_template(template, tolerance)
    if not result.valid:
        raise TemplateValidationError(result.total_pct, tolerance)
    return result

"""Cycle configuration validation.

``validate_cycle_config`` reports every problem without raising so a UI can
show them together; ``load_cycle_config`` is the strict entry point used
before any computation runs.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from pydantic import ValidationError

from payroll_core.common.exceptions import ConfigValidationError
from payroll_core.cycle.schemas import CycleConfigValidation, SalaryCycleConfig

logger = logging.getLogger(__name__)

_FIELD_MESSAGES: dict[str, str] = {
    "type": "Invalid cycle type",
    "start_day": "Start day must be between 1 and 31",
    "end_day": "End day must be 'last' or between 1 and 31",
    "working_days_per_month": "Working days per month must be between 1 and 31",
    "working_hours_per_day": "Working hours per day must be between 1 and 24",
    "overtime_multiplier": "Overtime multiplier must be at least 1",
}


def _collect_errors(exc: ValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = err.get("loc", ())
        field = str(loc[0]) if loc else "config"
        if err.get("type") == "extra_forbidden":
            message = f"Unknown field '{field}'"
        else:
            message = _FIELD_MESSAGES.get(field, err.get("msg", "Invalid value"))
        messages = errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return errors


def _parse(data: Union[SalaryCycleConfig, Mapping[str, Any]]) -> SalaryCycleConfig:
    if isinstance(data, SalaryCycleConfig):
        return data
    try:
        return SalaryCycleConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigValidationError(_collect_errors(exc)) from exc


def validate_cycle_config(
    data: Union[SalaryCycleConfig, Mapping[str, Any]],
) -> CycleConfigValidation:
    """Check a cycle configuration and list every violation."""
    try:
        _parse(data)
    except ConfigValidationError as exc:
        messages = [m for field_msgs in exc.errors.values() for m in field_msgs]
        return CycleConfigValidation(valid=False, errors=messages)
    return CycleConfigValidation(valid=True, errors=[])


def load_cycle_config(
    data: Union[SalaryCycleConfig, Mapping[str, Any]],
) -> SalaryCycleConfig:
    """Parse a cycle configuration or raise :class:`ConfigValidationError`."""
    config = _parse(data)
    logger.debug("Loaded salary cycle config: %s", config.type.value)
    return config

"""Salary calculation test suite — pro-rata, mid-cycle joins and exits,
overtime, and template validation.

Service-layer functions only; the HTTP surface is covered in test_api.py.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from payroll_core.common.constants import DEFAULT_SALARY_TEMPLATE, SalaryCycleType
from payroll_core.common.exceptions import (
    ConfigValidationError,
    NegativeInputError,
    TemplateValidationError,
)
from payroll_core.cycle.resolver import resolve_period
from payroll_core.cycle.schemas import Holiday, SalaryCycleConfig
from payroll_core.salary.overtime import hourly_rate, overtime_pay
from payroll_core.salary.proration import mid_cycle_period, mid_cycle_salary, prorate
from payroll_core.salary.templates import (
    parse_template,
    require_valid_template,
    validate_template,
)

FEB_2026 = resolve_period(date(2026, 2, 10), SalaryCycleConfig())  # 20 working days


# ═════════════════════════════════════════════════════════════════════
# Pro-rata
# ═════════════════════════════════════════════════════════════════════


class TestProrate:

    def test_full_period_returns_salary_exactly(self):
        assert prorate(Decimal("50000"), 22, 22) == Decimal("50000.00")

    def test_full_period_rounds_odd_salary_once(self):
        assert prorate(Decimal("1234.565"), 22, 22) == Decimal("1234.57")

    def test_half_period(self):
        assert prorate(50000, 11, 22) == Decimal("25000.00")

    def test_rounds_half_up_to_paise(self):
        assert prorate(50000, 10, 22) == Decimal("22727.27")
        assert prorate(1000, 1, 3) == Decimal("333.33")
        assert prorate(1000, 2, 3) == Decimal("666.67")

    def test_zero_total_days_pays_nothing(self):
        """A period with no working days yields zero, not a division error."""
        assert prorate(30000, 0, 0) == Decimal("0")

    def test_monotonic_in_actual_days(self):
        amounts = [prorate(Decimal("47123.45"), d, 22) for d in range(23)]
        assert amounts == sorted(amounts)
        assert amounts[0] == 0
        assert amounts[-1] == Decimal("47123.45")

    @pytest.mark.parametrize(
        "args, field",
        [
            ((-1, 10, 22), "period_salary"),
            ((50000, -1, 22), "actual_working_days"),
            ((50000, 10, -22), "total_working_days"),
        ],
    )
    def test_negative_inputs_rejected(self, args, field):
        with pytest.raises(NegativeInputError) as exc_info:
            prorate(*args)
        assert exc_info.value.field == field


# ═════════════════════════════════════════════════════════════════════
# Mid-cycle joining / exit
# ═════════════════════════════════════════════════════════════════════


def test_mid_cycle_period_join_during_cycle():
    """Still employed: effective period runs from joining to cycle end."""
    clipped = mid_cycle_period(date(2026, 2, 10), None, date(2026, 2, 1), date(2026, 2, 28))
    assert clipped == (date(2026, 2, 10), date(2026, 2, 28))


def test_mid_cycle_period_exit_during_cycle():
    clipped = mid_cycle_period(
        date(2025, 1, 1), date(2026, 2, 20), date(2026, 2, 1), date(2026, 2, 28),
    )
    assert clipped == (date(2026, 2, 1), date(2026, 2, 20))


def test_mid_cycle_period_no_overlap():
    assert mid_cycle_period(date(2026, 3, 5), None, date(2026, 2, 1), date(2026, 2, 28)) is None
    assert mid_cycle_period(
        date(2025, 1, 1), date(2026, 1, 31), date(2026, 2, 1), date(2026, 2, 28),
    ) is None


def test_mid_cycle_salary_join_on_16th():
    """Joining Mon 16 Feb: 10 of 20 working days."""
    result = mid_cycle_salary(Decimal("44000"), FEB_2026, date(2026, 2, 16))
    assert result.total_working_days == 20
    assert result.actual_working_days == 10
    assert result.effective_start == date(2026, 2, 16)
    assert result.effective_end == date(2026, 2, 28)
    assert result.amount == Decimal("22000.00")


def test_mid_cycle_salary_exit_on_10th():
    result = mid_cycle_salary(
        Decimal("44000"), FEB_2026, date(2025, 4, 1), employee_end=date(2026, 2, 10),
    )
    assert result.actual_working_days == 7
    assert result.amount == Decimal("15400.00")


def test_mid_cycle_salary_holiday_reduces_both_sides():
    holidays = [Holiday(date=date(2026, 2, 17), jurisdiction="MH")]
    result = mid_cycle_salary(
        Decimal("38000"), FEB_2026, date(2026, 2, 16),
        holidays=holidays, jurisdiction="MH",
    )
    assert result.total_working_days == 19
    assert result.actual_working_days == 9
    assert result.amount == Decimal("18000.00")


def test_mid_cycle_salary_without_overlap_is_zero():
    result = mid_cycle_salary(Decimal("44000"), FEB_2026, date(2026, 3, 2))
    assert result.amount == Decimal("0")
    assert result.actual_working_days == 0
    assert result.effective_start is None


# ═════════════════════════════════════════════════════════════════════
# Overtime
# ═════════════════════════════════════════════════════════════════════


class TestOvertime:

    def test_default_config_rate(self):
        """22 days × 9 hours = 198 hours in a month."""
        assert hourly_rate(Decimal("39600"), SalaryCycleConfig()) == Decimal("200")

    def test_default_multiplier(self):
        assert overtime_pay(Decimal("39600"), 10, SalaryCycleConfig()) == Decimal("3000.00")

    def test_custom_config(self):
        config = SalaryCycleConfig(
            type=SalaryCycleType.weekly,
            working_days_per_month=20,
            working_hours_per_day=Decimal("8"),
            overtime_multiplier=Decimal("2"),
        )
        assert overtime_pay(Decimal("32000"), Decimal("2.5"), config) == Decimal("1000.00")

    def test_zero_hours(self):
        assert overtime_pay(Decimal("39600"), 0, SalaryCycleConfig()) == Decimal("0.00")

    def test_negative_hours_rejected(self):
        with pytest.raises(NegativeInputError):
            overtime_pay(Decimal("39600"), -1, SalaryCycleConfig())

    def test_negative_salary_rejected(self):
        with pytest.raises(NegativeInputError):
            hourly_rate(Decimal("-1"), SalaryCycleConfig())


# ═════════════════════════════════════════════════════════════════════
# Template validation
# ═════════════════════════════════════════════════════════════════════


def test_standard_template_valid(standard_template):
    result = validate_template(standard_template)
    assert result.valid is True
    assert result.total_pct == Decimal("100")


def test_default_template_valid():
    assert validate_template(DEFAULT_SALARY_TEMPLATE).valid is True


def test_template_within_tolerance():
    result = validate_template({"basic": 50, "hra": 20, "special": "30.05"})
    assert result.valid is True


def test_template_outside_tolerance():
    result = validate_template({"basic": 50, "hra": 20, "special": "30.2"})
    assert result.valid is False
    assert result.total_pct == Decimal("100.2")


def test_template_float_percentages_sum_exactly():
    """33.3 × 3 = 99.9 exactly, which sits on the tolerance boundary."""
    result = validate_template({"basic": 33.3, "hra": 33.3, "special": 33.3})
    assert result.total_pct == Decimal("99.9")
    assert result.valid is True


def test_empty_template_invalid():
    result = validate_template({})
    assert result.valid is False
    assert result.total_pct == 0


def test_require_valid_template_raises():
    with pytest.raises(TemplateValidationError) as exc_info:
        require_valid_template({"basic": 50, "hra": 20})
    assert exc_info.value.total_pct == Decimal("70")
    assert exc_info.value.status_code == 422


@pytest.mark.parametrize("bad", ["abc", None, "NaN", "Infinity", True])
def test_non_numeric_percentage_rejected(bad):
    """Unparseable or non-finite percentages are a configuration error."""
    with pytest.raises(ConfigValidationError) as exc_info:
        validate_template({"basic": bad, "hra": 60})
    assert exc_info.value.errors == {"basic": ["Percentage must be a finite number."]}


def test_parse_template_converts_to_decimal():
    assert parse_template({"basic": 40, "hra": "16.5", "special": 43.5}) == {
        "basic": Decimal("40"),
        "hra": Decimal("16.5"),
        "special": Decimal("43.5"),
    }

"""CTC breakdown test suite — statutory deductions, progressive tax and
the conservation rules every breakdown must satisfy.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from payroll_core.common.constants import DEFAULT_SALARY_TEMPLATE
from payroll_core.common.exceptions import (
    ConfigValidationError,
    NegativeInputError,
    TemplateValidationError,
)
from payroll_core.salary.breakdown import compute_annual_tax, compute_breakdown, load_tax_config
from payroll_core.salary.schemas import DEFAULT_TAX_SLABS, TaxConfig


# ═════════════════════════════════════════════════════════════════════
# Reference scenario: 6 LPA, Basic 50 / HRA 20 / Special 30
# ═════════════════════════════════════════════════════════════════════


def test_reference_breakdown(standard_template, tax_config):
    b = compute_breakdown(Decimal("600000"), standard_template, tax_config)

    assert b.monthly_gross == Decimal("50000.00")
    assert b.earnings == {
        "basic": Decimal("25000.00"),
        "hra": Decimal("10000.00"),
        "special": Decimal("15000.00"),
    }
    assert b.gross_salary == Decimal("50000.00")

    # PF capped at 15,000 basic
    assert b.pf_employee == Decimal("1800.00")
    assert b.pf_employer == Decimal("1800.00")
    # Gross above 21,000: no ESI
    assert b.esi_employee == 0
    assert b.esi_employer == 0
    assert b.professional_tax == Decimal("200.00")

    # 600,000 − 21,600 PF − 50,000 standard deduction
    assert b.annual_taxable_income == Decimal("528400")
    assert b.annual_tax == Decimal("11420.00")
    assert b.tds == Decimal("951.67")

    assert b.total_deductions == Decimal("2951.67")
    assert b.net_salary == Decimal("47048.33")
    assert b.employer_monthly_cost == Decimal("51800.00")
    assert b.annual_cost_to_company == Decimal("621600.00")
    assert b.warnings == []


# ═════════════════════════════════════════════════════════════════════
# Conservation and rounding
# ═════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    "ctc", ["0", "1", "7", "123457", "999999.99", "1850000", "4500000"],
)
def test_breakdown_conservation(ctc):
    """Earnings add up to gross; deductions and net reconcile exactly."""
    b = compute_breakdown(Decimal(ctc), DEFAULT_SALARY_TEMPLATE)

    assert sum(b.earnings.values()) == b.gross_salary
    assert b.total_deductions == b.pf_employee + b.esi_employee + b.professional_tax + b.tds
    assert b.gross_salary - b.total_deductions == b.net_salary
    assert b.annual_cost_to_company == b.employer_monthly_cost * 12

    for amount in [*b.earnings.values(), b.pf_employee, b.esi_employee, b.tds]:
        assert amount == amount.quantize(Decimal("0.01"))


def test_breakdown_is_deterministic(standard_template):
    first = compute_breakdown(Decimal("987654.32"), standard_template)
    second = compute_breakdown(Decimal("987654.32"), standard_template)
    assert first == second


def test_breakdown_is_immutable(standard_template):
    b = compute_breakdown(Decimal("600000"), standard_template)
    with pytest.raises(ValidationError):
        b.net_salary = Decimal("0")


def test_float_and_string_ctc_agree(standard_template):
    assert compute_breakdown(600000.0, standard_template) == compute_breakdown(
        "600000", standard_template,
    )


# ═════════════════════════════════════════════════════════════════════
# Statutory deductions
# ═════════════════════════════════════════════════════════════════════


def test_pf_below_ceiling_uses_full_basic(standard_template):
    b = compute_breakdown(Decimal("240000"), standard_template)
    assert b.pf_employee == Decimal("1200.00")


def test_pf_uncapped_when_ceiling_disabled(standard_template):
    b = compute_breakdown(
        Decimal("600000"), standard_template, TaxConfig(pf_wage_ceiling=None),
    )
    assert b.pf_employee == Decimal("3000.00")
    assert b.pf_employer == Decimal("3000.00")


def test_pf_zero_without_basic_component():
    b = compute_breakdown(Decimal("600000"), {"hra": 40, "special": 60})
    assert b.pf_employee == 0
    assert b.pf_employer == 0


def test_basic_component_matched_case_insensitively():
    b = compute_breakdown(Decimal("600000"), {"Basic": 50, "HRA": 20, "Special": 30})
    assert b.pf_employee == Decimal("1800.00")


def test_esi_applies_at_ceiling(standard_template):
    """Gross of exactly 21,000 is still covered by ESI."""
    b = compute_breakdown(Decimal("252000"), standard_template)
    assert b.gross_salary == Decimal("21000.00")
    assert b.esi_employee == Decimal("157.50")
    assert b.esi_employer == Decimal("682.50")
    assert b.employer_monthly_cost == Decimal("21000.00") + b.pf_employer + Decimal("682.50")


def test_esi_cliff_above_ceiling(standard_template):
    """One rupee over the ceiling drops ESI entirely."""
    b = compute_breakdown(Decimal("252012"), standard_template)
    assert b.gross_salary == Decimal("21001.00")
    assert b.esi_employee == 0
    assert b.esi_employer == 0


def test_tds_disabled(standard_template):
    b = compute_breakdown(
        Decimal("2400000"), standard_template, TaxConfig(tds_enabled=False),
    )
    assert b.tds == 0
    assert b.annual_tax == 0


def test_tds_monotonic_in_ctc(standard_template):
    previous = Decimal("0")
    for ctc in range(0, 3_000_001, 25_000):
        tds = compute_breakdown(Decimal(ctc), standard_template).tds
        assert tds >= previous
        previous = tds


def test_low_income_pays_no_tax(standard_template):
    b = compute_breakdown(Decimal("300000"), standard_template)
    assert b.annual_taxable_income == Decimal("232000")
    assert b.tds == 0


# ═════════════════════════════════════════════════════════════════════
# Negative net pay and input errors
# ═════════════════════════════════════════════════════════════════════


def test_negative_net_is_reported_not_raised(standard_template, caplog):
    """Zero CTC still owes professional tax: net goes negative with a warning."""
    b = compute_breakdown(Decimal("0"), standard_template)

    assert b.net_salary == Decimal("-200.00")
    assert len(b.warnings) == 1
    warning = b.warnings[0]
    assert warning.code == "negative_net_pay"
    assert warning.net_salary == Decimal("-200.00")
    assert "Negative net pay" in caplog.text


def test_negative_ctc_rejected(standard_template):
    with pytest.raises(NegativeInputError) as exc_info:
        compute_breakdown(Decimal("-1"), standard_template)
    assert exc_info.value.field == "annual_ctc"


def test_invalid_template_rejected():
    with pytest.raises(TemplateValidationError):
        compute_breakdown(Decimal("600000"), {"basic": 50, "hra": 20, "special": 31})


# ═════════════════════════════════════════════════════════════════════
# Progressive tax
# ═════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    "income, expected",
    [
        ("-5", "0"),
        ("0", "0"),
        ("300000", "0"),
        ("528400", "11420"),
        ("700000", "20000"),
        ("1000000", "50000"),
        ("1300000", "100000"),
        ("1600000", "170000"),
    ],
)
def test_compute_annual_tax(income, expected):
    assert compute_annual_tax(Decimal(income), DEFAULT_TAX_SLABS) == Decimal(expected)


def test_load_tax_config_from_mapping():
    config = load_tax_config({
        "pf_wage_ceiling": None,
        "tax_slabs": [{"threshold": "250000", "rate": "5"}],
    })
    assert config.pf_wage_ceiling is None
    assert len(config.tax_slabs) == 1


def test_load_tax_config_rejects_unsorted_slabs():
    with pytest.raises(ConfigValidationError):
        load_tax_config({
            "tax_slabs": [
                {"threshold": "700000", "rate": "10"},
                {"threshold": "300000", "rate": "5"},
            ],
        })


def test_load_tax_config_rejects_out_of_range_rate():
    with pytest.raises(ConfigValidationError) as exc_info:
        load_tax_config({"pf_employee_pct": "120"})
    assert "pf_employee_pct" in exc_info.value.errors


def test_load_tax_config_rejects_unknown_field():
    """camelCase keys are reported instead of falling back to defaults."""
    with pytest.raises(ConfigValidationError) as exc_info:
        load_tax_config({"pfWageCeiling": 20000})
    assert "pfWageCeiling" in exc_info.value.errors


def test_load_tax_config_rejects_unknown_slab_field():
    with pytest.raises(ConfigValidationError):
        load_tax_config({"tax_slabs": [{"threshold": "300000", "pct": "5"}]})


# ═════════════════════════════════════════════════════════════════════
# Tax configuration as plain data
# ═════════════════════════════════════════════════════════════════════


def test_breakdown_accepts_tax_config_mapping(standard_template):
    """Mapping data is parsed the same way as a TaxConfig instance."""
    from_mapping = compute_breakdown(
        Decimal("600000"), standard_template, {"pf_wage_ceiling": None},
    )
    from_model = compute_breakdown(
        Decimal("600000"), standard_template, TaxConfig(pf_wage_ceiling=None),
    )
    assert from_mapping == from_model
    assert from_mapping.pf_employee == Decimal("3000.00")


def test_breakdown_mapping_with_default_values(standard_template):
    b = compute_breakdown(Decimal("600000"), standard_template, {"pf_wage_ceiling": 15000})
    assert b.net_salary == Decimal("47048.33")


def test_breakdown_rejects_bad_tax_mapping(standard_template):
    with pytest.raises(ConfigValidationError):
        compute_breakdown(Decimal("600000"), standard_template, {"esi_employee_pct": "-1"})


def test_breakdown_rejects_non_numeric_percentage():
    with pytest.raises(ConfigValidationError) as exc_info:
        compute_breakdown(Decimal("600000"), {"basic": "abc", "hra": 100})
    assert "basic" in exc_info.value.errors

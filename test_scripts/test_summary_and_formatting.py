from __future__ import annotations

import pytest

from value_engine.schemas.assumptions import Assumptions
from value_engine.schemas.value_item import Dimension
from value_engine.services.summary_service import calculate_summary, fte_equivalent, hours_saved_per_month
from value_engine.utils.formatting import (
    format_currency,
    format_currency_compact,
    format_hours,
    format_input_currency,
    format_input_percent,
    format_multiple,
    format_number,
    format_percent,
    obfuscate_value,
)


# ---------------------------------------------------------------------------
# Calculation summary
# ---------------------------------------------------------------------------

def test_hours_saved_per_archetype(make_item):
    items = [
        make_item("task_elimination", tasksPerMonth=3000, minutesPerTask=8, hourlyRate=50),  # 400 h
        make_item("task_simplification", tasksPerMonth=600, minutesSavedPerTask=5),  # 50 h
        make_item("process_acceleration", processesPerMonth=10, timeBeforeHrs=8, timeAfterHrs=3),  # 50 h
        make_item("handoff_elimination", handoffsPerMonth=20, avgQueueTimeHrs=2.5),  # 50 h
        make_item("labor_avoidance", ftesAvoided=3, fullyLoadedAnnualCost=100000),  # no hours
    ]
    assert hours_saved_per_month(items) == pytest.approx(550)


def test_manual_override_does_not_change_hours(make_item):
    item = make_item("task_elimination", manual_annual_value=1, tasksPerMonth=120, minutesPerTask=30)
    assert hours_saved_per_month([item]) == pytest.approx(60)


def test_fte_equivalent():
    assert fte_equivalent(2080 / 12) == pytest.approx(1.0)
    assert fte_equivalent(0) == 0


def test_calculate_summary(make_item):
    items = [
        make_item("task_elimination", tasksPerMonth=3000, minutesPerTask=8, hourlyRate=50),
        make_item("compliance_assurance", expectedViolationsPerYear=5, avgPenaltyPerViolation=100000, reductionRate=0.55),
    ]
    a = Assumptions(projection_years=3, realization_ramp=[0.5, 1, 1], annual_growth_rate=0.1)
    summary = calculate_summary(items, a, current_spend=0, proposed_spend=51_500)

    assert summary.total_annual_value == pytest.approx(515_000)
    assert summary.roi_multiple == pytest.approx(10.0)
    assert [d.dimension for d in summary.dimension_totals] == [Dimension.RISK_QUALITY, Dimension.PRODUCTIVITY]
    assert summary.hours_saved_per_month == pytest.approx(400)
    assert summary.fte_equivalent == pytest.approx(400 * 12 / 2080)
    assert len(summary.projection) == 3
    assert summary.projection[0].value == pytest.approx(257_500)
    assert summary.projection[0].investment == 51_500


def test_summary_without_spend_has_no_roi(make_item, assumptions):
    summary = calculate_summary([make_item("tool_consolidation", toolsEliminated=1, annualLicenseCostPerTool=500)], assumptions)
    assert summary.roi_multiple is None
    payload = summary.model_dump(by_alias=True)
    assert payload["roiMultiple"] is None
    assert payload["fteEquivalent"] == 0


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "value,expected",
    [
        (1234567, "$1,234,567"),
        (0, "$0"),
        (0.5, "$1"),
        (2.5, "$3"),
        (12345.49, "$12,345"),
        (-50, "-$50"),
        (float("nan"), "$0"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_currency_compact():
    assert format_currency_compact(1_234_567) == "$1.2M"
    assert format_currency_compact(500_000) == "$500K"
    assert format_currency_compact(999) == "$999"
    assert format_currency_compact(-2_500_000) == "-$2.5M"


def test_formatting_handles_values_beyond_default_decimal_precision():
    assert format_currency(1e28) == "$10,000,000,000,000,000,000,000,000,000"
    assert format_currency(-1e30).startswith("-$1,000,000,000,000")
    assert format_number(1e26) == "100,000,000,000,000,000,000,000,000"
    assert format_currency_compact(1e30).endswith("M")


def test_format_number_and_percent():
    assert format_number(1234567) == "1,234,567"
    assert format_number(1234.5) == "1,234.5"
    assert format_number(0.12345) == "0.123"
    assert format_percent(0.15) == "15%"
    assert format_percent(0.155, precise=True) == "15.5%"
    assert format_multiple(20.24) == "20.2x"
    assert format_hours(1234.4) == "1,234 hrs"


def test_trace_literals():
    assert format_input_currency(50) == "$50"
    assert format_input_currency(12.5) == "$12.50"
    assert format_input_percent(0.1) == "10%"
    assert format_input_percent(0.025) == "2.5%"


@pytest.mark.parametrize(
    "value,expected",
    [
        (449, 400),
        (450, 500),
        (4_499, 4_000),
        (12_600, 15_000),
        (237_000, 225_000),
        (1_260_000, 1_300_000),
        (-12_600, -15_000),
    ],
)
def test_obfuscate_value(value, expected):
    assert obfuscate_value(value) == expected

from __future__ import annotations

import pytest

from value_engine.schemas.assumptions import Assumptions
from value_engine.schemas.value_item import Dimension, ValueItem
from value_engine.services.dimension_service import (
    DIMENSION_INFO,
    calculate_total_annual_value,
    compute_dimension_totals,
    dimension_breakdown,
)
from value_engine.services.projection_service import calculate_projection, calculate_roi_multiple


# ---------------------------------------------------------------------------
# Dimension rollups
# ---------------------------------------------------------------------------

def _portfolio(make_item):
    return [
        make_item("task_elimination", tasksPerMonth=3000, minutesPerTask=8, hourlyRate=50),  # 240K productivity
        make_item("tool_consolidation", toolsEliminated=3, annualLicenseCostPerTool=15000),  # 45K cost
        make_item("labor_avoidance", manual_annual_value=55000),  # 55K cost
        make_item("incident_prevention", incidentsPerYear=12, avgCostPerIncident=10000, reductionRate=0.3),  # 36K risk
    ]


def test_all_five_dimensions_zero_filled_in_canonical_order(make_item):
    rows = compute_dimension_totals(_portfolio(make_item))
    assert [r.dimension for r in rows] == list(DIMENSION_INFO)
    by_dim = {r.dimension: r for r in rows}
    assert by_dim[Dimension.REVENUE_IMPACT].total == 0
    assert by_dim[Dimension.REVENUE_IMPACT].item_count == 0
    assert by_dim[Dimension.REVENUE_IMPACT].percentage == 0
    assert by_dim[Dimension.COST_AVOIDANCE].total == pytest.approx(100_000)
    assert by_dim[Dimension.COST_AVOIDANCE].item_count == 2
    assert by_dim[Dimension.RISK_QUALITY].label == "Risk & Quality"


def test_percentages_sum_to_100(make_item):
    rows = compute_dimension_totals(_portfolio(make_item))
    assert sum(r.percentage for r in rows) == pytest.approx(100.0)
    by_dim = {r.dimension: r for r in rows}
    assert by_dim[Dimension.PRODUCTIVITY].percentage == pytest.approx(240_000 / 376_000 * 100)


def test_percentages_all_zero_when_grand_total_zero(make_item):
    rows = compute_dimension_totals([make_item("task_elimination")])
    assert all(r.percentage == 0 for r in rows)
    assert compute_dimension_totals([]) and all(r.total == 0 for r in compute_dimension_totals([]))


def test_breakdown_filters_and_sorts_descending(make_item):
    rows = dimension_breakdown(_portfolio(make_item))
    assert [r.dimension for r in rows] == [
        Dimension.PRODUCTIVITY,
        Dimension.COST_AVOIDANCE,
        Dimension.RISK_QUALITY,
    ]


def test_grand_total_includes_items_without_dimension(make_item):
    items = _portfolio(make_item) + [ValueItem(id="odd", archetype="legacy_category", manual_annual_value=4000)]
    assert calculate_total_annual_value(items) == pytest.approx(380_000)
    assert sum(r.total for r in compute_dimension_totals(items)) == pytest.approx(376_000)


# ---------------------------------------------------------------------------
# Projection / ROI
# ---------------------------------------------------------------------------

def test_projection_growth_and_ramp():
    a = Assumptions(projection_years=3, realization_ramp=[0.5, 1, 1], annual_growth_rate=0.1)
    years = calculate_projection(100_000, a, 0, 0)
    assert [y.year for y in years] == [1, 2, 3]
    assert [y.value for y in years] == [pytest.approx(50_000), pytest.approx(110_000), pytest.approx(121_000)]
    for y in years:
        assert y.investment == 0
        assert y.net_value == pytest.approx(y.value)


def test_projection_cumulative_fields():
    a = Assumptions(projection_years=3, realization_ramp=[0.5, 1, 1], annual_growth_rate=0.1)
    years = calculate_projection(100_000, a, current_spend=10_000, proposed_spend=40_000)
    assert [y.investment for y in years] == [30_000, 30_000, 30_000]
    assert years[0].net_value == pytest.approx(20_000)
    assert years[2].cumulative_value == pytest.approx(281_000)
    assert years[2].cumulative_investment == pytest.approx(90_000)
    assert years[2].cumulative_net_value == pytest.approx(191_000)


def test_missing_ramp_years_are_fully_realized():
    a = Assumptions(projection_years=5, realization_ramp=[0.25], annual_growth_rate=0.0)
    years = calculate_projection(1000, a)
    assert [y.value for y in years] == [250, 1000, 1000, 1000, 1000]


def test_spend_reduction_never_counts_as_negative_investment():
    a = Assumptions(projection_years=2)
    years = calculate_projection(1000, a, current_spend=50_000, proposed_spend=10_000)
    assert all(y.investment == 0 for y in years)


def test_projection_years_must_be_positive():
    with pytest.raises(ValueError):
        Assumptions(projection_years=0)


@pytest.mark.parametrize(
    "current,proposed,expected",
    [
        (0, 0, None),
        (100, 100, None),
        (200, 100, None),
        (0, 50_000, 4.0),
        (10_000, 60_000, 4.0),
    ],
)
def test_roi_multiple_boundary(current, proposed, expected):
    assert calculate_roi_multiple(200_000, current, proposed) == expected

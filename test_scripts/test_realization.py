from __future__ import annotations

import pytest

from value_engine.schemas.realization import ArchitectureItem, HealthStatus, Trend, UseCase
from value_engine.services.realization_service import (
    HEALTH_STATUS_INFO,
    compute_realization,
    compute_realization_summary,
    detect_trend,
    get_health_status,
    projected_runs_per_month,
)


def _use_case(uc_id="uc-1", name="Invoice intake", **kw):
    return UseCase(id=uc_id, name=name, **kw)


def test_no_telemetry_is_at_risk_even_with_high_value(make_item):
    item = make_item("task_elimination", tasksPerMonth=1000, minutesPerTask=30, hourlyRate=200)
    result = compute_realization(_use_case(), [item], [])
    assert result.has_run_data is False
    assert result.realization_rate == 0
    assert result.realized_annual_value == 0
    assert result.health_status == HealthStatus.AT_RISK
    assert result.trend == Trend.STABLE
    assert result.projected_annual_value == pytest.approx(1000 * 30 * 200 / 60 * 12)


def test_task_based_rate_scales_realized_value(make_item, make_run):
    item = make_item("task_elimination", tasksPerMonth=1000, minutesPerTask=6, hourlyRate=50)  # 60K/yr
    result = compute_realization(_use_case(), [item], [make_run("uc-1", 500, zap_id="a"), make_run("uc-1", 300, zap_id="b")])
    assert result.actual_runs_last_30_days == 800
    assert result.projected_runs_per_month == 1000
    assert result.realization_rate == pytest.approx(0.8)
    assert result.realized_monthly_value == pytest.approx(5000 * 0.8)
    assert result.realized_annual_value == pytest.approx(48_000)
    assert result.health_status == HealthStatus.HEALTHY


def test_negative_run_counts_floor_the_rate_at_zero(make_item, make_run):
    item = make_item("task_elimination", tasksPerMonth=100, minutesPerTask=6, hourlyRate=50)
    result = compute_realization(_use_case(), [item], [make_run("uc-1", -40)])
    assert result.realization_rate == 0.0
    assert result.realized_annual_value == 0.0
    assert result.health_status == HealthStatus.AT_RISK


def test_realization_rate_is_capped_at_two(make_item, make_run):
    item = make_item("handoff_elimination", handoffsPerMonth=10, avgQueueTimeHrs=1, hourlyRateOfWaitingParty=60)
    result = compute_realization(_use_case(), [item], [make_run("uc-1", 1_000_000)])
    assert result.realization_rate == 2.0
    assert result.realized_monthly_value == pytest.approx(10 * 60 * 2)


def test_projected_runs_use_each_archetypes_count_input(make_item):
    items = [
        make_item("task_elimination", tasksPerMonth=100),
        make_item("task_simplification", tasksPerMonth=50),
        make_item("process_acceleration", processesPerMonth=20),
        make_item("handoff_elimination", handoffsPerMonth=5),
        make_item("labor_avoidance", ftesAvoided=2),
    ]
    assert projected_runs_per_month(items) == 175


def test_non_task_items_realize_all_or_nothing(make_item, make_run):
    item = make_item("labor_avoidance", ftesAvoided=1, fullyLoadedAnnualCost=120_000)
    active = compute_realization(_use_case(), [item], [make_run("uc-1", 3)])
    assert active.realization_rate == 1.0
    assert active.realized_annual_value == pytest.approx(120_000)
    assert active.health_status == HealthStatus.HEALTHY

    idle = compute_realization(_use_case(), [item], [make_run("uc-1", 0)])
    assert idle.has_run_data is True
    assert idle.realization_rate == 0.0
    assert idle.realized_annual_value == 0
    assert idle.health_status == HealthStatus.AT_RISK


def test_task_items_with_zero_projected_runs_use_binary_rule(make_item, make_run):
    item = make_item("task_elimination", tasksPerMonth=0, manual_annual_value=12_000)
    result = compute_realization(_use_case(), [item], [make_run("uc-1", 40)])
    assert result.realization_rate == 1.0
    assert result.realized_annual_value == pytest.approx(12_000)


@pytest.mark.parametrize(
    "rate,expected",
    [
        (2.0, HealthStatus.HEALTHY),
        (0.8, HealthStatus.HEALTHY),
        (0.79, HealthStatus.WARNING),
        (0.5, HealthStatus.WARNING),
        (0.49, HealthStatus.AT_RISK),
        (0.0, HealthStatus.AT_RISK),
    ],
)
def test_health_thresholds(rate, expected):
    assert get_health_status(rate) == expected


def test_health_labels():
    assert HEALTH_STATUS_INFO[HealthStatus.AT_RISK].label == "At Risk"
    assert HEALTH_STATUS_INFO[HealthStatus.HEALTHY].label == "Healthy"


@pytest.mark.parametrize(
    "runs_30,runs_7,expected",
    [
        (300, 100, Trend.INCREASING),  # 428.6 / 300 = 1.43
        (300, 70, Trend.STABLE),  # 300 / 300 = 1.0
        (300, 40, Trend.DECREASING),  # 171.4 / 300 = 0.57
        (0, 50, Trend.STABLE),
    ],
)
def test_trend_detection(make_run, runs_30, runs_7, expected):
    assert detect_trend([make_run("uc-1", runs_30, runs_7)]) == expected


def test_trend_of_no_entries_is_stable():
    assert detect_trend([]) == Trend.STABLE


def test_summary_sorted_worst_first_and_rolled_up(make_item, make_run):
    use_cases = [
        _use_case("uc-a", "Healthy one", architecture=[ArchitectureItem(type="zap", name="Sync", zap_id="z-1")]),
        _use_case("uc-b", "No data"),
        _use_case("uc-c", "Half way"),
    ]
    items = [
        make_item("task_elimination", use_case_id="uc-a", tasksPerMonth=100, minutesPerTask=60, hourlyRate=10),  # 12K
        make_item("task_elimination", use_case_id="uc-b", tasksPerMonth=100, minutesPerTask=60, hourlyRate=10),  # 12K
        make_item("task_elimination", use_case_id="uc-c", tasksPerMonth=100, minutesPerTask=60, hourlyRate=20),  # 24K
        make_item("tool_consolidation", toolsEliminated=1, annualLicenseCostPerTool=999),  # unlinked
    ]
    runs = [make_run("uc-a", 100), make_run("uc-c", 60), make_run("uc-unknown", 500)]

    summary = compute_realization_summary(use_cases, items, runs)
    assert [r.use_case_id for r in summary.use_cases] == ["uc-b", "uc-c", "uc-a"]
    assert summary.projected_annual_value == pytest.approx(48_000)
    assert summary.realized_annual_value == pytest.approx(12_000 + 24_000 * 0.6)
    assert summary.overall_realization_rate == pytest.approx(26_400 / 48_000)
    assert summary.total_runs_last_30_days == 160
    assert summary.has_any_run_data is True
    assert summary.has_any_linked_zaps is True


def test_summary_without_projection_has_zero_overall_rate():
    summary = compute_realization_summary([_use_case()], [], [])
    assert summary.overall_realization_rate == 0
    assert summary.has_any_run_data is False
    assert summary.has_any_linked_zaps is False


def test_zap_without_id_is_not_linked():
    uc = _use_case(architecture=[ArchitectureItem(type="zap", name="Draft"), ArchitectureItem(type="table", name="T")])
    assert compute_realization_summary([uc], [], []).has_any_linked_zaps is False


def test_summary_serializes_camel_case(make_item, make_run):
    summary = compute_realization_summary([_use_case()], [], [make_run("uc-1", 5, 1)])
    payload = summary.model_dump(by_alias=True, mode="json")
    assert "overallRealizationRate" in payload
    assert payload["useCases"][0]["actualRunsLast30Days"] == 5
    assert payload["useCases"][0]["healthStatus"] == "healthy"

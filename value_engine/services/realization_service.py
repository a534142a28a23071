# automation_value_engine/value_engine/services/realization_service.py
"""
Projected-vs-realized value per use case, driven by automation run telemetry.

Realization rate is actual runs in the last 30 days over the runs the linked
task-based items imply per month, capped at MAX_REALIZATION_RATE. Use cases
whose items have no countable run proxy are credited all-or-nothing: any run
in the last 30 days counts as full realization.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

from value_engine.schemas.realization import (
    HealthStatus,
    RealizationSummary,
    Trend,
    UseCase,
    ValueRealized,
    ZapRunCacheEntry,
)
from value_engine.schemas.value_item import Archetype, ValueItem, parse_archetype
from value_engine.services.archetypes import resolve_input
from value_engine.services.archetypes.utils import clamp, safe_div
from value_engine.services.valuation_service import item_annual_value

logger = logging.getLogger("value_engine.services.realization")

MAX_REALIZATION_RATE = 2.0
HEALTHY_THRESHOLD = 0.8
WARNING_THRESHOLD = 0.5
TREND_UP_RATIO = 1.15
TREND_DOWN_RATIO = 0.85

# Task-based archetype -> input holding its monthly run count.
RUN_COUNT_INPUT: Dict[Archetype, str] = {
    Archetype.TASK_ELIMINATION: "tasksPerMonth",
    Archetype.TASK_SIMPLIFICATION: "tasksPerMonth",
    Archetype.PROCESS_ACCELERATION: "processesPerMonth",
    Archetype.HANDOFF_ELIMINATION: "handoffsPerMonth",
}


@dataclass(frozen=True)
class HealthInfo:
    label: str
    color: str
    bg_color: str


HEALTH_STATUS_INFO: Dict[HealthStatus, HealthInfo] = {
    HealthStatus.HEALTHY: HealthInfo("Healthy", "#059669", "#D1FAE5"),
    HealthStatus.WARNING: HealthInfo("Warning", "#D97706", "#FEF3C7"),
    HealthStatus.AT_RISK: HealthInfo("At Risk", "#DC2626", "#FEE2E2"),
}


def get_health_status(rate: float) -> HealthStatus:
    if rate >= HEALTHY_THRESHOLD:
        return HealthStatus.HEALTHY
    if rate >= WARNING_THRESHOLD:
        return HealthStatus.WARNING
    return HealthStatus.AT_RISK


def is_task_based(item: ValueItem) -> bool:
    archetype = parse_archetype(item.archetype)
    return archetype is not None and archetype in RUN_COUNT_INPUT


def projected_runs_per_month(items: Sequence[ValueItem]) -> float:
    total = 0.0
    for item in items:
        archetype = parse_archetype(item.archetype)
        if archetype is None or archetype not in RUN_COUNT_INPUT:
            continue
        total += resolve_input(item.inputs, RUN_COUNT_INPUT[archetype])
    return total


def detect_trend(zap_runs: Sequence[ZapRunCacheEntry]) -> Trend:
    """Compare the last week (scaled to 30 days) against the last 30 days."""
    total_30 = sum(r.runs_last_30_days for r in zap_runs)
    if total_30 == 0:
        return Trend.STABLE
    total_7 = sum(r.runs_last_7_days for r in zap_runs)
    ratio = (total_7 * (30 / 7)) / total_30
    if ratio > TREND_UP_RATIO:
        return Trend.INCREASING
    if ratio < TREND_DOWN_RATIO:
        return Trend.DECREASING
    return Trend.STABLE


def compute_realization(
    use_case: UseCase,
    linked_items: Sequence[ValueItem],
    zap_runs: Sequence[ZapRunCacheEntry],
) -> ValueRealized:
    projected_annual = sum((item_annual_value(item) for item in linked_items), 0.0)
    projected_runs = projected_runs_per_month(linked_items)
    actual_runs = sum(r.runs_last_30_days for r in zap_runs)
    has_run_data = len(zap_runs) > 0
    has_task_based = any(is_task_based(item) for item in linked_items)

    rate = 0.0
    realized_monthly = 0.0
    if has_run_data and projected_runs > 0 and has_task_based:
        rate = clamp(safe_div(actual_runs, projected_runs), 0.0, MAX_REALIZATION_RATE)
        realized_monthly = (projected_annual / 12) * rate
    elif has_run_data and projected_runs >= 0:
        # no countable proxy: any activity counts as full realization
        active = actual_runs > 0
        rate = 1.0 if active else 0.0
        realized_monthly = projected_annual / 12 if active else 0.0

    health = get_health_status(rate) if has_run_data else HealthStatus.AT_RISK
    return ValueRealized(
        use_case_id=use_case.id,
        use_case_name=use_case.name,
        projected_annual_value=projected_annual,
        actual_runs_last_30_days=actual_runs,
        projected_runs_per_month=projected_runs,
        realization_rate=rate,
        realized_monthly_value=realized_monthly,
        realized_annual_value=realized_monthly * 12,
        trend=detect_trend(zap_runs),
        health_status=health,
        has_run_data=has_run_data,
    )


def has_linked_zaps(use_case: UseCase) -> bool:
    return any(a.type == "zap" and a.zap_id for a in use_case.architecture)


def compute_realization_summary(
    use_cases: Sequence[UseCase],
    value_items: Sequence[ValueItem],
    zap_runs: Sequence[ZapRunCacheEntry],
) -> RealizationSummary:
    """Portfolio realization across use cases, worst realization first."""
    items_by_use_case: Dict[str, List[ValueItem]] = {}
    for item in value_items:
        if item.use_case_id is not None:
            items_by_use_case.setdefault(item.use_case_id, []).append(item)
    runs_by_use_case: Dict[str, List[ZapRunCacheEntry]] = {}
    for run in zap_runs:
        runs_by_use_case.setdefault(run.use_case_id, []).append(run)

    results = [
        compute_realization(uc, items_by_use_case.get(uc.id, []), runs_by_use_case.get(uc.id, []))
        for uc in use_cases
    ]

    projected = sum((r.projected_annual_value for r in results), 0.0)
    realized = sum((r.realized_annual_value for r in results), 0.0)
    total_runs = sum(r.actual_runs_last_30_days for r in results)
    overall = safe_div(realized, projected)

    results.sort(key=lambda r: r.realization_rate)

    summary = RealizationSummary(
        overall_realization_rate=overall,
        projected_annual_value=projected,
        realized_annual_value=realized,
        total_runs_last_30_days=total_runs,
        use_cases=results,
        has_any_run_data=any(r.has_run_data for r in results),
        has_any_linked_zaps=any(has_linked_zaps(uc) for uc in use_cases),
    )
    logger.info(
        "realization.computed",
        extra={
            "use_cases": len(results),
            "overall_realization_rate": overall,
            "at_risk": sum(1 for r in results if r.health_status == HealthStatus.AT_RISK),
        },
    )
    return summary


__all__ = [
    "MAX_REALIZATION_RATE",
    "RUN_COUNT_INPUT",
    "HealthInfo",
    "HEALTH_STATUS_INFO",
    "get_health_status",
    "is_task_based",
    "projected_runs_per_month",
    "detect_trend",
    "compute_realization",
    "has_linked_zaps",
    "compute_realization_summary",
]

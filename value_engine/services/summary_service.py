# automation_value_engine/value_engine/services/summary_service.py

from __future__ import annotations

import logging
from typing import Callable, Dict, Sequence

from value_engine.schemas.assumptions import Assumptions
from value_engine.schemas.projection import CalculationSummary
from value_engine.schemas.value_item import Archetype, ValueItem, parse_archetype
from value_engine.services.archetypes import resolve_input
from value_engine.services.dimension_service import calculate_total_annual_value, dimension_breakdown
from value_engine.services.projection_service import calculate_projection, calculate_roi_multiple

logger = logging.getLogger("value_engine.services.summary")

WORK_HOURS_PER_YEAR = 2080  # 40 h x 52 weeks


def _val(item: ValueItem, key: str) -> float:
    return resolve_input(item.inputs, key)


# Archetype -> hours of manual work it removes per month.
HOURS_SAVED: Dict[Archetype, Callable[[ValueItem], float]] = {
    Archetype.TASK_ELIMINATION: lambda i: _val(i, "tasksPerMonth") * _val(i, "minutesPerTask") / 60,
    Archetype.TASK_SIMPLIFICATION: lambda i: _val(i, "tasksPerMonth") * _val(i, "minutesSavedPerTask") / 60,
    Archetype.PROCESS_ACCELERATION: lambda i: (
        _val(i, "processesPerMonth") * (_val(i, "timeBeforeHrs") - _val(i, "timeAfterHrs"))
    ),
    Archetype.HANDOFF_ELIMINATION: lambda i: _val(i, "handoffsPerMonth") * _val(i, "avgQueueTimeHrs"),
}


def hours_saved_per_month(items: Sequence[ValueItem]) -> float:
    """Manual hours removed per month; based on inputs, so manual value overrides do not change it."""
    total = 0.0
    for item in items:
        archetype = parse_archetype(item.archetype)
        fn = HOURS_SAVED.get(archetype) if archetype is not None else None
        if fn is not None:
            total += fn(item)
    return total


def fte_equivalent(hours_per_month: float) -> float:
    return hours_per_month * 12 / WORK_HOURS_PER_YEAR


def calculate_summary(
    items: Sequence[ValueItem],
    assumptions: Assumptions,
    current_spend: float = 0.0,
    proposed_spend: float = 0.0,
) -> CalculationSummary:
    total = calculate_total_annual_value(items)
    hours = hours_saved_per_month(items)
    summary = CalculationSummary(
        total_annual_value=total,
        dimension_totals=dimension_breakdown(items),
        roi_multiple=calculate_roi_multiple(total, current_spend, proposed_spend),
        hours_saved_per_month=hours,
        fte_equivalent=fte_equivalent(hours),
        projection=calculate_projection(total, assumptions, current_spend, proposed_spend),
    )
    logger.info(
        "summary.done",
        extra={
            "items": len(items),
            "total_annual_value": total,
            "roi_multiple": summary.roi_multiple,
        },
    )
    return summary


__all__ = [
    "WORK_HOURS_PER_YEAR",
    "HOURS_SAVED",
    "hours_saved_per_month",
    "fte_equivalent",
    "calculate_summary",
]

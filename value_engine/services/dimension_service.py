# automation_value_engine/value_engine/services/dimension_service.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from value_engine.schemas.projection import DimensionTotal
from value_engine.schemas.value_item import Dimension, ValueItem
from value_engine.services.valuation_service import item_annual_value


@dataclass(frozen=True)
class DimensionInfo:
    label: str
    short_label: str
    description: str


# Canonical order for rollups.
DIMENSION_INFO: Dict[Dimension, DimensionInfo] = {
    Dimension.REVENUE_IMPACT: DimensionInfo(
        "Revenue Impact", "Revenue", "How automation increases top-line revenue"
    ),
    Dimension.SPEED_CYCLE_TIME: DimensionInfo(
        "Speed / Cycle Time", "Speed", "How automation accelerates business processes"
    ),
    Dimension.PRODUCTIVITY: DimensionInfo(
        "Productivity", "Productivity", "How automation eliminates or simplifies manual work"
    ),
    Dimension.COST_AVOIDANCE: DimensionInfo(
        "Cost Avoidance", "Cost", "How automation prevents unnecessary spending"
    ),
    Dimension.RISK_QUALITY: DimensionInfo(
        "Risk & Quality", "Risk", "How automation reduces errors and ensures compliance"
    ),
}


def calculate_total_annual_value(items: Sequence[ValueItem]) -> float:
    """Grand total over every item, including items with no resolvable dimension."""
    return sum((item_annual_value(item) for item in items), 0.0)


def compute_dimension_totals(items: Sequence[ValueItem]) -> List[DimensionTotal]:
    """Totals for all five dimensions in canonical order, zero-filled.

    percentage is each dimension's share of the summed dimension totals (0 when that sum is 0).
    """
    totals: Dict[Dimension, float] = {d: 0.0 for d in DIMENSION_INFO}
    counts: Dict[Dimension, int] = {d: 0 for d in DIMENSION_INFO}
    for item in items:
        if item.dimension is None:
            continue
        totals[item.dimension] += item_annual_value(item)
        counts[item.dimension] += 1

    grand_total = sum(totals.values())
    return [
        DimensionTotal(
            dimension=dim,
            label=info.label,
            total=totals[dim],
            item_count=counts[dim],
            percentage=(totals[dim] / grand_total * 100) if grand_total != 0 else 0.0,
        )
        for dim, info in DIMENSION_INFO.items()
    ]


def dimension_breakdown(items: Sequence[ValueItem]) -> List[DimensionTotal]:
    """Visualization view: dimensions with a positive total, largest first."""
    rows = [row for row in compute_dimension_totals(items) if row.total > 0]
    return sorted(rows, key=lambda row: row.total, reverse=True)


__all__ = [
    "DimensionInfo",
    "DIMENSION_INFO",
    "calculate_total_annual_value",
    "compute_dimension_totals",
    "dimension_breakdown",
]

# automation_value_engine/value_engine/schemas/projection.py

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from value_engine.schemas.common import CamelModel
from value_engine.schemas.value_item import Dimension


class YearProjection(CamelModel):
    year: int
    value: float
    investment: float
    net_value: float
    cumulative_value: float
    cumulative_investment: float
    cumulative_net_value: float


class DimensionTotal(CamelModel):
    dimension: Dimension
    label: str
    total: float = 0.0
    item_count: int = 0
    percentage: float = 0.0


class CalculationSummary(CamelModel):
    """Headline numbers for one calculation.

    dimension_totals is the breakdown view (non-zero dimensions, largest first).
    roi_multiple is None when there is no positive incremental spend.
    """
    total_annual_value: float
    dimension_totals: List[DimensionTotal] = Field(default_factory=list)
    roi_multiple: Optional[float] = None
    hours_saved_per_month: float = 0.0
    fte_equivalent: float = 0.0
    projection: List[YearProjection] = Field(default_factory=list)


__all__ = ["YearProjection", "DimensionTotal", "CalculationSummary"]

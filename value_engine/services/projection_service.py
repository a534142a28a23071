# automation_value_engine/value_engine/services/projection_service.py

from __future__ import annotations

import logging
from typing import List, Optional

from value_engine.schemas.assumptions import Assumptions
from value_engine.schemas.projection import YearProjection

logger = logging.getLogger("value_engine.services.projection")


def incremental_investment(current_spend: float = 0.0, proposed_spend: float = 0.0) -> float:
    return proposed_spend - current_spend


def calculate_projection(
    base_annual_value: float,
    assumptions: Assumptions,
    current_spend: float = 0.0,
    proposed_spend: float = 0.0,
) -> List[YearProjection]:
    """Multi-year schedule for a steady-state annual value.

    Year i+1 value = base * (1 + growth) ** i * ramp[i], with ramp years past the
    end of realization_ramp counted as 1.0. The incremental spend (never negative)
    is charged every year as a recurring commitment.
    """
    investment = max(0.0, incremental_investment(current_spend, proposed_spend))
    ramp = assumptions.realization_ramp

    projections: List[YearProjection] = []
    cumulative_value = 0.0
    cumulative_investment = 0.0
    for i in range(assumptions.projection_years):
        growth_multiplier = (1 + assumptions.annual_growth_rate) ** i
        realization_rate = ramp[i] if i < len(ramp) else 1.0
        value = base_annual_value * growth_multiplier * realization_rate

        cumulative_value += value
        cumulative_investment += investment
        projections.append(
            YearProjection(
                year=i + 1,
                value=value,
                investment=investment,
                net_value=value - investment,
                cumulative_value=cumulative_value,
                cumulative_investment=cumulative_investment,
                cumulative_net_value=cumulative_value - cumulative_investment,
            )
        )

    logger.debug(
        "projection.done",
        extra={"years": len(projections), "base_annual_value": base_annual_value, "investment": investment},
    )
    return projections


def calculate_roi_multiple(
    total_annual_value: float,
    current_spend: float = 0.0,
    proposed_spend: float = 0.0,
) -> Optional[float]:
    """Annual value per dollar of incremental spend; None without positive incremental spend."""
    investment = incremental_investment(current_spend, proposed_spend)
    if investment <= 0:
        return None
    return total_annual_value / investment


__all__ = ["incremental_investment", "calculate_projection", "calculate_roi_multiple"]

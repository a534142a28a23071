# automation_value_engine/value_engine/schemas/assumptions.py

from __future__ import annotations

from typing import List

from pydantic import Field

from value_engine.schemas.common import CamelModel


class HourlyRates(CamelModel):
    basic: float = 25.0  # admin staff
    operations: float = 50.0  # ops / IT
    engineering: float = 100.0
    executive: float = 200.0


class TaskMinutes(CamelModel):
    simple: float = 2.0
    medium: float = 8.0
    complex: float = 20.0


class Assumptions(CamelModel):
    """Calculation-wide assumptions used by the projection engine.

    realization_ramp[i] is the fraction of steady-state value realized in year i+1.
    Years beyond the end of the ramp are treated as fully realized (1.0).
    Rates are fractions (0.1 == 10%), not percentages.
    """
    hourly_rates: HourlyRates = Field(default_factory=HourlyRates)
    task_minutes: TaskMinutes = Field(default_factory=TaskMinutes)
    projection_years: int = Field(default=3, ge=1)
    realization_ramp: List[float] = Field(default_factory=lambda: [0.5, 1.0, 1.0])
    annual_growth_rate: float = 0.1
    avg_data_breach_cost: float = 150000.0
    avg_support_ticket_cost: float = 150.0


__all__ = ["HourlyRates", "TaskMinutes", "Assumptions"]

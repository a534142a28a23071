# automation_value_engine/value_engine/schemas/value_item.py

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field, field_validator, model_validator

from value_engine.schemas.common import CamelModel


class ConfidenceTier(str, Enum):
    """Trust level of a single numeric input.

    custom: typed in by the customer with no reasonable basis
    estimated: system default inside a documented benchmark range
    benchmarked: derived from observed platform data
    """
    CUSTOM = "custom"
    ESTIMATED = "estimated"
    BENCHMARKED = "benchmarked"


class Dimension(str, Enum):
    """Business-impact categories used for rollups."""
    REVENUE_IMPACT = "revenue_impact"
    SPEED_CYCLE_TIME = "speed_cycle_time"
    PRODUCTIVITY = "productivity"
    COST_AVOIDANCE = "cost_avoidance"
    RISK_QUALITY = "risk_quality"


class Archetype(str, Enum):
    """The 16 economic patterns a value item can follow."""
    # Revenue Impact (1.x)
    PIPELINE_VELOCITY = "pipeline_velocity"
    REVENUE_CAPTURE = "revenue_capture"
    REVENUE_EXPANSION = "revenue_expansion"
    TIME_TO_REVENUE = "time_to_revenue"
    # Speed / Cycle Time (2.x)
    PROCESS_ACCELERATION = "process_acceleration"
    HANDOFF_ELIMINATION = "handoff_elimination"
    # Productivity (3.x)
    TASK_ELIMINATION = "task_elimination"
    TASK_SIMPLIFICATION = "task_simplification"
    CONTEXT_SURFACING = "context_surfacing"
    # Cost Avoidance (4.x)
    LABOR_AVOIDANCE = "labor_avoidance"
    TOOL_CONSOLIDATION = "tool_consolidation"
    ERROR_REWORK_ELIMINATION = "error_rework_elimination"
    # Risk & Quality (5.x)
    COMPLIANCE_ASSURANCE = "compliance_assurance"
    DATA_INTEGRITY = "data_integrity"
    INCIDENT_PREVENTION = "incident_prevention"
    PROCESS_CONSISTENCY = "process_consistency"


ARCHETYPE_DIMENSION: Dict[Archetype, Dimension] = {
    Archetype.PIPELINE_VELOCITY: Dimension.REVENUE_IMPACT,
    Archetype.REVENUE_CAPTURE: Dimension.REVENUE_IMPACT,
    Archetype.REVENUE_EXPANSION: Dimension.REVENUE_IMPACT,
    Archetype.TIME_TO_REVENUE: Dimension.REVENUE_IMPACT,
    Archetype.PROCESS_ACCELERATION: Dimension.SPEED_CYCLE_TIME,
    Archetype.HANDOFF_ELIMINATION: Dimension.SPEED_CYCLE_TIME,
    Archetype.TASK_ELIMINATION: Dimension.PRODUCTIVITY,
    Archetype.TASK_SIMPLIFICATION: Dimension.PRODUCTIVITY,
    Archetype.CONTEXT_SURFACING: Dimension.PRODUCTIVITY,
    Archetype.LABOR_AVOIDANCE: Dimension.COST_AVOIDANCE,
    Archetype.TOOL_CONSOLIDATION: Dimension.COST_AVOIDANCE,
    Archetype.ERROR_REWORK_ELIMINATION: Dimension.COST_AVOIDANCE,
    Archetype.COMPLIANCE_ASSURANCE: Dimension.RISK_QUALITY,
    Archetype.DATA_INTEGRITY: Dimension.RISK_QUALITY,
    Archetype.INCIDENT_PREVENTION: Dimension.RISK_QUALITY,
    Archetype.PROCESS_CONSISTENCY: Dimension.RISK_QUALITY,
}


def parse_archetype(tag: Any) -> Optional[Archetype]:
    """Return the Archetype for a raw tag, or None when the tag is not one of the 16."""
    if isinstance(tag, Archetype):
        return tag
    try:
        return Archetype(tag)
    except ValueError:
        return None


class ValueInput(CamelModel):
    """One economic parameter of an archetype (e.g. tasks per month)."""
    value: Optional[float] = None
    confidence: ConfidenceTier = ConfidenceTier.CUSTOM
    source: Optional[str] = None


class ValueItem(CamelModel):
    """A single value opportunity, described through one archetype.

    manual_annual_value, when set, replaces the formula result outright;
    inputs are still used for confidence reporting.
    """
    id: str
    archetype: str
    dimension: Optional[Dimension] = None
    name: str = ""
    description: Optional[str] = None
    inputs: Dict[str, ValueInput] = Field(default_factory=dict)
    manual_annual_value: Optional[float] = None
    order: int = 0
    use_case_id: Optional[str] = None

    @field_validator("archetype", mode="before")
    @classmethod
    def archetype_to_str(cls, v):
        if isinstance(v, Archetype):
            return v.value
        return v

    @field_validator("inputs", mode="before")
    @classmethod
    def wrap_bare_numbers(cls, v):
        # Accept {"tasksPerMonth": 3000} as shorthand for {"tasksPerMonth": {"value": 3000}}
        if not isinstance(v, dict):
            return v
        return {
            key: ({"value": raw} if raw is None or isinstance(raw, (int, float)) else raw)
            for key, raw in v.items()
        }

    @model_validator(mode="after")
    def default_dimension_from_archetype(self) -> "ValueItem":
        if self.dimension is None:
            archetype = parse_archetype(self.archetype)
            if archetype is not None:
                self.dimension = ARCHETYPE_DIMENSION[archetype]
        return self


class ComputedValue(CamelModel):
    """Result of valuing one item: the annual figure, a readable trace and its trust level."""
    annual_value: float
    formula: str
    confidence: ConfidenceTier


__all__ = [
    "ConfidenceTier",
    "Dimension",
    "Archetype",
    "ARCHETYPE_DIMENSION",
    "parse_archetype",
    "ValueInput",
    "ValueItem",
    "ComputedValue",
]

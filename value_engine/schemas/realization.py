# automation_value_engine/value_engine/schemas/realization.py

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import Field

from value_engine.schemas.common import CamelModel


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    WARNING = "warning"
    AT_RISK = "at_risk"


class Trend(str, Enum):
    INCREASING = "increasing"
    STABLE = "stable"
    DECREASING = "decreasing"


class ArchitectureItem(CamelModel):
    """A building block of a deployed use case (Zap, interface, table or agent)."""
    type: Literal["zap", "interface", "table", "agent"]
    name: str
    url: Optional[str] = None
    zap_id: Optional[str] = None
    description: Optional[str] = None
    status: Optional[Literal["planned", "building", "active", "paused"]] = None


class UseCase(CamelModel):
    id: str
    name: str
    department: Optional[str] = None
    status: Literal["identified", "in_progress", "deployed", "future"] = "identified"
    implementation_effort: Literal["low", "medium", "high"] = "medium"
    description: Optional[str] = None
    architecture: List[ArchitectureItem] = Field(default_factory=list)
    order: int = 0


class ZapRunCacheEntry(CamelModel):
    """Run telemetry for one automation source, as fetched by the caller.

    Several entries may point at the same use case (one per Zap).
    fetched_at is epoch milliseconds.
    """
    zap_id: str
    use_case_id: str
    total_runs: int = 0
    runs_last_30_days: int = 0
    runs_last_7_days: int = 0
    successful_runs: int = 0
    failed_runs: int = 0
    last_run_at: Optional[str] = None
    fetched_at: float = 0.0


class ValueRealized(CamelModel):
    use_case_id: str
    use_case_name: str
    projected_annual_value: float
    actual_runs_last_30_days: int
    projected_runs_per_month: float
    realization_rate: float
    realized_monthly_value: float
    realized_annual_value: float
    trend: Trend
    health_status: HealthStatus
    has_run_data: bool


class RealizationSummary(CamelModel):
    """Portfolio view across use cases; use_cases is sorted worst realization first."""
    overall_realization_rate: float
    projected_annual_value: float
    realized_annual_value: float
    total_runs_last_30_days: int
    use_cases: List[ValueRealized] = Field(default_factory=list)
    has_any_run_data: bool = False
    has_any_linked_zaps: bool = False


__all__ = [
    "HealthStatus",
    "Trend",
    "ArchitectureItem",
    "UseCase",
    "ZapRunCacheEntry",
    "ValueRealized",
    "RealizationSummary",
]

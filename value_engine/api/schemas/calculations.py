# automation_value_engine/value_engine/api/schemas/calculations.py

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from value_engine.schemas.assumptions import Assumptions
from value_engine.schemas.common import CamelModel
from value_engine.schemas.patterns import PatternRef
from value_engine.schemas.projection import YearProjection
from value_engine.schemas.realization import UseCase, ZapRunCacheEntry
from value_engine.schemas.value_item import ConfidenceTier, Dimension, ValueItem
from value_engine.services.archetypes import FieldSpec


class ValuateRequest(CamelModel):
    items: List[ValueItem] = Field(default_factory=list)


class ValuatedItem(CamelModel):
    id: str
    annual_value: float
    formula: str
    confidence: ConfidenceTier


class SummaryRequest(CamelModel):
    items: List[ValueItem] = Field(default_factory=list)
    assumptions: Optional[Assumptions] = None
    current_spend: float = 0.0
    proposed_spend: float = 0.0


class ProjectionRequest(CamelModel):
    base_annual_value: float
    assumptions: Optional[Assumptions] = None
    current_spend: float = 0.0
    proposed_spend: float = 0.0


class ProjectionResponse(CamelModel):
    projection: List[YearProjection]
    roi_multiple: Optional[float] = None


class RealizationRequest(CamelModel):
    use_cases: List[UseCase] = Field(default_factory=list)
    value_items: List[ValueItem] = Field(default_factory=list)
    zap_runs: List[ZapRunCacheEntry] = Field(default_factory=list)


class DedupRequest(CamelModel):
    patterns: List[PatternRef] = Field(default_factory=list)


class ArchetypeRead(CamelModel):
    name: str
    label: str
    description: str
    dimension: Dimension
    formula_description: str
    fields: List[FieldSpec]

# automation_value_engine/value_engine/schemas/patterns.py

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from value_engine.schemas.common import CamelModel


class PatternRef(CamelModel):
    """A pre-packaged archetype configuration referenced by a value package.

    pattern_id is "<department>-<slug>", e.g. "sales-lead-routing".
    """
    pattern_id: str
    archetype: str
    name: str = ""
    description: str = ""
    estimated_annual_value: float = 0.0
    zap_count: Optional[int] = None
    key_apps: List[str] = Field(default_factory=list)


class ValuePackage(CamelModel):
    id: str
    name: str = ""
    patterns: List[PatternRef] = Field(default_factory=list)


class DedupResult(CamelModel):
    patterns: List[PatternRef] = Field(default_factory=list)
    total_before: int
    duplicates_removed: int
    total_after: int


__all__ = ["PatternRef", "ValuePackage", "DedupResult"]

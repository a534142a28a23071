# automation_value_engine/value_engine/services/archetypes/interfaces.py

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional, Protocol, Tuple

from pydantic import ConfigDict

from value_engine.schemas.common import CamelModel
from value_engine.schemas.value_item import ConfidenceTier


class FieldType(str, Enum):
    """How an input is entered and displayed."""
    NUMBER = "number"
    PERCENTAGE = "percentage"  # stored as a fraction, shown as %
    CURRENCY = "currency"
    HOURS = "hours"


class FieldSpec(CamelModel):
    """Metadata for one declared input of an archetype.

    default_value / range / source carry the published benchmark where one exists;
    fields the customer must supply have no default.
    """
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    type: FieldType = FieldType.NUMBER
    prompt: str = ""
    default_confidence: ConfidenceTier = ConfidenceTier.CUSTOM
    source: Optional[str] = None
    default_value: Optional[float] = None
    range: Optional[Tuple[float, float]] = None
    guidance: Optional[str] = None


class FormulaOutcome(NamedTuple):
    value: float
    expression: str  # formula with literal input values substituted, without the "= $result" suffix


class InputAccessor(Protocol):
    """Read-only view over an item's inputs, limited to one archetype's declared keys."""

    def __getitem__(self, key: str) -> float:  # pragma: no cover - interface only
        ...

    def show(self, key: str) -> str:  # pragma: no cover - interface only
        ...


class ArchetypeFormula(Protocol):
    """Protocol that every archetype formula satisfies."""

    def __call__(self, x: InputAccessor) -> FormulaOutcome:  # pragma: no cover - interface only
        ...


__all__ = [
    "FieldType",
    "FieldSpec",
    "FormulaOutcome",
    "InputAccessor",
    "ArchetypeFormula",
]

# automation_value_engine/value_engine/services/archetypes/utils.py

from __future__ import annotations

import math
from typing import Dict, Iterable, Mapping, Optional

from value_engine.schemas.value_item import ValueInput
from value_engine.services.archetypes.interfaces import FieldSpec, FieldType
from value_engine.utils.formatting import (
    format_input_currency,
    format_input_percent,
    format_number,
)


def resolve_input(inputs: Optional[Mapping[str, ValueInput]], key: str, default: float = 0.0) -> float:
    """Return inputs[key].value, or default when the key, its value, or a finite value is missing."""
    if not inputs:
        return default
    entry = inputs.get(key)
    if entry is None or entry.value is None:
        return default
    value = float(entry.value)
    if not math.isfinite(value):
        return default
    return value


def safe_div(numerator: float, denominator: float, default: float = 0.0) -> float:
    """numerator / denominator, or default when the denominator is not positive."""
    if denominator <= 0:
        return default
    return numerator / denominator


def clamp(value: Optional[float], min_value: float, max_value: float) -> float:
    """Bound a rate into [min_value, max_value]; None and NaN read as min_value."""
    if value is None or math.isnan(value):
        return min_value
    return max(min_value, min(max_value, value))


class ScopedInputs:
    """Input accessor that only answers for an archetype's declared fields.

    Asking for any other key is a programming error in the formula and raises ValueError;
    missing or non-finite values for declared keys read as 0.
    """

    def __init__(self, inputs: Optional[Mapping[str, ValueInput]], fields: Iterable[FieldSpec]):
        self._inputs = inputs or {}
        self._fields: Dict[str, FieldSpec] = {f.key: f for f in fields}

    def _spec(self, key: str) -> FieldSpec:
        spec = self._fields.get(key)
        if spec is None:
            raise ValueError(f"Input '{key}' is not declared for this archetype (declared: {sorted(self._fields)})")
        return spec

    def __getitem__(self, key: str) -> float:
        self._spec(key)
        return resolve_input(self._inputs, key)

    def show(self, key: str) -> str:
        spec = self._spec(key)
        value = resolve_input(self._inputs, key)
        if spec.type == FieldType.CURRENCY:
            return format_input_currency(value)
        if spec.type == FieldType.PERCENTAGE:
            return format_input_percent(value)
        return format_number(value)


__all__ = ["resolve_input", "safe_div", "clamp", "ScopedInputs"]

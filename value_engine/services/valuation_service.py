# automation_value_engine/value_engine/services/valuation_service.py

from __future__ import annotations

import logging
from typing import Iterable, List

from value_engine.schemas.value_item import ComputedValue, ValueItem, parse_archetype
from value_engine.services.archetypes import compute_archetype_value
from value_engine.services.confidence import aggregate_confidence
from value_engine.utils.formatting import format_currency

logger = logging.getLogger("value_engine.services.valuation")


def valuate(item: ValueItem) -> ComputedValue:
    """Resolve one item to its annual value, a readable trace and a confidence tier.

    Precedence:
    - manual_annual_value set -> that value, trace "Manual override: $X"
    - known archetype -> formula result, trace "<expression> = $X"
    - unknown archetype -> 0, trace "$0"
    Confidence always comes from the inputs, whatever path produced the value.
    """
    confidence = aggregate_confidence(item.inputs)

    if item.manual_annual_value is not None:
        value = item.manual_annual_value
        return ComputedValue(
            annual_value=value,
            formula=f"Manual override: {format_currency(value)}",
            confidence=confidence,
        )

    archetype = parse_archetype(item.archetype)
    if archetype is None:
        logger.warning(
            "valuation.unknown_archetype",
            extra={"item_id": item.id, "archetype": item.archetype},
        )
        return ComputedValue(annual_value=0.0, formula=format_currency(0.0), confidence=confidence)

    outcome = compute_archetype_value(archetype, item.inputs)
    return ComputedValue(
        annual_value=outcome.value,
        formula=f"{outcome.expression} = {format_currency(outcome.value)}",
        confidence=confidence,
    )


def item_annual_value(item: ValueItem) -> float:
    return valuate(item).annual_value


def valuate_items(items: Iterable[ValueItem]) -> List[ComputedValue]:
    return [valuate(item) for item in items]


__all__ = ["valuate", "item_annual_value", "valuate_items"]

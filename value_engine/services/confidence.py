# automation_value_engine/value_engine/services/confidence.py

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional

from value_engine.schemas.value_item import ConfidenceTier, ValueInput

# Higher rank == more trustworthy.
CONFIDENCE_RANK: Dict[ConfidenceTier, int] = {
    ConfidenceTier.CUSTOM: 0,
    ConfidenceTier.ESTIMATED: 1,
    ConfidenceTier.BENCHMARKED: 2,
}


def confidence_rank(tier: ConfidenceTier) -> int:
    return CONFIDENCE_RANK[ConfidenceTier(tier)]


def compare_confidence(a: ConfidenceTier, b: ConfidenceTier) -> int:
    """Three-way compare by trust: negative if a is less trustworthy than b, 0 if equal, positive otherwise."""
    return confidence_rank(a) - confidence_rank(b)


def lowest_confidence(tiers: Iterable[ConfidenceTier]) -> ConfidenceTier:
    """The least trustworthy tier among tiers; custom when there are none."""
    result: Optional[ConfidenceTier] = None
    for tier in tiers:
        if result is None or compare_confidence(tier, result) < 0:
            result = ConfidenceTier(tier)
    return result if result is not None else ConfidenceTier.CUSTOM


def aggregate_confidence(inputs: Optional[Mapping[str, ValueInput]]) -> ConfidenceTier:
    """An item is only as trustworthy as its least trustworthy input."""
    if not inputs:
        return ConfidenceTier.CUSTOM
    return lowest_confidence(v.confidence for v in inputs.values())


__all__ = [
    "CONFIDENCE_RANK",
    "confidence_rank",
    "compare_confidence",
    "lowest_confidence",
    "aggregate_confidence",
]

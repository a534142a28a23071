# automation_value_engine/value_engine/services/pattern_dedup.py

from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from value_engine.schemas.patterns import DedupResult, PatternRef, ValuePackage

logger = logging.getLogger("value_engine.services.pattern_dedup")


def extract_department(pattern_id: str) -> str:
    """Department prefix of a pattern id: "sales-lead-routing" -> "sales"; no hyphen -> whole id."""
    return pattern_id.split("-", 1)[0]


def deduplicate_patterns(patterns: Sequence[PatternRef]) -> DedupResult:
    """Remove redundant patterns when several bundles are combined.

    1. Same pattern_id: keep the first occurrence.
    2. Same (archetype, department): keep the highest estimated_annual_value,
       the earlier pattern winning ties. Groups keep first-appearance order.
    """
    by_id: Dict[str, PatternRef] = {}
    for pattern in patterns:
        if pattern.pattern_id not in by_id:
            by_id[pattern.pattern_id] = pattern

    by_group: Dict[Tuple[str, str], PatternRef] = {}
    for pattern in by_id.values():
        key = (pattern.archetype, extract_department(pattern.pattern_id))
        existing = by_group.get(key)
        if existing is None or pattern.estimated_annual_value > existing.estimated_annual_value:
            by_group[key] = pattern

    deduped: List[PatternRef] = list(by_group.values())
    total_before = len(patterns)
    if total_before != len(deduped):
        logger.debug(
            "pattern_dedup.removed",
            extra={"total_before": total_before, "total_after": len(deduped)},
        )
    return DedupResult(
        patterns=deduped,
        total_before=total_before,
        duplicates_removed=total_before - len(deduped),
        total_after=len(deduped),
    )


def deduplicate_packages(packages: Sequence[ValuePackage]) -> DedupResult:
    """Flatten bundles in order, then deduplicate their patterns."""
    return deduplicate_patterns([p for package in packages for p in package.patterns])


__all__ = ["extract_department", "deduplicate_patterns", "deduplicate_packages"]

# Shared fixtures for engine and API tests
from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import pytest

from value_engine.schemas.assumptions import Assumptions
from value_engine.schemas.realization import ZapRunCacheEntry
from value_engine.schemas.value_item import ConfidenceTier, ValueInput, ValueItem


@pytest.fixture
def assumptions() -> Assumptions:
    return Assumptions()


@pytest.fixture
def make_item() -> Callable[..., ValueItem]:
    """Build a ValueItem from plain numbers: make_item("task_elimination", tasksPerMonth=3000, ...)."""
    counter = {"n": 0}

    def _make(
        archetype: str,
        manual_annual_value: Optional[float] = None,
        use_case_id: Optional[str] = None,
        confidence: ConfidenceTier = ConfidenceTier.CUSTOM,
        **inputs: float,
    ) -> ValueItem:
        counter["n"] += 1
        return ValueItem(
            id=f"vi-{counter['n']}",
            archetype=archetype,
            name=f"{archetype} #{counter['n']}",
            inputs={k: ValueInput(value=v, confidence=confidence) for k, v in inputs.items()},
            manual_annual_value=manual_annual_value,
            use_case_id=use_case_id,
        )

    return _make


@pytest.fixture
def make_run() -> Callable[..., ZapRunCacheEntry]:
    def _make(use_case_id: str, runs_30: int, runs_7: int = 0, zap_id: str = "zap-1", **extra: Any) -> ZapRunCacheEntry:
        fields: Dict[str, Any] = {
            "zap_id": zap_id,
            "use_case_id": use_case_id,
            "total_runs": runs_30,
            "runs_last_30_days": runs_30,
            "runs_last_7_days": runs_7,
            "successful_runs": runs_30,
            "failed_runs": 0,
            "fetched_at": 1_700_000_000_000,
        }
        fields.update(extra)
        return ZapRunCacheEntry(**fields)

    return _make

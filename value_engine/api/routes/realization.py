# automation_value_engine/value_engine/api/routes/realization.py

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from value_engine.api.deps import require_shared_secret
from value_engine.api.schemas.calculations import DedupRequest, RealizationRequest
from value_engine.schemas.patterns import DedupResult
from value_engine.schemas.realization import RealizationSummary
from value_engine.services.pattern_dedup import deduplicate_patterns
from value_engine.services.realization_service import compute_realization_summary


router = APIRouter(prefix="/api", tags=["realization"])


@router.post("/realization", response_model=RealizationSummary, dependencies=[Depends(require_shared_secret)])
def realization(req: RealizationRequest) -> RealizationSummary:
    """
    Projected vs realized value per use case from caller-supplied run telemetry.
    """
    try:
        return compute_realization_summary(req.use_cases, req.value_items, req.zap_runs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/patterns/dedup", response_model=DedupResult, dependencies=[Depends(require_shared_secret)])
def dedup_patterns(req: DedupRequest) -> DedupResult:
    try:
        return deduplicate_patterns(req.patterns)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

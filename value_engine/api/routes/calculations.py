# automation_value_engine/value_engine/api/routes/calculations.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from value_engine.api.deps import require_shared_secret, resolve_assumptions
from value_engine.api.schemas.calculations import (
    ArchetypeRead,
    ProjectionRequest,
    ProjectionResponse,
    SummaryRequest,
    ValuatedItem,
    ValuateRequest,
)
from value_engine.schemas.projection import CalculationSummary
from value_engine.services.archetypes import ARCHETYPES
from value_engine.services.projection_service import calculate_projection, calculate_roi_multiple
from value_engine.services.summary_service import calculate_summary
from value_engine.services.valuation_service import valuate


router = APIRouter(prefix="/api", tags=["calculations"])


@router.post("/items/valuate", response_model=List[ValuatedItem], dependencies=[Depends(require_shared_secret)])
def valuate_items(req: ValuateRequest) -> List[ValuatedItem]:
    """
    Annual value, formula trace and confidence for each item, in request order.
    """
    try:
        results = []
        for item in req.items:
            computed = valuate(item)
            results.append(
                ValuatedItem(
                    id=item.id,
                    annual_value=computed.annual_value,
                    formula=computed.formula,
                    confidence=computed.confidence,
                )
            )
        return results
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/summary", response_model=CalculationSummary, dependencies=[Depends(require_shared_secret)])
def summary(req: SummaryRequest) -> CalculationSummary:
    try:
        return calculate_summary(
            req.items,
            resolve_assumptions(req.assumptions),
            current_spend=req.current_spend,
            proposed_spend=req.proposed_spend,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/projection", response_model=ProjectionResponse, dependencies=[Depends(require_shared_secret)])
def projection(req: ProjectionRequest) -> ProjectionResponse:
    try:
        years = calculate_projection(
            req.base_annual_value,
            resolve_assumptions(req.assumptions),
            current_spend=req.current_spend,
            proposed_spend=req.proposed_spend,
        )
        roi = calculate_roi_multiple(req.base_annual_value, req.current_spend, req.proposed_spend)
        return ProjectionResponse(projection=years, roi_multiple=roi)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.get("/archetypes", response_model=List[ArchetypeRead], dependencies=[Depends(require_shared_secret)])
def list_archetypes() -> List[ArchetypeRead]:
    return [
        ArchetypeRead(
            name=info.name.value,
            label=info.label,
            description=info.description,
            dimension=info.dimension,
            formula_description=info.formula_description,
            fields=info.fields,
        )
        for info in ARCHETYPES.values()
    ]

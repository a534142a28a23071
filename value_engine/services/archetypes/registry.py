# automation_value_engine/value_engine/services/archetypes/registry.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from value_engine.schemas.value_item import (
    ARCHETYPE_DIMENSION,
    Archetype,
    Dimension,
    ValueInput,
)
from value_engine.services.archetypes import formulas
from value_engine.services.archetypes.fields import ARCHETYPE_FIELDS
from value_engine.services.archetypes.interfaces import ArchetypeFormula, FieldSpec, FormulaOutcome
from value_engine.services.archetypes.utils import ScopedInputs


@dataclass(frozen=True)
class ArchetypeInfo:
    name: Archetype
    label: str
    description: str
    formula_description: str
    formula: ArchetypeFormula

    @property
    def dimension(self) -> Dimension:
        return ARCHETYPE_DIMENSION[self.name]

    @property
    def fields(self) -> List[FieldSpec]:
        return ARCHETYPE_FIELDS[self.name]

    @property
    def required_fields(self) -> List[str]:
        return [f.key for f in self.fields]


def _info(name: Archetype, label: str, description: str, formula_description: str) -> ArchetypeInfo:
    return ArchetypeInfo(
        name=name,
        label=label,
        description=description,
        formula_description=formula_description,
        formula=getattr(formulas, name.value),
    )


ARCHETYPES: Dict[Archetype, ArchetypeInfo] = {
    info.name: info
    for info in [
        _info(Archetype.PIPELINE_VELOCITY, "Pipeline Velocity",
              "Automation increases deal flow rate through pipeline",
              "dealsPerQuarter x avgDealValue x conversionLift x 4"),
        _info(Archetype.REVENUE_CAPTURE, "Revenue Capture",
              "Automation catches revenue that would otherwise leak",
              "annualRevenue x leakageRate x captureImprovement"),
        _info(Archetype.REVENUE_EXPANSION, "Revenue Expansion",
              "Automation drives upsell/cross-sell at scale",
              "customerBase x expansionRate x avgExpansionValue x lift"),
        _info(Archetype.TIME_TO_REVENUE, "Time-to-Revenue",
              "Automation accelerates revenue recognition from new customers",
              "newCustomersPerYear x revenuePerCustomer x daysAccelerated / 365"),
        _info(Archetype.PROCESS_ACCELERATION, "Process Acceleration",
              "Automation reduces end-to-end cycle time for a process",
              "processesPerMonth x (timeBeforeHrs - timeAfterHrs) x hourlyRate x 12"),
        _info(Archetype.HANDOFF_ELIMINATION, "Handoff Elimination",
              "Automation removes manual handoff delays between people/systems",
              "handoffsPerMonth x avgQueueTimeHrs x hourlyRateOfWaitingParty x 12"),
        _info(Archetype.TASK_ELIMINATION, "Task Elimination",
              "Automation fully replaces manual tasks",
              "tasksPerMonth x minutesPerTask x (hourlyRate / 60) x 12"),
        _info(Archetype.TASK_SIMPLIFICATION, "Task Simplification",
              "Automation reduces time per task (not eliminates)",
              "tasksPerMonth x minutesSavedPerTask x (hourlyRate / 60) x 12"),
        _info(Archetype.CONTEXT_SURFACING, "Context Surfacing",
              "Automation delivers information proactively, reducing meetings and searches",
              "(meetingsAvoidedPerMonth x attendeesPerMeeting x meetingDurationHrs x meetingHourlyRate x 12)"
              " + (searchesAvoidedPerMonth x avgSearchTimeMin x (searchHourlyRate / 60) x 12)"),
        _info(Archetype.LABOR_AVOIDANCE, "Labor Avoidance",
              "Automation prevents the need to hire additional headcount",
              "ftesAvoided x fullyLoadedAnnualCost"),
        _info(Archetype.TOOL_CONSOLIDATION, "Tool Consolidation",
              "Automation enables eliminating redundant software tools",
              "toolsEliminated x annualLicenseCostPerTool"),
        _info(Archetype.ERROR_REWORK_ELIMINATION, "Error/Rework Elimination",
              "Automation prevents errors that require costly rework",
              "errorsPerMonth x avgCostPerError x reductionRate x 12"),
        _info(Archetype.COMPLIANCE_ASSURANCE, "Compliance Assurance",
              "Automation reduces compliance violations and associated penalties",
              "expectedViolationsPerYear x avgPenaltyPerViolation x reductionRate"),
        _info(Archetype.DATA_INTEGRITY, "Data Integrity",
              "Automation ensures data consistency across systems",
              "recordsPerMonth x errorRate x costPerError x reductionRate x 12"),
        _info(Archetype.INCIDENT_PREVENTION, "Incident Prevention",
              "Automation prevents or reduces impact of operational incidents",
              "incidentsPerYear x avgCostPerIncident x reductionRate"),
        _info(Archetype.PROCESS_CONSISTENCY, "Process Consistency",
              "Automation ensures processes execute the same way every time",
              "processesPerMonth x defectRate x costPerDefect x reductionRate x 12"),
    ]
}


def _check_registry_complete() -> None:
    missing = [a.value for a in Archetype if a not in ARCHETYPES or a not in ARCHETYPE_FIELDS]
    if missing:
        raise RuntimeError(f"Archetypes without a registered formula or field set: {missing}")


_check_registry_complete()


def get_archetype_info(archetype: Archetype) -> ArchetypeInfo:
    info = ARCHETYPES.get(archetype)
    if not info:
        raise ValueError(f"Unknown archetype: {archetype}")
    return info


def get_formula(archetype: Archetype) -> ArchetypeFormula:
    return get_archetype_info(archetype).formula


def compute_archetype_value(
    archetype: Archetype, inputs: Optional[Mapping[str, ValueInput]]
) -> FormulaOutcome:
    """Evaluate an archetype's formula over a (possibly sparse) input map."""
    info = get_archetype_info(archetype)
    return info.formula(ScopedInputs(inputs, info.fields))


def build_default_inputs(archetype: Archetype) -> Dict[str, ValueInput]:
    """Seed an input map for a new item: benchmark defaults where published, 0 elsewhere."""
    return {
        spec.key: ValueInput(
            value=spec.default_value if spec.default_value is not None else 0.0,
            confidence=spec.default_confidence,
            source=spec.source,
        )
        for spec in get_archetype_info(archetype).fields
    }


__all__ = [
    "ArchetypeInfo",
    "ARCHETYPES",
    "get_archetype_info",
    "get_formula",
    "compute_archetype_value",
    "build_default_inputs",
]

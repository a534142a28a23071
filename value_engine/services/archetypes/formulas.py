# automation_value_engine/value_engine/services/archetypes/formulas.py
"""
Annual-value formulas, one per archetype.

Each formula reads its inputs through a ScopedInputs accessor and returns the
annual dollar value together with the expression it evaluated (literal input
values substituted). Monthly inputs are annualized with x 12, quarterly with x 4,
day counts with / 365; annual inputs are used as-is.
"""
from __future__ import annotations

from value_engine.services.archetypes.interfaces import FormulaOutcome, InputAccessor


# ---------------------------------------------------------------------------
# Revenue Impact
# ---------------------------------------------------------------------------

def pipeline_velocity(x: InputAccessor) -> FormulaOutcome:
    value = x["dealsPerQuarter"] * x["avgDealValue"] * x["conversionLift"] * 4
    expr = f"{x.show('dealsPerQuarter')} x {x.show('avgDealValue')} x {x.show('conversionLift')} x 4"
    return FormulaOutcome(value, expr)


def revenue_capture(x: InputAccessor) -> FormulaOutcome:
    value = x["annualRevenue"] * x["leakageRate"] * x["captureImprovement"]
    expr = f"{x.show('annualRevenue')} x {x.show('leakageRate')} x {x.show('captureImprovement')}"
    return FormulaOutcome(value, expr)


def revenue_expansion(x: InputAccessor) -> FormulaOutcome:
    value = x["customerBase"] * x["expansionRate"] * x["avgExpansionValue"] * x["lift"]
    expr = (
        f"{x.show('customerBase')} x {x.show('expansionRate')} x "
        f"{x.show('avgExpansionValue')} x {x.show('lift')}"
    )
    return FormulaOutcome(value, expr)


def time_to_revenue(x: InputAccessor) -> FormulaOutcome:
    value = x["newCustomersPerYear"] * x["revenuePerCustomer"] * x["daysAccelerated"] / 365
    expr = (
        f"{x.show('newCustomersPerYear')} x {x.show('revenuePerCustomer')} x "
        f"{x.show('daysAccelerated')} / 365"
    )
    return FormulaOutcome(value, expr)


# ---------------------------------------------------------------------------
# Speed / Cycle Time
# ---------------------------------------------------------------------------

def process_acceleration(x: InputAccessor) -> FormulaOutcome:
    value = x["processesPerMonth"] * (x["timeBeforeHrs"] - x["timeAfterHrs"]) * x["hourlyRate"] * 12
    expr = (
        f"{x.show('processesPerMonth')} x ({x.show('timeBeforeHrs')} - {x.show('timeAfterHrs')}) x "
        f"{x.show('hourlyRate')} x 12"
    )
    return FormulaOutcome(value, expr)


def handoff_elimination(x: InputAccessor) -> FormulaOutcome:
    value = x["handoffsPerMonth"] * x["avgQueueTimeHrs"] * x["hourlyRateOfWaitingParty"] * 12
    expr = (
        f"{x.show('handoffsPerMonth')} x {x.show('avgQueueTimeHrs')} x "
        f"{x.show('hourlyRateOfWaitingParty')} x 12"
    )
    return FormulaOutcome(value, expr)


# ---------------------------------------------------------------------------
# Productivity
# ---------------------------------------------------------------------------

def task_elimination(x: InputAccessor) -> FormulaOutcome:
    value = x["tasksPerMonth"] * x["minutesPerTask"] * (x["hourlyRate"] / 60) * 12
    expr = f"{x.show('tasksPerMonth')} x {x.show('minutesPerTask')} x ({x.show('hourlyRate')} / 60) x 12"
    return FormulaOutcome(value, expr)


def task_simplification(x: InputAccessor) -> FormulaOutcome:
    value = x["tasksPerMonth"] * x["minutesSavedPerTask"] * (x["hourlyRate"] / 60) * 12
    expr = f"{x.show('tasksPerMonth')} x {x.show('minutesSavedPerTask')} x ({x.show('hourlyRate')} / 60) x 12"
    return FormulaOutcome(value, expr)


def context_surfacing(x: InputAccessor) -> FormulaOutcome:
    # meeting time avoided + search time avoided
    meetings = (
        x["meetingsAvoidedPerMonth"] * x["attendeesPerMeeting"] * x["meetingDurationHrs"]
        * x["meetingHourlyRate"] * 12
    )
    searches = x["searchesAvoidedPerMonth"] * x["avgSearchTimeMin"] * (x["searchHourlyRate"] / 60) * 12
    expr = (
        f"({x.show('meetingsAvoidedPerMonth')} x {x.show('attendeesPerMeeting')} x "
        f"{x.show('meetingDurationHrs')} x {x.show('meetingHourlyRate')} x 12) + "
        f"({x.show('searchesAvoidedPerMonth')} x {x.show('avgSearchTimeMin')} x "
        f"({x.show('searchHourlyRate')} / 60) x 12)"
    )
    return FormulaOutcome(meetings + searches, expr)


# ---------------------------------------------------------------------------
# Cost Avoidance
# ---------------------------------------------------------------------------

def labor_avoidance(x: InputAccessor) -> FormulaOutcome:
    value = x["ftesAvoided"] * x["fullyLoadedAnnualCost"]
    expr = f"{x.show('ftesAvoided')} x {x.show('fullyLoadedAnnualCost')}"
    return FormulaOutcome(value, expr)


def tool_consolidation(x: InputAccessor) -> FormulaOutcome:
    value = x["toolsEliminated"] * x["annualLicenseCostPerTool"]
    expr = f"{x.show('toolsEliminated')} x {x.show('annualLicenseCostPerTool')}"
    return FormulaOutcome(value, expr)


def error_rework_elimination(x: InputAccessor) -> FormulaOutcome:
    value = x["errorsPerMonth"] * x["avgCostPerError"] * x["reductionRate"] * 12
    expr = f"{x.show('errorsPerMonth')} x {x.show('avgCostPerError')} x {x.show('reductionRate')} x 12"
    return FormulaOutcome(value, expr)


# ---------------------------------------------------------------------------
# Risk & Quality
# ---------------------------------------------------------------------------

def compliance_assurance(x: InputAccessor) -> FormulaOutcome:
    value = x["expectedViolationsPerYear"] * x["avgPenaltyPerViolation"] * x["reductionRate"]
    expr = (
        f"{x.show('expectedViolationsPerYear')} x {x.show('avgPenaltyPerViolation')} x "
        f"{x.show('reductionRate')}"
    )
    return FormulaOutcome(value, expr)


def data_integrity(x: InputAccessor) -> FormulaOutcome:
    value = x["recordsPerMonth"] * x["errorRate"] * x["costPerError"] * x["reductionRate"] * 12
    expr = (
        f"{x.show('recordsPerMonth')} x {x.show('errorRate')} x {x.show('costPerError')} x "
        f"{x.show('reductionRate')} x 12"
    )
    return FormulaOutcome(value, expr)


def incident_prevention(x: InputAccessor) -> FormulaOutcome:
    value = x["incidentsPerYear"] * x["avgCostPerIncident"] * x["reductionRate"]
    expr = f"{x.show('incidentsPerYear')} x {x.show('avgCostPerIncident')} x {x.show('reductionRate')}"
    return FormulaOutcome(value, expr)


def process_consistency(x: InputAccessor) -> FormulaOutcome:
    value = x["processesPerMonth"] * x["defectRate"] * x["costPerDefect"] * x["reductionRate"] * 12
    expr = (
        f"{x.show('processesPerMonth')} x {x.show('defectRate')} x {x.show('costPerDefect')} x "
        f"{x.show('reductionRate')} x 12"
    )
    return FormulaOutcome(value, expr)


__all__ = [
    "pipeline_velocity",
    "revenue_capture",
    "revenue_expansion",
    "time_to_revenue",
    "process_acceleration",
    "handoff_elimination",
    "task_elimination",
    "task_simplification",
    "context_surfacing",
    "labor_avoidance",
    "tool_consolidation",
    "error_rework_elimination",
    "compliance_assurance",
    "data_integrity",
    "incident_prevention",
    "process_consistency",
]

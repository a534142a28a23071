# automation_value_engine/value_engine/services/archetypes/fields.py
"""
Declared inputs per archetype, with prompts and published benchmark defaults.

Percentages are fractions (0.10 == 10%). Fields without default_value must be
supplied by the customer.
"""
from __future__ import annotations

from typing import Dict, List

from value_engine.schemas.value_item import Archetype, ConfidenceTier
from value_engine.services.archetypes.interfaces import FieldSpec, FieldType

C = ConfidenceTier.CUSTOM
E = ConfidenceTier.ESTIMATED
B = ConfidenceTier.BENCHMARKED

NUM = FieldType.NUMBER
PCT = FieldType.PERCENTAGE
USD = FieldType.CURRENCY
HRS = FieldType.HOURS


ARCHETYPE_FIELDS: Dict[Archetype, List[FieldSpec]] = {
    Archetype.PIPELINE_VELOCITY: [
        FieldSpec(key="dealsPerQuarter", label="Deals per quarter", type=NUM,
                  prompt="How many deals enter your pipeline per quarter?", default_confidence=C),
        FieldSpec(key="avgDealValue", label="Avg deal value ($)", type=USD,
                  prompt="What's your average deal size?", default_confidence=C),
        FieldSpec(key="conversionLift", label="Conversion lift (%)", type=PCT,
                  prompt="Expected conversion rate improvement?", default_confidence=E,
                  source="Zapier benchmark: 5-15% lift", default_value=0.10, range=(0.05, 0.15)),
    ],
    Archetype.REVENUE_CAPTURE: [
        FieldSpec(key="annualRevenue", label="Annual revenue ($)", type=USD,
                  prompt="What's your total annual revenue?", default_confidence=C),
        FieldSpec(key="leakageRate", label="Revenue leakage rate (%)", type=PCT,
                  prompt="Estimated revenue leakage rate?", default_confidence=E,
                  source="Industry benchmark: 1-3%", default_value=0.02, range=(0.01, 0.03)),
        FieldSpec(key="captureImprovement", label="Capture improvement (%)", type=PCT,
                  prompt="Expected improvement in capturing leaked revenue?", default_confidence=E,
                  source="Zapier benchmark: 30-60%", default_value=0.45, range=(0.30, 0.60)),
    ],
    Archetype.REVENUE_EXPANSION: [
        FieldSpec(key="customerBase", label="Active customers", type=NUM,
                  prompt="How many active customers do you have?", default_confidence=C),
        FieldSpec(key="expansionRate", label="Current expansion rate (%)", type=PCT,
                  prompt="Current upsell/cross-sell rate?", default_confidence=C),
        FieldSpec(key="avgExpansionValue", label="Avg expansion value ($)", type=USD,
                  prompt="Average expansion deal value?", default_confidence=C),
        FieldSpec(key="lift", label="Expansion lift (%)", type=PCT,
                  prompt="Expected lift in expansion rate?", default_confidence=E,
                  source="Zapier benchmark: 5-15%", default_value=0.10, range=(0.05, 0.15)),
    ],
    Archetype.TIME_TO_REVENUE: [
        FieldSpec(key="newCustomersPerYear", label="New customers/year", type=NUM,
                  prompt="How many new customers per year?", default_confidence=C),
        FieldSpec(key="revenuePerCustomer", label="Revenue per customer ($)", type=USD,
                  prompt="Average first-year revenue per customer?", default_confidence=C),
        FieldSpec(key="daysAccelerated", label="Days accelerated", type=NUM,
                  prompt="How many days faster could onboarding be?", default_confidence=E,
                  source="Zapier benchmark: 5-15 days", default_value=10, range=(5, 15)),
    ],
    Archetype.PROCESS_ACCELERATION: [
        FieldSpec(key="processesPerMonth", label="Processes/month", type=NUM,
                  prompt="How many processes run per month?", default_confidence=C),
        FieldSpec(key="timeBeforeHrs", label="Time before (hours)", type=HRS,
                  prompt="Current time per process (hours)?", default_confidence=C),
        FieldSpec(key="timeAfterHrs", label="Time after (hours)", type=HRS,
                  prompt="Expected time after automation (hours)?", default_confidence=E,
                  guidance="Typically 50-80% reduction from current time"),
        FieldSpec(key="hourlyRate", label="Hourly rate ($)", type=USD,
                  prompt="Loaded cost per hour of person running this process?", default_confidence=C),
    ],
    Archetype.HANDOFF_ELIMINATION: [
        FieldSpec(key="handoffsPerMonth", label="Handoffs/month", type=NUM,
                  prompt="How many handoffs happen per month?", default_confidence=C),
        FieldSpec(key="avgQueueTimeHrs", label="Avg queue time (hours)", type=HRS,
                  prompt="Average wait time per handoff (hours)?", default_confidence=C),
        FieldSpec(key="hourlyRateOfWaitingParty", label="Hourly rate ($)", type=USD,
                  prompt="Loaded cost of the person waiting?", default_confidence=C),
    ],
    Archetype.TASK_ELIMINATION: [
        FieldSpec(key="tasksPerMonth", label="Tasks/month", type=NUM,
                  prompt="How many tasks are completed per month?", default_confidence=C,
                  guidance="Check Zapier task data if available; it is the most reliable source"),
        FieldSpec(key="minutesPerTask", label="Minutes/task", type=NUM,
                  prompt="How long did this take manually (minutes)?", default_confidence=C),
        FieldSpec(key="hourlyRate", label="Hourly rate ($)", type=USD,
                  prompt="Loaded cost per hour of person doing this task?", default_confidence=C),
    ],
    Archetype.TASK_SIMPLIFICATION: [
        FieldSpec(key="tasksPerMonth", label="Tasks/month", type=NUM,
                  prompt="How many tasks per month?", default_confidence=C),
        FieldSpec(key="minutesSavedPerTask", label="Minutes saved/task", type=NUM,
                  prompt="Minutes saved per task through automation?", default_confidence=C),
        FieldSpec(key="hourlyRate", label="Hourly rate ($)", type=USD,
                  prompt="Loaded cost per hour?", default_confidence=C),
    ],
    Archetype.CONTEXT_SURFACING: [
        FieldSpec(key="meetingsAvoidedPerMonth", label="Meetings avoided/month", type=NUM,
                  prompt="How many meetings could be avoided per month?", default_confidence=C),
        FieldSpec(key="attendeesPerMeeting", label="Attendees/meeting", type=NUM,
                  prompt="Average number of attendees per meeting?", default_confidence=C),
        FieldSpec(key="meetingDurationHrs", label="Meeting duration (hrs)", type=HRS,
                  prompt="Average meeting duration (hours)?", default_confidence=C),
        FieldSpec(key="meetingHourlyRate", label="Meeting hourly rate ($)", type=USD,
                  prompt="Average hourly rate of meeting attendees?", default_confidence=C),
        FieldSpec(key="searchesAvoidedPerMonth", label="Searches avoided/month", type=NUM,
                  prompt="Information searches avoided per month?", default_confidence=C),
        FieldSpec(key="avgSearchTimeMin", label="Avg search time (min)", type=NUM,
                  prompt="Average time spent searching for information (minutes)?", default_confidence=E,
                  source="Benchmark: 15-30 min", default_value=20, range=(15, 30)),
        FieldSpec(key="searchHourlyRate", label="Search hourly rate ($)", type=USD,
                  prompt="Hourly rate of person searching?", default_confidence=C),
    ],
    Archetype.LABOR_AVOIDANCE: [
        FieldSpec(key="ftesAvoided", label="FTEs avoided", type=NUM,
                  prompt="How many FTEs would need to be hired without automation?", default_confidence=C),
        FieldSpec(key="fullyLoadedAnnualCost", label="Fully loaded annual cost ($)", type=USD,
                  prompt="Fully loaded annual cost per FTE?", default_confidence=E,
                  source="Admin: $70K, Ops: $100K, SalesOps: $120K, Eng: $175K, Manager: $160K",
                  default_value=100000),
    ],
    Archetype.TOOL_CONSOLIDATION: [
        FieldSpec(key="toolsEliminated", label="Tools eliminated", type=NUM,
                  prompt="How many tools can be eliminated?", default_confidence=C),
        FieldSpec(key="annualLicenseCostPerTool", label="Annual cost/tool ($)", type=USD,
                  prompt="Annual license cost per tool?", default_confidence=C),
    ],
    Archetype.ERROR_REWORK_ELIMINATION: [
        FieldSpec(key="errorsPerMonth", label="Errors/month", type=NUM,
                  prompt="How many errors occur per month?", default_confidence=C),
        FieldSpec(key="avgCostPerError", label="Avg cost/error ($)", type=USD,
                  prompt="Average cost to fix each error?", default_confidence=E,
                  source="Benchmark: $50-500", default_value=150, range=(50, 500)),
        FieldSpec(key="reductionRate", label="Error reduction (%)", type=PCT,
                  prompt="Expected error reduction rate?", default_confidence=E,
                  source="Data entry: 60-90%, Process: 30-50%", default_value=0.70, range=(0.30, 0.90)),
    ],
    Archetype.COMPLIANCE_ASSURANCE: [
        FieldSpec(key="expectedViolationsPerYear", label="Expected violations/year", type=NUM,
                  prompt="Expected compliance violations per year?", default_confidence=E),
        FieldSpec(key="avgPenaltyPerViolation", label="Avg penalty ($)", type=USD,
                  prompt="Average penalty per violation?", default_confidence=B,
                  source="GDPR $20K-500K, SOX $5M+, HIPAA $100-50K, PCI $5K-100K/mo"),
        FieldSpec(key="reductionRate", label="Violation reduction (%)", type=PCT,
                  prompt="Expected reduction in violations?", default_confidence=E,
                  source="Benchmark: 40-70%", default_value=0.55, range=(0.40, 0.70)),
    ],
    Archetype.DATA_INTEGRITY: [
        FieldSpec(key="recordsPerMonth", label="Records/month", type=NUM,
                  prompt="How many records processed per month?", default_confidence=C),
        FieldSpec(key="errorRate", label="Error rate (%)", type=PCT,
                  prompt="Current data error rate?", default_confidence=C),
        FieldSpec(key="costPerError", label="Cost/error ($)", type=USD,
                  prompt="Cost per data error?", default_confidence=E,
                  source="Operational: $10-100, Strategic: $1K-50K", default_value=50, range=(10, 50000)),
        FieldSpec(key="reductionRate", label="Error reduction (%)", type=PCT,
                  prompt="Expected error reduction?", default_confidence=E,
                  source="Sync: 70-90%, Enrichment: 40-60%", default_value=0.75, range=(0.40, 0.90)),
    ],
    Archetype.INCIDENT_PREVENTION: [
        FieldSpec(key="incidentsPerYear", label="Incidents/year", type=NUM,
                  prompt="How many incidents per year?", default_confidence=C),
        FieldSpec(key="avgCostPerIncident", label="Avg cost/incident ($)", type=USD,
                  prompt="Average cost per incident?", default_confidence=E,
                  source="App downtime $5-10K/hr, Data breach $165/record, Infra $10-50K",
                  default_value=10000),
        FieldSpec(key="reductionRate", label="Incident reduction (%)", type=PCT,
                  prompt="Expected incident reduction?", default_confidence=E,
                  source="Prevention: 20-40%, Faster resolution: 30-50%", default_value=0.30, range=(0.20, 0.50)),
    ],
    Archetype.PROCESS_CONSISTENCY: [
        FieldSpec(key="processesPerMonth", label="Processes/month", type=NUM,
                  prompt="How many processes executed per month?", default_confidence=C),
        FieldSpec(key="defectRate", label="Defect rate (%)", type=PCT,
                  prompt="Current process defect rate?", default_confidence=C),
        FieldSpec(key="costPerDefect", label="Cost/defect ($)", type=USD,
                  prompt="Cost per process defect?", default_confidence=C),
        FieldSpec(key="reductionRate", label="Defect reduction (%)", type=PCT,
                  prompt="Expected defect reduction?", default_confidence=E,
                  source="Benchmark: 50-80%", default_value=0.65, range=(0.50, 0.80)),
    ],
}


__all__ = ["ARCHETYPE_FIELDS"]

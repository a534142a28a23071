from .common import CamelModel
from .value_item import (
	ConfidenceTier,
	Dimension,
	Archetype,
	ARCHETYPE_DIMENSION,
	parse_archetype,
	ValueInput,
	ValueItem,
	ComputedValue,
)
from .assumptions import HourlyRates, TaskMinutes, Assumptions
from .projection import YearProjection, DimensionTotal, CalculationSummary
from .realization import (
	HealthStatus,
	Trend,
	ArchitectureItem,
	UseCase,
	ZapRunCacheEntry,
	ValueRealized,
	RealizationSummary,
)
from .patterns import PatternRef, ValuePackage, DedupResult

__all__ = [
	"CamelModel",
	"ConfidenceTier",
	"Dimension",
	"Archetype",
	"ARCHETYPE_DIMENSION",
	"parse_archetype",
	"ValueInput",
	"ValueItem",
	"ComputedValue",
	"HourlyRates",
	"TaskMinutes",
	"Assumptions",
	"YearProjection",
	"DimensionTotal",
	"CalculationSummary",
	"HealthStatus",
	"Trend",
	"ArchitectureItem",
	"UseCase",
	"ZapRunCacheEntry",
	"ValueRealized",
	"RealizationSummary",
	"PatternRef",
	"ValuePackage",
	"DedupResult",
]

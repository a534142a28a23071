from .interfaces import (
    FieldType,
    FieldSpec,
    FormulaOutcome,
    InputAccessor,
    ArchetypeFormula,
)
from .registry import (
    ArchetypeInfo,
    ARCHETYPES,
    get_archetype_info,
    get_formula,
    compute_archetype_value,
    build_default_inputs,
)
from .utils import resolve_input

__all__ = [
    "FieldType",
    "FieldSpec",
    "FormulaOutcome",
    "InputAccessor",
    "ArchetypeFormula",
    "ArchetypeInfo",
    "ARCHETYPES",
    "get_archetype_info",
    "get_formula",
    "compute_archetype_value",
    "build_default_inputs",
    "resolve_input",
]

# automation_value_engine/value_engine/schemas/common.py

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for records exchanged with the calculator store and telemetry cache.

    Those collaborators speak camelCase (``manualAnnualValue``, ``runsLast30Days``);
    Python code uses snake_case attributes. Both spellings are accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


__all__ = ["CamelModel"]

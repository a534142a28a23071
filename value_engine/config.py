# automation_value_engine/value_engine/config.py

from typing import Optional
from pathlib import Path
import json
import logging
import sys

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from pythonjsonlogger.json import JsonFormatter

from value_engine.schemas.assumptions import Assumptions

load_dotenv()

# Custom JSON formatter that excludes null/None fields
class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter that only includes fields with non-None values."""

    def add_fields(self, log_record, record, message_dict):
        """Override to filter out None values before adding to JSON output."""
        super().add_fields(log_record, record, message_dict)

        # Remove keys with None values
        log_record_copy = dict(log_record)
        for key, value in log_record_copy.items():
            if value is None:
                del log_record[key]

def setup_json_logging(log_level: int = logging.INFO) -> None:
    """Initialize JSON logging for the value_engine logger tree."""
    handler = logging.StreamHandler(sys.stdout)

    # JSON formatter with the event fields the services attach via extra={}
    formatter = CustomJsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s "
        "%(item_id)s %(archetype)s %(items)s %(use_cases)s %(at_risk)s "
        "%(total_annual_value)s %(roi_multiple)s %(overall_realization_rate)s "
        "%(total_before)s %(total_after)s %(years)s %(path)s %(error)s"
    )

    handler.setFormatter(formatter)

    root_logger = logging.getLogger("value_engine")
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers = []

    root_logger.addHandler(handler)

    # Prevent propagation to avoid duplicate logs
    root_logger.propagate = False


BASE_DIR = Path(__file__).resolve().parent.parent  # project root folder


class Settings(BaseSettings):
    # App
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    VALUE_ENGINE_SECRET: str = ""
    API_TITLE: str = "AUTOMATION VALUE ENGINE - Calculation API"

    # Calculation defaults (used when a request carries no assumptions)
    DEFAULT_ASSUMPTIONS: Optional[Assumptions] = None
    DEFAULT_ASSUMPTIONS_FILE: Optional[str] = None  # path to JSON object shaped like Assumptions

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    @model_validator(mode="after")
    def load_default_assumptions_from_file(self) -> "Settings":
        """
        If DEFAULT_ASSUMPTIONS_FILE is set, read that JSON file
        and use it to populate DEFAULT_ASSUMPTIONS.
        """
        if self.DEFAULT_ASSUMPTIONS_FILE:
            cfg_path = Path(self.DEFAULT_ASSUMPTIONS_FILE)
            if not cfg_path.is_absolute():
                cfg_path = BASE_DIR / cfg_path

            if not cfg_path.exists():
                raise FileNotFoundError(
                    f"DEFAULT_ASSUMPTIONS_FILE points to {cfg_path}, but it does not exist."
                )

            with cfg_path.open("r", encoding="utf-8") as f:
                raw = json.load(f)

            if not isinstance(raw, dict):
                raise ValueError(
                    "DEFAULT_ASSUMPTIONS config file must contain a JSON object of assumptions."
                )

            self.DEFAULT_ASSUMPTIONS = Assumptions.model_validate(raw)

        return self


settings = Settings()


def get_default_assumptions() -> Assumptions:
    """Configured assumptions, or the built-in defaults when none are configured."""
    if settings.DEFAULT_ASSUMPTIONS is not None:
        return settings.DEFAULT_ASSUMPTIONS.model_copy(deep=True)
    return Assumptions()

from __future__ import annotations

import json

import pytest

from value_engine import config
from value_engine.config import Settings, get_default_assumptions
from value_engine.schemas.assumptions import Assumptions


def test_defaults_without_overrides(monkeypatch):
    monkeypatch.setattr(config.settings, "DEFAULT_ASSUMPTIONS", None)
    a = get_default_assumptions()
    assert a.projection_years == 3
    assert a.realization_ramp == [0.5, 1.0, 1.0]
    assert a.annual_growth_rate == pytest.approx(0.1)
    assert a.hourly_rates.operations == 50
    assert a.task_minutes.complex == 20
    assert a.avg_data_breach_cost == 150000
    assert a.avg_support_ticket_cost == 150


def test_configured_assumptions_are_returned_as_copy(monkeypatch):
    monkeypatch.setattr(config.settings, "DEFAULT_ASSUMPTIONS", Assumptions(projection_years=5))
    a = get_default_assumptions()
    assert a.projection_years == 5
    a.projection_years = 9
    assert config.settings.DEFAULT_ASSUMPTIONS.projection_years == 5


def test_assumptions_file_is_loaded(tmp_path):
    path = tmp_path / "assumptions.json"
    path.write_text(json.dumps({"projectionYears": 4, "realizationRamp": [0.3, 0.8], "annualGrowthRate": 0.05}))
    s = Settings(DEFAULT_ASSUMPTIONS_FILE=str(path))
    assert s.DEFAULT_ASSUMPTIONS is not None
    assert s.DEFAULT_ASSUMPTIONS.projection_years == 4
    assert s.DEFAULT_ASSUMPTIONS.realization_ramp == [0.3, 0.8]


def test_missing_assumptions_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Settings(DEFAULT_ASSUMPTIONS_FILE=str(tmp_path / "nope.json"))


def test_assumptions_file_must_be_an_object(tmp_path):
    path = tmp_path / "assumptions.json"
    path.write_text("[1, 2, 3]")
    with pytest.raises(ValueError):
        Settings(DEFAULT_ASSUMPTIONS_FILE=str(path))


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("VALUE_ENGINE_SECRET", "from-env")
    monkeypatch.setenv("DEFAULT_ASSUMPTIONS", json.dumps({"projectionYears": 7}))
    s = Settings()
    assert s.VALUE_ENGINE_SECRET == "from-env"
    assert s.DEFAULT_ASSUMPTIONS is not None
    assert s.DEFAULT_ASSUMPTIONS.projection_years == 7

"""Tests for configuration loading."""

import json

import pytest

from shiftplanner.config import SchedulerConfig, load_config, validate_config


def test_defaults():
    cfg = load_config(None)
    assert cfg.fallback.orders_per_staff == 30
    assert cfg.fallback.dinner_threshold == 100
    assert cfg.constraints.max_labor_cost_percent == 30
    assert cfg.proposer.max_tokens == 4000
    assert str(cfg.templates["dinner"].start) == "16:00"


def test_load_yaml(tmp_path):
    path = tmp_path / "scheduler.yaml"
    path.write_text(
        "fallback:\n"
        "  orders_per_staff: 25\n"
        "  dinner_threshold: 120\n"
        "constraints:\n"
        "  max_labor_cost_percent: 28\n"
        "  min_coverage:\n"
        "    Cook: 2\n"
        "    server: 1\n"
        "shift_templates:\n"
        "  dinner:\n"
        "    start: 17:00\n"
        "    end: '23:00'\n"
        "proposer:\n"
        "  enabled: false\n"
        "  timeout_seconds: 15\n",
        encoding="utf-8",
    )
    cfg = load_config(path)

    assert cfg.fallback.orders_per_staff == 25
    assert cfg.fallback.dinner_threshold == 120
    assert cfg.constraints.max_labor_cost_percent == 28
    assert cfg.constraints.min_coverage == {"cook": 2, "server": 1}
    assert str(cfg.templates["dinner"].start) == "17:00"
    assert cfg.templates["dinner"].duration == 6.0
    assert cfg.proposer.enabled is False
    assert cfg.proposer.timeout_seconds == 15
    assert cfg.proposer.model == SchedulerConfig().proposer.model


def test_load_json(tmp_path):
    path = tmp_path / "scheduler.json"
    path.write_text(json.dumps({"fallback": {"default_template": "full_day"}}), encoding="utf-8")
    cfg = load_config(path)
    assert cfg.fallback.default_template == "full_day"


def test_missing_file(tmp_path):
    with pytest.raises(ValueError, match="not found"):
        load_config(tmp_path / "nope.yaml")


def test_unparsable_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Could not parse"):
        load_config(path)


@pytest.mark.parametrize(
    "text",
    [
        "fallback:\n  orders_per_staff: 0\n",
        "fallback:\n  high_demand_template: brunch\n",
        "constraints:\n  min_coverage:\n    sommelier: 1\n",
        "constraints:\n  preferred_shift_lengths:\n    min: 9\n    max: 4\n",
        "shift_templates:\n  brunch:\n    start: '09:00'\n    end: '13:00'\n",
        "- just\n- a list\n",
    ],
)
def test_invalid_values(tmp_path, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_validate_config_accepts_defaults():
    validate_config(SchedulerConfig())


def test_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("SHIFT_TEST_KEY", "secret")
    cfg = SchedulerConfig()
    cfg.proposer.api_key_env = "SHIFT_TEST_KEY"
    assert cfg.proposer.api_key() == "secret"

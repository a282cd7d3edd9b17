"""Scheduler configuration: load and validate a YAML or JSON file."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from shiftplanner.domain.models import ROLES, SHIFT_TYPES, Constraints, ShiftLengthRange
from shiftplanner.services.timeplan import ShiftTemplate, build_shift_templates


@dataclass
class FallbackPolicy:
    """Heuristics for the rule-based generator."""

    orders_per_staff: float = 30.0  # one staff member per ~30 orders
    dinner_threshold: float = 100.0  # orders above this get the dinner template
    high_demand_template: str = "dinner"
    default_template: str = "lunch"


@dataclass
class ProposerSettings:
    """Connection settings for the hosted shift proposer."""

    enabled: bool = True
    api_url: str = "https://api.anthropic.com/v1/messages"
    model: str = "claude-sonnet-4-20250514"
    api_version: str = "2023-06-01"
    max_tokens: int = 4000
    timeout_seconds: float = 60.0
    api_key_env: str = "ANTHROPIC_API_KEY"

    def api_key(self) -> Optional[str]:
        return os.getenv(self.api_key_env) or None


@dataclass
class SchedulerConfig:
    fallback: FallbackPolicy = field(default_factory=FallbackPolicy)
    proposer: ProposerSettings = field(default_factory=ProposerSettings)
    constraints: Constraints = field(default_factory=Constraints)
    shift_templates: Dict[str, Dict[str, str]] = field(default_factory=dict)

    @property
    def templates(self) -> Dict[str, ShiftTemplate]:
        """Template library with any configured overrides applied."""
        return build_shift_templates(self.shift_templates)


def _read_mapping(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        # YAML is a superset of JSON, so this also covers extension-less files
        data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return data


def _time_value(value: Any) -> str:
    # PyYAML reads unquoted 16:00 as the base-60 integer 960
    if isinstance(value, int):
        return f"{value // 60:02d}:{value % 60:02d}"
    return str(value)


def _constraints_from(raw: Dict[str, Any]) -> Constraints:
    lengths = raw.get("preferred_shift_lengths", {}) or {}
    min_coverage = {str(role).lower(): int(count) for role, count in (raw.get("min_coverage") or {}).items()}
    unknown = sorted(set(min_coverage) - set(ROLES))
    if unknown:
        raise ValueError(f"min_coverage references unknown roles: {unknown}")
    return Constraints(
        max_labor_cost_percent=float(raw.get("max_labor_cost_percent", 30.0)),
        min_coverage=min_coverage,
        preferred_shift_lengths=ShiftLengthRange(
            min=float(lengths.get("min", 4.0)),
            max=float(lengths.get("max", 8.0)),
        ),
    )


def validate_config(cfg: SchedulerConfig) -> None:
    """
    Check config values that would make scheduling meaningless.

    Raises:
        ValueError: On the first invalid value
    """
    if cfg.fallback.orders_per_staff <= 0:
        raise ValueError("fallback.orders_per_staff must be positive")
    if cfg.fallback.dinner_threshold < 0:
        raise ValueError("fallback.dinner_threshold must not be negative")
    templates = cfg.templates
    for name in (cfg.fallback.high_demand_template, cfg.fallback.default_template):
        if name not in templates:
            raise ValueError(f"Unknown shift template in fallback policy: {name}")
    for name in cfg.shift_templates:
        if name not in SHIFT_TYPES:
            raise ValueError(f"Unknown shift type in shift_templates: {name}")
    lengths = cfg.constraints.preferred_shift_lengths
    if lengths.min > lengths.max:
        raise ValueError("preferred_shift_lengths.min is greater than max")
    if cfg.proposer.max_tokens <= 0 or cfg.proposer.timeout_seconds <= 0:
        raise ValueError("proposer.max_tokens and proposer.timeout_seconds must be positive")


def load_config(path: str | Path | None = None) -> SchedulerConfig:
    """
    Load configuration from YAML or JSON. Missing keys take their defaults.

    Args:
        path: Config file, or None for the built-in defaults

    Returns:
        Validated SchedulerConfig
    """
    if path is None:
        return SchedulerConfig()

    path = Path(path)
    if not path.exists():
        raise ValueError(f"Config file not found: {path}")

    try:
        raw = _read_mapping(path)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValueError(f"Could not parse config {path}: {e}") from e

    fallback_raw = raw.get("fallback", {}) or {}
    proposer_raw = raw.get("proposer", {}) or {}

    defaults = FallbackPolicy()
    fallback = FallbackPolicy(
        orders_per_staff=float(fallback_raw.get("orders_per_staff", defaults.orders_per_staff)),
        dinner_threshold=float(fallback_raw.get("dinner_threshold", defaults.dinner_threshold)),
        high_demand_template=str(fallback_raw.get("high_demand_template", defaults.high_demand_template)),
        default_template=str(fallback_raw.get("default_template", defaults.default_template)),
    )

    proposer_defaults = ProposerSettings()
    proposer = ProposerSettings(
        enabled=bool(proposer_raw.get("enabled", proposer_defaults.enabled)),
        api_url=str(proposer_raw.get("api_url", proposer_defaults.api_url)),
        model=str(proposer_raw.get("model", proposer_defaults.model)),
        api_version=str(proposer_raw.get("api_version", proposer_defaults.api_version)),
        max_tokens=int(proposer_raw.get("max_tokens", proposer_defaults.max_tokens)),
        timeout_seconds=float(proposer_raw.get("timeout_seconds", proposer_defaults.timeout_seconds)),
        api_key_env=str(proposer_raw.get("api_key_env", proposer_defaults.api_key_env)),
    )

    cfg = SchedulerConfig(
        fallback=fallback,
        proposer=proposer,
        constraints=_constraints_from(raw.get("constraints", {}) or {}),
        shift_templates={
            str(name): {str(k): _time_value(v) for k, v in (window or {}).items()}
            for name, window in (raw.get("shift_templates", {}) or {}).items()
        },
    )
    validate_config(cfg)
    print(f"[INFO] Loaded config: {path}")
    return cfg

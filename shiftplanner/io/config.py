"""Configuration loading utility (re-exported from shiftplanner.config)."""

from shiftplanner.config import SchedulerConfig, load_config

__all__ = ["load_config", "SchedulerConfig"]

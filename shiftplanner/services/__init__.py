"""Services for scheduling logic."""

from .events import AdjustedDemand, EventAdjuster
from .labor import LaborAnalysis, LaborAnalyzer, calculate_labor_analysis, schedule_performance
from .timeplan import (
    ROLE_REQUIREMENTS,
    SHIFT_TEMPLATES,
    ShiftTemplate,
    calculate_shift_hours,
    format_shift_time,
    hours_between,
    parse_time_string,
)

__all__ = [
    "AdjustedDemand",
    "EventAdjuster",
    "LaborAnalysis",
    "LaborAnalyzer",
    "calculate_labor_analysis",
    "schedule_performance",
    "ROLE_REQUIREMENTS",
    "SHIFT_TEMPLATES",
    "ShiftTemplate",
    "calculate_shift_hours",
    "format_shift_time",
    "hours_between",
    "parse_time_string",
]

"""Time helpers and the fixed shift template library."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Tuple

from shiftplanner.domain.clock import ClockTime, hours_between, minutes_between


def parse_time_string(value: str) -> ClockTime:
    """Parse "HH:MM" into a ClockTime."""
    return ClockTime.parse(value)


def calculate_shift_hours(start: "str | ClockTime", end: "str | ClockTime") -> float:
    """Shift duration in hours, overnight-aware."""
    return hours_between(start, end)


def format_shift_time(value: "str | ClockTime") -> str:
    """Render a clock time for display, e.g. "16:00" -> "4:00 PM"."""
    t = ClockTime.parse(value)
    suffix = "PM" if t.hour >= 12 else "AM"
    display_hour = t.hour % 12 or 12
    return f"{display_hour}:{t.minute:02d} {suffix}"


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, the way the dashboard displays numbers."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def plain_number(value: float) -> str:
    """Fixed-point text without trailing zeros, e.g. 4.0 -> "4", 1234567.5 -> "1234567.5"."""
    text = f"{value:f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(frozen=True)
class ShiftTemplate:
    """Named start/end pair used when assigning a time block."""

    name: str
    start: ClockTime
    end: ClockTime

    @property
    def duration(self) -> float:
        return hours_between(self.start, self.end)

    def to_dict(self) -> Dict[str, object]:
        return {"start": str(self.start), "end": str(self.end), "duration": self.duration}


def _template(name: str, start: str, end: str) -> ShiftTemplate:
    return ShiftTemplate(name=name, start=ClockTime.parse(start), end=ClockTime.parse(end))


SHIFT_TEMPLATES: Dict[str, ShiftTemplate] = {
    "morning_prep": _template("morning_prep", "08:00", "12:00"),
    "lunch": _template("lunch", "11:00", "15:00"),
    "dinner": _template("dinner", "16:00", "22:00"),
    "late_night": _template("late_night", "20:00", "00:00"),
    "full_day": _template("full_day", "10:00", "18:00"),
}

# Roles expected on each template
ROLE_REQUIREMENTS: Dict[str, Tuple[str, ...]] = {
    "morning_prep": ("prep", "cook"),
    "lunch": ("cook", "server", "delivery"),
    "dinner": ("cook", "server", "delivery", "manager"),
    "late_night": ("cook", "server", "delivery"),
    "full_day": ("manager",),
}


def build_shift_templates(overrides: Dict[str, Dict[str, str]] | None = None) -> Dict[str, ShiftTemplate]:
    """
    Build the template library, applying start/end overrides from config.

    Args:
        overrides: shift_type -> {"start": "HH:MM", "end": "HH:MM"}

    Returns:
        New dict of shift_type -> ShiftTemplate
    """
    templates = dict(SHIFT_TEMPLATES)
    for name, window in (overrides or {}).items():
        base = templates.get(name)
        start = window.get("start", str(base.start) if base else None)
        end = window.get("end", str(base.end) if base else None)
        if start is None or end is None:
            raise ValueError(f"Shift template {name!r} needs both start and end")
        templates[name] = _template(name, start, end)
    return templates


__all__ = [
    "ClockTime",
    "ROLE_REQUIREMENTS",
    "SHIFT_TEMPLATES",
    "ShiftTemplate",
    "build_shift_templates",
    "calculate_shift_hours",
    "format_shift_time",
    "hours_between",
    "minutes_between",
    "parse_time_string",
    "plain_number",
    "round_half_up",
]

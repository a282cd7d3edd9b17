"""Time-of-day value type with overnight-aware arithmetic."""

from __future__ import annotations

from dataclasses import dataclass

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True, order=True)
class ClockTime:
    """Time of day stored as minutes since midnight."""

    minutes: int

    def __post_init__(self):
        if not 0 <= self.minutes < MINUTES_PER_DAY:
            raise ValueError(f"Clock time out of range: {self.minutes} minutes")

    @classmethod
    def parse(cls, value: "str | ClockTime") -> "ClockTime":
        """
        Parse an "HH:MM" string.

        "24:00" is accepted as an alias for midnight.

        Raises:
            ValueError: If the string is not a valid time of day
        """
        if isinstance(value, ClockTime):
            return value
        text = str(value).strip()
        parts = text.split(":")
        if len(parts) != 2 or not parts[0].isdigit() or not parts[1].isdigit():
            raise ValueError(f"Invalid time string: {value!r} (expected HH:MM)")
        hour, minute = int(parts[0]), int(parts[1])
        if hour == 24 and minute == 0:
            hour = 0
        if hour > 23 or minute > 59:
            raise ValueError(f"Invalid time string: {value!r}")
        return cls(hour * 60 + minute)

    @property
    def hour(self) -> int:
        return self.minutes // 60

    @property
    def minute(self) -> int:
        return self.minutes % 60

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


def minutes_between(start: "str | ClockTime", end: "str | ClockTime") -> int:
    """
    Minutes from start to end, wrapping past midnight when end is earlier.

    Returns 0 when start and end are equal.
    """
    delta = ClockTime.parse(end).minutes - ClockTime.parse(start).minutes
    if delta < 0:
        delta += MINUTES_PER_DAY
    return delta


def hours_between(start: "str | ClockTime", end: "str | ClockTime") -> float:
    """Shift length in hours; an end before the start crosses midnight."""
    return minutes_between(start, end) / 60.0

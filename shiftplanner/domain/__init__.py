"""Domain models and the special-events calendar."""

from .calendar import ANNUAL_HOLIDAYS, EventCalendar, StaticEventCalendar, create_custom_event
from .models import (
    DAYS_OF_WEEK,
    ROLES,
    SHIFT_TYPES,
    Constraints,
    DailyForecast,
    Employee,
    EventCustomizations,
    Schedule,
    ScheduleRequest,
    ScheduleResult,
    Shift,
    ShiftLengthRange,
    SpecialEvent,
    day_name,
    day_of_week,
    generate_id,
    week_dates,
    week_start_for,
)

__all__ = [
    "ANNUAL_HOLIDAYS",
    "EventCalendar",
    "StaticEventCalendar",
    "create_custom_event",
    "DAYS_OF_WEEK",
    "ROLES",
    "SHIFT_TYPES",
    "Constraints",
    "DailyForecast",
    "Employee",
    "EventCustomizations",
    "Schedule",
    "ScheduleRequest",
    "ScheduleResult",
    "Shift",
    "ShiftLengthRange",
    "SpecialEvent",
    "day_name",
    "day_of_week",
    "generate_id",
    "week_dates",
    "week_start_for",
]

"""Dataclass models for restaurant staff scheduling."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import TYPE_CHECKING, Dict, List, Optional

from .clock import ClockTime, hours_between

if TYPE_CHECKING:
    from shiftplanner.services.labor import LaborAnalysis


ROLES = ("cook", "server", "delivery", "prep", "manager")
SHIFT_TYPES = ("morning_prep", "lunch", "dinner", "late_night", "full_day")
DAYS_OF_WEEK = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
EVENT_TYPES = ("holiday", "sports", "local_event", "weather_severe", "promotion")
EVENT_IMPACTS = ("very_high", "high", "moderate", "low")
SCHEDULE_STATUSES = ("draft", "published", "archived")


def generate_id(prefix: str) -> str:
    """Unique identifier such as "shift_3f9a0c1b2d4e"."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def day_of_week(d: date) -> str:
    """Lower-case weekday name ("monday" ... "sunday")."""
    return DAYS_OF_WEEK[d.weekday()]


def day_name(d: date) -> str:
    """Display weekday name ("Monday" ... "Sunday")."""
    return day_of_week(d).capitalize()


def week_start_for(d: date) -> date:
    """Monday of the week containing d."""
    return d - timedelta(days=d.weekday())


def week_dates(week_start: date) -> List[date]:
    """The seven dates of the week starting at week_start."""
    return [week_start + timedelta(days=i) for i in range(7)]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


@dataclass
class Employee:
    """Roster entry. Read-only to the scheduler."""

    id: str
    name: str
    role: str  # cook, server, delivery, prep, manager
    hourly_rate: float
    availability: Dict[str, bool] = field(default_factory=dict)
    max_hours_per_week: float = 40.0
    skills: List[str] = field(default_factory=list)
    hire_date: Optional[date] = None
    active: bool = True

    def is_available(self, weekday: str) -> bool:
        """Whether the employee works on the given weekday name."""
        return bool(self.availability.get(weekday.lower(), False))

    @property
    def available_days(self) -> List[str]:
        return [day for day in DAYS_OF_WEEK if self.is_available(day)]

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, name='{self.name}', role='{self.role}')>"


@dataclass
class EventCustomizations:
    staffing_notes: Optional[str] = None
    recommended_roles: List[str] = field(default_factory=list)
    extended_hours: bool = False


@dataclass
class SpecialEvent:
    """Calendar event that scales expected demand on its date."""

    id: str
    name: str
    date: date
    type: str  # holiday, sports, local_event, weather_severe, promotion
    impact: str  # very_high, high, moderate, low
    impact_multiplier: float  # 2.5 = 250% of normal demand
    description: str = ""
    recurring: bool = False
    customizations: Optional[EventCustomizations] = None


@dataclass(frozen=True)
class Shift:
    """One employee working one time block on one date."""

    id: str
    employee_id: str
    date: date
    start_time: ClockTime
    end_time: ClockTime
    role: str
    shift_type: str
    notes: Optional[str] = None

    @property
    def hours(self) -> float:
        return hours_between(self.start_time, self.end_time)

    def __repr__(self) -> str:
        return (
            f"<Shift(id={self.id}, emp={self.employee_id}, date={self.date}, "
            f"{self.start_time}-{self.end_time}, role={self.role})>"
        )


@dataclass
class DailyForecast:
    """Per-day output of the forecast provider."""

    date: date
    predicted_orders: float
    revenue_estimate: float
    peak_window: str = ""


@dataclass
class ShiftLengthRange:
    min: float = 4.0
    max: float = 8.0


@dataclass
class Constraints:
    """Planning targets handed to the generators. Advisory except where noted."""

    max_labor_cost_percent: float = 30.0
    min_coverage: Dict[str, int] = field(default_factory=dict)
    preferred_shift_lengths: ShiftLengthRange = field(default_factory=ShiftLengthRange)


@dataclass
class Schedule:
    """A week of shifts plus metrics derived from them."""

    id: str
    week_start_date: date
    shifts: List[Shift] = field(default_factory=list)
    total_labor_hours: float = 0.0
    total_labor_cost: float = 0.0
    projected_revenue: float = 0.0
    labor_percentage: float = 0.0
    status: str = "draft"  # draft, published, archived
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_analysis(
        cls,
        week_start_date: date,
        shifts: List[Shift],
        analysis: "LaborAnalysis",
        status: str = "draft",
    ) -> "Schedule":
        """Build a schedule whose derived fields come from a labor analysis of its shifts."""
        now = _utcnow()
        return cls(
            id=generate_id("schedule"),
            week_start_date=week_start_date,
            shifts=list(shifts),
            total_labor_hours=analysis.total_hours,
            total_labor_cost=analysis.total_cost,
            projected_revenue=analysis.total_revenue,
            labor_percentage=analysis.labor_percentage,
            status=status,
            created_at=now,
            updated_at=now,
        )

    def __repr__(self) -> str:
        return (
            f"<Schedule(id={self.id}, week={self.week_start_date}, shifts={len(self.shifts)}, "
            f"cost={self.total_labor_cost}, status={self.status})>"
        )


@dataclass
class ScheduleRequest:
    """Everything a generator needs to plan one week."""

    week_start_date: date
    employees: List[Employee]
    forecasts: List[DailyForecast]
    special_events: List[SpecialEvent] = field(default_factory=list)
    constraints: Constraints = field(default_factory=Constraints)


@dataclass
class ScheduleResult:
    schedule: Schedule
    recommendations: List[str]
    warnings: List[str]
    labor_analysis: "LaborAnalysis"
    source: str = "proposer"  # proposer or fallback

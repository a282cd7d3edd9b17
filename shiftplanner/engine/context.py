"""Planning context handed to the shift proposer."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, List

from shiftplanner.domain.calendar import EventCalendar, StaticEventCalendar
from shiftplanner.domain.models import Constraints, Employee, ScheduleRequest, SpecialEvent, day_name
from shiftplanner.services.events import EventAdjuster
from shiftplanner.services.timeplan import ROLE_REQUIREMENTS, SHIFT_TEMPLATES, ShiftTemplate

# Instructions the proposer must follow; rendered into the prompt
PLANNING_RULES = [
    "Match staffing levels to demand forecasts (higher demand = more staff)",
    "Account for special events and their impact multipliers",
    "Respect employee availability and max hours per week",
    "Keep labor cost within the target percentage of projected revenue",
    "Ensure minimum coverage for each role during operating hours",
    "Prioritize experienced staff (earlier hire dates) for high-demand shifts",
    "Balance shifts fairly across the week for each employee",
    "Consider peak windows when scheduling roles (e.g., more delivery drivers during peak)",
    "For major events (multiplier > 2.0), schedule ALL available staff",
    "For slow days (multiplier < 0.5), schedule minimal staff",
]


def week_events(
    request: ScheduleRequest,
    calendar: EventCalendar | None = None,
) -> List[SpecialEvent]:
    """
    Events falling inside the requested week.

    Combines the request's own event list with an optional injected calendar,
    keeping the first occurrence of each event id.
    """
    start = request.week_start_date
    end = start + timedelta(days=6)
    candidates = [event for event in request.special_events if start <= event.date <= end]
    if calendar is not None:
        candidates.extend(calendar.events_for_date_range(start, end))

    seen = set()
    events: List[SpecialEvent] = []
    for event in candidates:
        if event.id in seen:
            continue
        seen.add(event.id)
        events.append(event)
    return events


def employee_summary(emp: Employee) -> Dict[str, Any]:
    return {
        "id": emp.id,
        "name": emp.name,
        "role": emp.role,
        "hourly_rate": emp.hourly_rate,
        "max_hours_per_week": emp.max_hours_per_week,
        "available_days": emp.available_days,
        "skills": list(emp.skills),
        "hire_date": emp.hire_date.isoformat() if emp.hire_date else None,
    }


def constraints_summary(constraints: Constraints) -> Dict[str, Any]:
    return {
        "target_labor_percentage": constraints.max_labor_cost_percent,
        "minimum_coverage": dict(constraints.min_coverage),
        "shift_length_range": {
            "min": constraints.preferred_shift_lengths.min,
            "max": constraints.preferred_shift_lengths.max,
        },
    }


def build_daily_context(request: ScheduleRequest, adjuster: EventAdjuster) -> List[Dict[str, Any]]:
    """One record per forecast day with event-adjusted demand."""
    days = []
    for forecast in request.forecasts:
        adjusted = adjuster.calculate_event_adjusted_demand(forecast.predicted_orders, forecast.date)
        days.append(
            {
                "date": forecast.date.isoformat(),
                "day_of_week": day_name(forecast.date),
                "base_predicted_orders": forecast.predicted_orders,
                "adjusted_predicted_orders": adjusted.adjusted_orders,
                "demand_multiplier": adjusted.total_multiplier,
                "revenue_estimate": forecast.revenue_estimate,
                "peak_window": forecast.peak_window,
                "special_events": [
                    {"name": e.name, "impact": e.impact, "multiplier": e.impact_multiplier}
                    for e in adjusted.events
                ],
                "event_recommendations": adjuster.get_event_staffing_recommendations(forecast.date),
            }
        )
    return days


def build_planning_context(
    request: ScheduleRequest,
    calendar: EventCalendar | None = None,
    templates: Dict[str, ShiftTemplate] | None = None,
) -> Dict[str, Any]:
    """
    Assemble everything the proposer needs to plan the week.

    Args:
        request: Week, roster, forecasts, events and constraints
        calendar: Extra event source merged with request.special_events
        templates: Shift template library (defaults to the built-in one)

    Returns:
        JSON-serialisable dict
    """
    adjuster = EventAdjuster(StaticEventCalendar(week_events(request, calendar)))
    templates = templates or SHIFT_TEMPLATES

    return {
        "week_start": request.week_start_date.isoformat(),
        "daily_forecasts": build_daily_context(request, adjuster),
        "available_employees": [employee_summary(emp) for emp in request.employees if emp.active],
        "constraints": constraints_summary(request.constraints),
        "shift_templates": {name: template.to_dict() for name, template in templates.items()},
        "role_requirements": {name: list(roles) for name, roles in ROLE_REQUIREMENTS.items()},
        "planning_rules": list(PLANNING_RULES),
    }

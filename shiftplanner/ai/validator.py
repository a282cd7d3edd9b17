"""Advisory checks for proposed schedules.

Nothing here rejects or edits a proposal; every finding becomes a warning
string attached to the result.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from shiftplanner.domain.clock import minutes_between
from shiftplanner.domain.models import Constraints, Employee, Shift, day_of_week
from shiftplanner.services.timeplan import plain_number


def peak_headcount(shifts: Iterable[Shift]) -> int:
    """
    Largest number of the given shifts running at the same moment.

    Shifts that run past midnight extend beyond 24:00 on their own date.
    A shift ending exactly when another starts does not overlap it.
    """
    points: List[Tuple[int, int]] = []
    for shift in shifts:
        start = shift.start_time.minutes
        end = start + minutes_between(shift.start_time, shift.end_time)
        if end <= start:
            continue
        points.append((start, 1))
        points.append((end, -1))

    # Ends sort before starts at the same minute
    points.sort()
    current = peak = 0
    for _, delta in points:
        current += delta
        peak = max(peak, current)
    return peak


def validate_proposal(
    shifts: Sequence[Shift],
    employees: Sequence[Employee],
    constraints: Constraints,
    dates: Iterable[date],
    labor_percentage: float | None = None,
    week_start: date | None = None,
) -> Dict[str, Any]:
    """
    Check a proposed week against the roster and planning targets.

    Args:
        shifts: Proposed shifts
        employees: Roster
        constraints: Coverage, labor and shift length targets
        dates: Dates that must meet minimum coverage
        labor_percentage: Labor percentage from the labor analysis, if known
        week_start: Monday of the planned week; shifts outside it are flagged

    Returns:
        Dict with:
        - warnings: List[str]
        - stats: Dict with weekly hours per employee and peak coverage
    """
    results: Dict[str, Any] = {"warnings": [], "stats": {}}
    warnings: List[str] = results["warnings"]
    roster = {emp.id: emp for emp in employees}

    # 1. Week bounds, roster references and availability
    week_end = week_start + timedelta(days=6) if week_start is not None else None
    weekly_hours: Dict[str, float] = defaultdict(float)
    for shift in shifts:
        if week_start is not None and not week_start <= shift.date <= week_end:
            warnings.append(f"Shift on {shift.date} is outside the week of {week_start}")
        emp = roster.get(shift.employee_id)
        if emp is None:
            warnings.append(f"Shift on {shift.date} references unknown employee {shift.employee_id}")
            continue
        if not emp.active:
            warnings.append(f"{emp.name} is inactive but scheduled on {shift.date}")
            continue
        weekly_hours[emp.id] += shift.hours
        weekday = day_of_week(shift.date)
        if not emp.is_available(weekday):
            warnings.append(f"{emp.name} is scheduled on {shift.date} but is not available on {weekday}")

    # 2. Weekly hour limits
    for emp_id, hours in weekly_hours.items():
        emp = roster[emp_id]
        if hours > emp.max_hours_per_week:
            warnings.append(
                f"{emp.name} is scheduled for {plain_number(hours)} hours, over the "
                f"{plain_number(emp.max_hours_per_week)} hour weekly limit"
            )

    # 3. Minimum coverage per date and role
    by_day_role: Dict[Tuple[date, str], List[Shift]] = defaultdict(list)
    for shift in shifts:
        by_day_role[(shift.date, shift.role)].append(shift)

    coverage: Dict[str, Dict[str, int]] = {}
    for day in sorted(set(dates)):
        day_coverage = {}
        for role, required in sorted(constraints.min_coverage.items()):
            peak = peak_headcount(by_day_role.get((day, role), []))
            day_coverage[role] = peak
            if peak < required:
                warnings.append(f"Coverage gap on {day} for {role}: need {required}, scheduled {peak}")
        coverage[day.isoformat()] = day_coverage

    # 4. Labor cost target
    if labor_percentage is not None and labor_percentage > constraints.max_labor_cost_percent:
        warnings.append(
            f"Labor cost is {labor_percentage:.1f}% of projected revenue, above the "
            f"{constraints.max_labor_cost_percent:g}% target"
        )

    results["stats"] = {
        "weekly_hours": dict(weekly_hours),
        "peak_coverage": coverage,
    }
    return results

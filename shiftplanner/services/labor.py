"""Labor analysis: hours, cost and labor percentage for a set of shifts.

Every labor metric shown anywhere (schedule totals, CSV export, reports) is
computed here so the numbers always agree with each other.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd

from shiftplanner.domain.clock import hours_between
from shiftplanner.domain.models import DailyForecast, Employee, Schedule, Shift

from .timeplan import round_half_up


@dataclass
class RoleLabor:
    role: str
    hours: float
    cost: float


@dataclass
class DayLabor:
    date: date
    hours: float
    cost: float
    staff_count: int


@dataclass
class LaborAnalysis:
    total_cost: float = 0.0
    total_hours: float = 0.0
    labor_percentage: float = 0.0
    total_revenue: float = 0.0
    by_role: List[RoleLabor] = field(default_factory=list)
    by_day: List[DayLabor] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "total_cost": self.total_cost,
            "total_hours": self.total_hours,
            "labor_percentage": self.labor_percentage,
            "total_revenue": self.total_revenue,
            "by_role": [{"role": r.role, "hours": r.hours, "cost": r.cost} for r in self.by_role],
            "by_day": [
                {"date": d.date.isoformat(), "hours": d.hours, "cost": d.cost, "staff_count": d.staff_count}
                for d in self.by_day
            ],
        }


def shift_cost(shift: Shift, employee: Employee) -> float:
    """Unrounded cost of one shift at the employee's hourly rate."""
    return hours_between(shift.start_time, shift.end_time) * employee.hourly_rate


def labor_percentage(total_cost: float, total_revenue: float) -> float:
    """Cost as a percentage of revenue; 0 when there is no revenue."""
    if total_revenue > 0:
        return total_cost / total_revenue * 100
    return 0.0


def _revenue_of(forecast) -> float:
    if isinstance(forecast, DailyForecast):
        return float(forecast.revenue_estimate)
    return float(forecast["revenue_estimate"])


def shifts_to_frame(shifts: Iterable[Shift], employees: Sequence[Employee]) -> pd.DataFrame:
    """
    One row per shift whose employee is on the roster.

    Shifts pointing at unknown employees are skipped; the roster and the shift
    set may come from different sources.
    """
    roster = {emp.id: emp for emp in employees}
    rows = []
    for shift in shifts:
        emp = roster.get(shift.employee_id)
        if emp is None:
            continue
        hours = hours_between(shift.start_time, shift.end_time)
        rows.append(
            {
                "employee_id": shift.employee_id,
                "date": shift.date,
                "role": shift.role,
                "hours": hours,
                "cost": hours * emp.hourly_rate,
            }
        )
    return pd.DataFrame(rows, columns=["employee_id", "date", "role", "hours", "cost"])


class LaborAnalyzer:
    """Stateless labor analysis engine."""

    def analyze(
        self,
        shifts: Iterable[Shift],
        employees: Sequence[Employee],
        forecasts: Iterable,
    ) -> LaborAnalysis:
        """
        Compute totals and breakdowns for a set of shifts.

        Args:
            shifts: Shifts to cost
            employees: Roster used to look up hourly rates
            forecasts: DailyForecast entries (or dicts with "revenue_estimate")

        Returns:
            LaborAnalysis with cost rounded to 2 dp, hours and percentage to 1 dp
        """
        total_revenue = math.fsum(_revenue_of(f) for f in forecasts)
        df = shifts_to_frame(shifts, employees)

        if df.empty:
            return LaborAnalysis(total_revenue=total_revenue)

        total_cost = math.fsum(df["cost"])
        total_hours = math.fsum(df["hours"])

        by_role_df = df.groupby("role", sort=True).agg(hours=("hours", math.fsum), cost=("cost", math.fsum))
        by_role = [
            RoleLabor(
                role=str(role),
                hours=round_half_up(float(row["hours"]), 1),
                cost=round_half_up(float(row["cost"]), 2),
            )
            for role, row in by_role_df.iterrows()
        ]

        by_day_df = df.groupby("date", sort=True).agg(
            hours=("hours", math.fsum),
            cost=("cost", math.fsum),
            staff_count=("employee_id", "nunique"),
        )
        by_day = [
            DayLabor(
                date=day,
                hours=round_half_up(float(row["hours"]), 1),
                cost=round_half_up(float(row["cost"]), 2),
                staff_count=int(row["staff_count"]),
            )
            for day, row in by_day_df.iterrows()
        ]

        return LaborAnalysis(
            total_cost=round_half_up(total_cost, 2),
            total_hours=round_half_up(total_hours, 1),
            labor_percentage=round_half_up(labor_percentage(total_cost, total_revenue), 1),
            total_revenue=total_revenue,
            by_role=by_role,
            by_day=by_day,
        )


def calculate_labor_analysis(
    shifts: Iterable[Shift],
    employees: Sequence[Employee],
    forecasts: Iterable,
) -> LaborAnalysis:
    """Module-level shortcut for LaborAnalyzer().analyze()."""
    return LaborAnalyzer().analyze(shifts, employees, forecasts)


@dataclass
class SchedulePerformance:
    schedule_id: str
    week_start_date: date
    planned_hours: float
    planned_cost: float
    actual_hours: Optional[float] = None
    actual_cost: Optional[float] = None
    variance: Optional[float] = None
    variance_percent: Optional[float] = None
    efficiency: Optional[float] = None


def schedule_performance(
    schedule: Schedule,
    actual_hours: Optional[float] = None,
    actual_cost: Optional[float] = None,
) -> SchedulePerformance:
    """
    Compare a schedule's planned labor with what was actually worked.

    Variance fields stay None until both actual hours and actual cost are known.
    Efficiency is planned hours over actual hours.
    """
    perf = SchedulePerformance(
        schedule_id=schedule.id,
        week_start_date=schedule.week_start_date,
        planned_hours=schedule.total_labor_hours,
        planned_cost=schedule.total_labor_cost,
    )
    if actual_hours is None or actual_cost is None:
        return perf

    perf.actual_hours = actual_hours
    perf.actual_cost = actual_cost
    perf.variance = round_half_up(actual_cost - schedule.total_labor_cost, 2)
    perf.variance_percent = (
        round_half_up(perf.variance / schedule.total_labor_cost * 100, 1)
        if schedule.total_labor_cost > 0
        else 0.0
    )
    perf.efficiency = (
        round_half_up(schedule.total_labor_hours / actual_hours, 2) if actual_hours > 0 else 0.0
    )
    return perf

"""CSV export of a schedule with a trailing labor summary."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pandas as pd

from shiftplanner.domain.models import Employee, Schedule, day_name
from shiftplanner.services.labor import shift_cost
from shiftplanner.services.timeplan import plain_number

SCHEDULE_COLUMNS = [
    "Employee",
    "Role",
    "Date",
    "Day",
    "Start Time",
    "End Time",
    "Hours",
    "Pay Rate",
    "Shift Cost",
]


def schedule_frame(schedule: Schedule, employees: Sequence[Employee]) -> pd.DataFrame:
    """
    One display row per shift, in schedule order.

    Hours and cost are recomputed from each shift rather than read from the
    schedule totals. Shifts for employees missing from the roster are skipped.
    """
    roster = {emp.id: emp for emp in employees}
    rows = []
    for shift in schedule.shifts:
        emp = roster.get(shift.employee_id)
        if emp is None:
            continue
        rows.append(
            {
                "Employee": emp.name,
                "Role": shift.role,
                "Date": shift.date.isoformat(),
                "Day": day_name(shift.date),
                "Start Time": str(shift.start_time),
                "End Time": str(shift.end_time),
                "Hours": plain_number(shift.hours),
                "Pay Rate": f"${plain_number(emp.hourly_rate)}",
                "Shift Cost": f"${shift_cost(shift, emp):.2f}",
            }
        )
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def export_schedule_csv(schedule: Schedule, employees: Sequence[Employee]) -> str:
    """
    Render a schedule as CSV text.

    Args:
        schedule: Schedule to export
        employees: Roster used for names and pay rates

    Returns:
        Header, one row per shift, a blank line, then the four summary lines
    """
    body = schedule_frame(schedule, employees).to_csv(index=False, lineterminator="\n")
    summary = [
        f"Total Labor Hours,{plain_number(schedule.total_labor_hours)}",
        f"Total Labor Cost,${schedule.total_labor_cost:.2f}",
        f"Projected Revenue,${schedule.projected_revenue:.2f}",
        f"Labor Percentage,{schedule.labor_percentage:.1f}%",
    ]
    return body + "\n" + "\n".join(summary) + "\n"


def write_schedule_csv(path: str | Path, schedule: Schedule, employees: Sequence[Employee]) -> Path:
    """Write export_schedule_csv output to path and return the path."""
    path = Path(path)
    path.write_text(export_schedule_csv(schedule, employees), encoding="utf-8")
    print(f"[INFO] Wrote {len(schedule.shifts)} shifts to {path}")
    return path

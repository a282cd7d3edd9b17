"""CSV import utilities for rosters, forecasts and special events."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pandas as pd

from shiftplanner.domain.calendar import create_custom_event, impact_for_multiplier
from shiftplanner.domain.models import DAYS_OF_WEEK, ROLES, DailyForecast, Employee, SpecialEvent

_TRUE_VALUES = {"true", "yes", "y", "1", "x"}


def _read(csv_path: str | Path, required: Iterable[str]) -> pd.DataFrame:
    # Everything as text; ids like "007" must survive
    df = pd.read_csv(csv_path, dtype=str)

    # Normalize column names
    df.columns = df.columns.str.lower().str.strip()

    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(f"{csv_path}: missing required columns: {', '.join(missing)}")
    return df


def _text(row: pd.Series, column: str, default: str = "") -> str:
    value = row.get(column)
    if value is None or pd.isna(value):
        return default
    return str(value).strip()


def _flag(row: pd.Series, column: str, default: bool = False) -> bool:
    value = _text(row, column)
    if not value:
        return default
    return value.lower() in _TRUE_VALUES


def _date(value: str):
    return pd.to_datetime(value).date()


def read_employees_csv(csv_path: str | Path) -> List[Employee]:
    """
    Load a roster.

    Required columns: id, name, role, hourly_rate. Optional: max_hours_per_week,
    monday..sunday availability flags, skills (semicolon separated), hire_date,
    active.

    Raises:
        ValueError: On missing columns or an unknown value
    """
    df = _read(csv_path, ["id", "name", "role", "hourly_rate"])

    employees = []
    for _, row in df.iterrows():
        skills = [s.strip() for s in _text(row, "skills").split(";") if s.strip()]
        hire_date = _text(row, "hire_date")
        max_hours = _text(row, "max_hours_per_week")
        role = _text(row, "role").lower()
        if role not in ROLES:
            raise ValueError(f"{csv_path}: unknown role {role!r} for employee {_text(row, 'id')}")
        employees.append(
            Employee(
                id=_text(row, "id"),
                name=_text(row, "name"),
                role=role,
                hourly_rate=float(row["hourly_rate"]),
                availability={day: _flag(row, day) for day in DAYS_OF_WEEK},
                max_hours_per_week=float(max_hours) if max_hours else 40.0,
                skills=skills,
                hire_date=_date(hire_date) if hire_date else None,
                active=_flag(row, "active", default=True),
            )
        )

    print(f"[INFO] Imported {len(employees)} employees from {csv_path}")
    return employees


def read_forecasts_csv(csv_path: str | Path) -> List[DailyForecast]:
    """
    Load daily forecasts (date, predicted_orders, revenue_estimate[, peak_window]).

    Rows are returned in date order.
    """
    df = _read(csv_path, ["date", "predicted_orders", "revenue_estimate"])

    forecasts = [
        DailyForecast(
            date=_date(row["date"]),
            predicted_orders=float(row["predicted_orders"]),
            revenue_estimate=float(row["revenue_estimate"]),
            peak_window=_text(row, "peak_window"),
        )
        for _, row in df.iterrows()
    ]
    forecasts.sort(key=lambda f: f.date)

    print(f"[INFO] Imported {len(forecasts)} daily forecasts from {csv_path}")
    return forecasts


def read_events_csv(csv_path: str | Path) -> List[SpecialEvent]:
    """
    Load special events (name, date, type, impact_multiplier[, description, id, impact]).

    Rows without an id get a generated one; impact defaults to the tier
    matching the multiplier.
    """
    df = _read(csv_path, ["name", "date", "type", "impact_multiplier"])

    events = []
    for _, row in df.iterrows():
        multiplier = float(row["impact_multiplier"])
        event = create_custom_event(
            name=_text(row, "name"),
            event_date=_date(row["date"]),
            event_type=_text(row, "type").lower(),
            impact_multiplier=multiplier,
            description=_text(row, "description") or None,
        )
        event.id = _text(row, "id", default=event.id)
        event.impact = _text(row, "impact", default=impact_for_multiplier(multiplier)).lower()
        events.append(event)

    print(f"[INFO] Imported {len(events)} special events from {csv_path}")
    return events

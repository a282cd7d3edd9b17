"""Tests for the rule-based fallback generator."""

from collections import Counter

import pytest

from shiftplanner.config import FallbackPolicy, SchedulerConfig
from shiftplanner.domain.models import DailyForecast, week_dates
from shiftplanner.engine.fallback import (
    FALLBACK_RECOMMENDATION,
    FALLBACK_WARNING,
    FallbackScheduleGenerator,
)


def test_ninety_orders_a_day_scenario(request_factory):
    """7 days x 90 orders, 8 staff at $15: 3 lunch shifts a day."""
    result = FallbackScheduleGenerator().make_schedule(request_factory())
    schedule = result.schedule

    assert len(schedule.shifts) == 21
    assert schedule.total_labor_hours == 84
    assert schedule.total_labor_cost == 1260.0
    assert schedule.projected_revenue == 7000.0
    assert schedule.labor_percentage == 18.0
    assert {s.shift_type for s in schedule.shifts} == {"lunch"}
    assert {(str(s.start_time), str(s.end_time)) for s in schedule.shifts} == {("11:00", "15:00")}


def test_first_available_employees_in_roster_order(request_factory):
    result = FallbackScheduleGenerator().make_schedule(request_factory())
    per_day = Counter(s.date for s in result.schedule.shifts)
    assert set(per_day.values()) == {3}
    assert {s.employee_id for s in result.schedule.shifts} == {"e1", "e2", "e3"}


def test_employees_keep_their_own_role(request_factory, employees):
    result = FallbackScheduleGenerator().make_schedule(request_factory())
    roles = {emp.id: emp.role for emp in employees}
    assert all(shift.role == roles[shift.employee_id] for shift in result.schedule.shifts)


def test_busy_day_gets_dinner_template(request_factory, week_start):
    forecasts = [DailyForecast(date=week_start, predicted_orders=150, revenue_estimate=2500.0)]
    result = FallbackScheduleGenerator().make_schedule(request_factory(forecasts=forecasts))
    shifts = result.schedule.shifts
    assert len(shifts) == 5
    assert {s.shift_type for s in shifts} == {"dinner"}
    assert result.schedule.total_labor_hours == 30


def test_threshold_is_exclusive(request_factory, week_start):
    forecasts = [DailyForecast(date=week_start, predicted_orders=100, revenue_estimate=1200.0)]
    result = FallbackScheduleGenerator().make_schedule(request_factory(forecasts=forecasts))
    assert {s.shift_type for s in result.schedule.shifts} == {"lunch"}
    assert len(result.schedule.shifts) == 4


def test_skips_inactive_and_unavailable(request_factory, make_employee, week_start):
    roster = [
        make_employee("off", days=("tuesday",)),
        make_employee("gone", active=False),
        make_employee("on"),
    ]
    forecasts = [DailyForecast(date=week_start, predicted_orders=60, revenue_estimate=800.0)]
    result = FallbackScheduleGenerator().make_schedule(request_factory(employees=roster, forecasts=forecasts))
    assert [s.employee_id for s in result.schedule.shifts] == ["on"]


def test_no_available_staff_gives_empty_schedule(request_factory):
    result = FallbackScheduleGenerator().make_schedule(request_factory(employees=[]))
    assert result.schedule.shifts == []
    assert result.schedule.total_labor_cost == 0.0


def test_fixed_messages_and_source(request_factory):
    result = FallbackScheduleGenerator().make_schedule(request_factory())
    assert result.recommendations == [FALLBACK_RECOMMENDATION]
    assert result.warnings == [FALLBACK_WARNING]
    assert result.source == "fallback"
    assert result.schedule.status == "draft"


def test_schedule_totals_match_analysis(request_factory):
    result = FallbackScheduleGenerator().make_schedule(request_factory())
    assert result.schedule.total_labor_cost == result.labor_analysis.total_cost
    assert result.schedule.total_labor_hours == result.labor_analysis.total_hours
    assert result.schedule.labor_percentage == result.labor_analysis.labor_percentage


def test_from_config_uses_policy(request_factory, week_start):
    cfg = SchedulerConfig(fallback=FallbackPolicy(orders_per_staff=45, dinner_threshold=80))
    generator = FallbackScheduleGenerator.from_config(cfg)
    forecasts = [
        DailyForecast(date=d, predicted_orders=90, revenue_estimate=1000.0) for d in week_dates(week_start)
    ]
    result = generator.make_schedule(request_factory(forecasts=forecasts))
    assert len(result.schedule.shifts) == 14
    assert {s.shift_type for s in result.schedule.shifts} == {"dinner"}


def test_rejects_non_positive_orders_per_staff():
    with pytest.raises(ValueError):
        FallbackScheduleGenerator(orders_per_staff=0)

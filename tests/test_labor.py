"""Tests for the labor analysis engine."""

import random
from datetime import timedelta

import pytest

from shiftplanner.domain.clock import ClockTime
from shiftplanner.domain.models import DailyForecast, Schedule, Shift, generate_id
from shiftplanner.services.labor import LaborAnalyzer, calculate_labor_analysis, schedule_performance


def _shift(emp_id, day, start, end, role="cook"):
    return Shift(
        id=generate_id("shift"),
        employee_id=emp_id,
        date=day,
        start_time=ClockTime.parse(start),
        end_time=ClockTime.parse(end),
        role=role,
        shift_type="lunch",
    )


@pytest.fixture
def staff(make_employee):
    return [
        make_employee("a", role="cook", rate=18.5),
        make_employee("b", role="server", rate=12.25),
        make_employee("c", role="delivery", rate=14.0),
    ]


@pytest.fixture
def shifts(week_start):
    day2 = week_start + timedelta(days=1)
    return [
        _shift("a", week_start, "11:00", "15:00", "cook"),
        _shift("b", week_start, "16:00", "22:00", "server"),
        _shift("c", week_start, "20:00", "00:00", "delivery"),
        _shift("a", day2, "10:00", "18:00", "cook"),
        _shift("b", day2, "08:00", "12:00", "server"),
        _shift("c", day2, "16:30", "22:15", "delivery"),
    ]


def test_totals(staff, shifts, forecasts):
    analysis = calculate_labor_analysis(shifts, staff, forecasts)
    # a: 12h * 18.5, b: 10h * 12.25, c: 9.75h * 14
    assert analysis.total_hours == 31.8
    assert analysis.total_cost == pytest.approx(222.0 + 122.5 + 136.5)
    assert analysis.total_revenue == 7000.0
    assert analysis.labor_percentage == 6.9


def test_breakdowns_sum_to_totals(staff, shifts, forecasts):
    analysis = LaborAnalyzer().analyze(shifts, staff, forecasts)
    assert [r.role for r in analysis.by_role] == ["cook", "delivery", "server"]
    assert sum(r.cost for r in analysis.by_role) == pytest.approx(analysis.total_cost, abs=0.01)
    assert sum(d.cost for d in analysis.by_day) == pytest.approx(analysis.total_cost, abs=0.01)
    assert [d.staff_count for d in analysis.by_day] == [3, 3]


def test_order_independent(staff, shifts, forecasts):
    baseline = calculate_labor_analysis(shifts, staff, forecasts)
    shuffled = list(shifts)
    random.Random(7).shuffle(shuffled)
    again = calculate_labor_analysis(shuffled, staff, forecasts)
    assert again.to_dict() == baseline.to_dict()


def test_unknown_employee_contributes_nothing(staff, shifts, forecasts, week_start):
    baseline = calculate_labor_analysis(shifts, staff, forecasts)
    with_ghost = shifts + [_shift("ghost", week_start, "08:00", "20:00")]
    assert calculate_labor_analysis(with_ghost, staff, forecasts).to_dict() == baseline.to_dict()


def test_zero_revenue_gives_zero_percentage(staff, shifts, week_start):
    forecasts = [DailyForecast(date=week_start, predicted_orders=0, revenue_estimate=0.0)]
    analysis = calculate_labor_analysis(shifts, staff, forecasts)
    assert analysis.total_cost > 0
    assert analysis.labor_percentage == 0.0


def test_empty_shift_set(staff, forecasts):
    analysis = calculate_labor_analysis([], staff, forecasts)
    assert analysis.total_cost == 0.0
    assert analysis.total_hours == 0.0
    assert analysis.labor_percentage == 0.0
    assert analysis.total_revenue == 7000.0
    assert analysis.by_role == [] and analysis.by_day == []


def test_accepts_forecast_dicts(staff, shifts):
    analysis = calculate_labor_analysis(shifts, staff, [{"revenue_estimate": 500}, {"revenue_estimate": 500}])
    assert analysis.total_revenue == 1000.0


def test_schedule_performance(staff, shifts, forecasts, week_start):
    analysis = calculate_labor_analysis(shifts, staff, forecasts)
    schedule = Schedule.from_analysis(week_start, shifts, analysis)

    pending = schedule_performance(schedule)
    assert pending.planned_cost == schedule.total_labor_cost
    assert pending.variance is None

    perf = schedule_performance(schedule, actual_hours=34.0, actual_cost=schedule.total_labor_cost + 48.1)
    assert perf.variance == pytest.approx(48.1)
    assert perf.variance_percent == 10.0
    assert perf.efficiency == pytest.approx(0.94)

"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest

from shiftplanner.domain.models import DAYS_OF_WEEK, DailyForecast, Employee, ScheduleRequest, week_dates

WEEK_START = date(2025, 3, 3)  # Monday, no built-in events that week


def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def _employee(emp_id, role="cook", rate=15.0, days=DAYS_OF_WEEK, **kwargs):
    """Employee available on the given weekday names."""
    availability = {day: day in days for day in DAYS_OF_WEEK}
    return Employee(
        id=emp_id,
        name=kwargs.pop("name", f"Employee {emp_id}"),
        role=role,
        hourly_rate=rate,
        availability=availability,
        **kwargs,
    )


@pytest.fixture
def make_employee():
    return _employee


@pytest.fixture
def week_start():
    return WEEK_START


@pytest.fixture
def employees():
    """Eight active employees at $15/h, available every day."""
    roles = ["cook", "server", "delivery", "prep", "manager", "cook", "server", "delivery"]
    return [_employee(f"e{i + 1}", role=role) for i, role in enumerate(roles)]


@pytest.fixture
def forecasts(week_start):
    """Seven days of 90 predicted orders and $1000 revenue."""
    return [
        DailyForecast(date=d, predicted_orders=90, revenue_estimate=1000.0, peak_window="17:00-20:00")
        for d in week_dates(week_start)
    ]


@pytest.fixture
def request_factory(week_start, employees, forecasts):
    def _build(**overrides):
        params = dict(week_start_date=week_start, employees=employees, forecasts=forecasts)
        params.update(overrides)
        return ScheduleRequest(**params)

    return _build

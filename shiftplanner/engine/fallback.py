"""Rule-based generator used when no shift proposal is available."""

from __future__ import annotations

import math
from typing import Dict, List

from shiftplanner.domain.models import Schedule, ScheduleRequest, ScheduleResult, Shift, day_of_week, generate_id
from shiftplanner.services.labor import LaborAnalyzer
from shiftplanner.services.timeplan import SHIFT_TEMPLATES, ShiftTemplate

from .base import BaseGenerator

FALLBACK_RECOMMENDATION = "Fallback schedule generated. Connect the shift proposer for optimized scheduling."
FALLBACK_WARNING = "Shift proposer unavailable - using basic rule-based schedule"


class FallbackScheduleGenerator(BaseGenerator):
    """
    Staff each forecast day in proportion to predicted orders.

    Per day, the first ceil(orders / orders_per_staff) active employees who
    are available that weekday (in roster order) get one shift each, in their
    own role. Busy days (orders above dinner_threshold) use the dinner
    template, everything else the lunch template. Event multipliers are not
    applied here.
    """

    name = "FALLBACK"

    def __init__(
        self,
        analyzer: LaborAnalyzer | None = None,
        orders_per_staff: float = 30.0,
        dinner_threshold: float = 100.0,
        templates: Dict[str, ShiftTemplate] | None = None,
        high_demand_template: str = "dinner",
        default_template: str = "lunch",
    ):
        if orders_per_staff <= 0:
            raise ValueError("orders_per_staff must be positive")
        self.analyzer = analyzer or LaborAnalyzer()
        self.orders_per_staff = orders_per_staff
        self.dinner_threshold = dinner_threshold
        templates = templates or SHIFT_TEMPLATES
        self.high_demand_template = templates[high_demand_template]
        self.default_template = templates[default_template]

    @classmethod
    def from_config(cls, cfg, analyzer: LaborAnalyzer | None = None) -> "FallbackScheduleGenerator":
        policy = cfg.fallback
        return cls(
            analyzer=analyzer,
            orders_per_staff=policy.orders_per_staff,
            dinner_threshold=policy.dinner_threshold,
            templates=cfg.templates,
            high_demand_template=policy.high_demand_template,
            default_template=policy.default_template,
        )

    def staff_needed(self, predicted_orders: float) -> int:
        return max(0, math.ceil(predicted_orders / self.orders_per_staff))

    def template_for(self, predicted_orders: float) -> ShiftTemplate:
        if predicted_orders > self.dinner_threshold:
            return self.high_demand_template
        return self.default_template

    def make_schedule(self, request: ScheduleRequest) -> ScheduleResult:
        shifts: List[Shift] = []
        for forecast in request.forecasts:
            weekday = day_of_week(forecast.date)
            available = [emp for emp in request.employees if emp.active and emp.is_available(weekday)]
            needed = self.staff_needed(forecast.predicted_orders)
            template = self.template_for(forecast.predicted_orders)

            for emp in available[:needed]:
                shifts.append(
                    Shift(
                        id=generate_id("shift"),
                        employee_id=emp.id,
                        date=forecast.date,
                        start_time=template.start,
                        end_time=template.end,
                        role=emp.role,
                        shift_type=template.name,
                    )
                )

        analysis = self.analyzer.analyze(shifts, request.employees, request.forecasts)
        schedule = Schedule.from_analysis(request.week_start_date, shifts, analysis)
        return ScheduleResult(
            schedule=schedule,
            recommendations=[FALLBACK_RECOMMENDATION],
            warnings=[FALLBACK_WARNING],
            labor_analysis=analysis,
            source="fallback",
        )

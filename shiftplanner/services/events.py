"""Event-adjusted demand and event staffing advice."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List

from shiftplanner.domain.calendar import EventCalendar, StaticEventCalendar
from shiftplanner.domain.models import SpecialEvent

from .timeplan import round_half_up

CRITICAL_MULTIPLIER = 2.0
HIGH_MULTIPLIER = 1.5


@dataclass
class AdjustedDemand:
    adjusted_orders: float
    events: List[SpecialEvent] = field(default_factory=list)
    total_multiplier: float = 1.0


def percent_increase(multiplier: float) -> int:
    """Demand change implied by a multiplier, as a whole percentage."""
    return int(round_half_up((multiplier - 1) * 100))


class EventAdjuster:
    """
    Applies the special-events calendar to base demand.

    Events on the same date do not stack: only the highest multiplier counts.
    """

    def __init__(self, calendar: EventCalendar | None = None):
        self.calendar = calendar if calendar is not None else StaticEventCalendar()

    def calculate_event_adjusted_demand(self, base_orders: float, target: date) -> AdjustedDemand:
        """
        Scale base orders by the strongest event on the date.

        Args:
            base_orders: Forecast orders before events (non-negative)
            target: Calendar date

        Returns:
            AdjustedDemand with the rounded orders, matched events and multiplier
        """
        events = self.calendar.events_for_date(target)
        if not events:
            return AdjustedDemand(adjusted_orders=base_orders, events=[], total_multiplier=1.0)

        multiplier = max(event.impact_multiplier for event in events)
        return AdjustedDemand(
            adjusted_orders=round_half_up(base_orders * multiplier),
            events=events,
            total_multiplier=multiplier,
        )

    def get_event_staffing_recommendations(self, target: date) -> List[str]:
        """Advisory staffing notes for the date, in event order."""
        recommendations: List[str] = []
        for event in self.calendar.events_for_date(target):
            custom = event.customizations

            if custom is not None and custom.staffing_notes:
                recommendations.append(f"{event.name}: {custom.staffing_notes}")

            if event.impact_multiplier > CRITICAL_MULTIPLIER:
                recommendations.append(
                    f"CRITICAL: {event.name} expects {percent_increase(event.impact_multiplier)}% increase in orders"
                )
            elif event.impact_multiplier > HIGH_MULTIPLIER:
                recommendations.append(
                    f"HIGH: {event.name} expects {percent_increase(event.impact_multiplier)}% increase in orders"
                )

            if custom is not None and custom.extended_hours:
                recommendations.append(f"Consider extended hours for {event.name}")

            if custom is not None and custom.recommended_roles:
                recommendations.append(
                    f"Priority roles for {event.name}: {', '.join(custom.recommended_roles)}"
                )
        return recommendations

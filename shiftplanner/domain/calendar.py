"""Special-events calendar: the read-only data source behind event adjustment."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Iterable, List, Optional

from .models import EventCustomizations, SpecialEvent, generate_id


def _slug(name: str) -> str:
    return re.sub(r"\s+", "_", name.strip()).lower()


def _event(
    name: str,
    when: str,
    type_: str,
    impact: str,
    multiplier: float,
    description: str,
    staffing_notes: Optional[str] = None,
    recommended_roles: Optional[List[str]] = None,
    extended_hours: bool = False,
) -> SpecialEvent:
    customizations = None
    if staffing_notes or recommended_roles or extended_hours:
        customizations = EventCustomizations(
            staffing_notes=staffing_notes,
            recommended_roles=list(recommended_roles or []),
            extended_hours=extended_hours,
        )
    return SpecialEvent(
        id=f"event_{_slug(name)}",
        name=name,
        date=date.fromisoformat(when),
        type=type_,
        impact=impact,
        impact_multiplier=multiplier,
        description=description,
        recurring=True,
        customizations=customizations,
    )


# Demand multipliers for a pizza restaurant, dated for the 2025 season
ANNUAL_HOLIDAYS: List[SpecialEvent] = [
    # Very high impact (2.0x - 3.0x)
    _event(
        "Super Bowl Sunday", "2025-02-09", "sports", "very_high", 3.0,
        "Highest volume day of the year for pizza delivery",
        staffing_notes="All hands on deck - expect 3x normal volume. Start prep early.",
        recommended_roles=["cook", "delivery", "prep"],
        extended_hours=True,
    ),
    _event(
        "New Year's Eve", "2025-12-31", "holiday", "very_high", 2.2,
        "Major party night with high delivery and takeout demand",
        staffing_notes="Late night surge expected. Consider extended hours until 2 AM.",
        extended_hours=True,
    ),
    _event(
        "Halloween", "2025-10-31", "holiday", "very_high", 2.0,
        "High family demand and party orders",
        staffing_notes="Peak from 5-8 PM. Many large family orders.",
    ),
    # High impact (1.5x - 2.0x)
    _event("Valentine's Day", "2025-02-14", "holiday", "high", 1.8,
           "Strong dinner demand, many couples dining in"),
    _event("March Madness (First Weekend)", "2025-03-20", "sports", "high", 1.7,
           "NCAA tournament drives sports bar and delivery demand"),
    _event("Cinco de Mayo", "2025-05-05", "holiday", "high", 1.6,
           "Party night with strong evening demand"),
    _event("Memorial Day Weekend", "2025-05-26", "holiday", "high", 1.5,
           "Summer kickoff, strong weekend demand"),
    _event("Independence Day (July 4th)", "2025-07-04", "holiday", "high", 1.8,
           "Major party day with BBQs and gatherings"),
    _event("Labor Day Weekend", "2025-09-01", "holiday", "high", 1.5,
           "Summer ending celebrations"),
    _event(
        "Thanksgiving Eve", "2025-11-26", "holiday", "high", 1.9,
        "Biggest bar night of the year, high late-night demand",
        staffing_notes="Late night surge. Many people out with friends/family.",
    ),
    _event("Black Friday", "2025-11-28", "holiday", "high", 1.6,
           "Shoppers ordering delivery and takeout"),
    _event("Christmas Eve", "2025-12-24", "holiday", "high", 1.7,
           "Family gatherings and last-minute orders"),
    # Moderate impact (1.2x - 1.5x)
    _event("St. Patrick's Day", "2025-03-17", "holiday", "moderate", 1.4,
           "Bar crowds and evening parties"),
    _event("Easter Sunday", "2025-04-20", "holiday", "moderate", 1.3,
           "Family dinner demand"),
    _event("Mother's Day", "2025-05-11", "holiday", "moderate", 1.4,
           "Strong lunch and early dinner demand"),
    _event("Father's Day", "2025-06-15", "holiday", "moderate", 1.3,
           "Casual dining and sports bar demand"),
    _event("Back to School Week", "2025-09-02", "local_event", "moderate", 1.2,
           "Busy parents ordering convenience meals"),
    _event(
        "Christmas Day", "2025-12-25", "holiday", "moderate", 1.3,
        "Limited competition, family orders",
        staffing_notes="Consider closing or limited hours. Holiday pay applies.",
    ),
    # Slower than normal
    _event(
        "Thanksgiving Day", "2025-11-27", "holiday", "low", 0.3,
        "Slowest day of the year - people cooking at home",
        staffing_notes="Consider closing. Minimal demand expected.",
    ),
    # Season openers
    _event(
        "NFL Season (Sundays)", "2025-09-07", "sports", "moderate", 1.3,
        "Sunday football drives consistent demand Sept-Jan",
        staffing_notes="Strong Sunday demand during NFL season (Sept-Feb)",
    ),
    _event("March Madness (Finals)", "2025-04-07", "sports", "high", 1.8,
           "Championship game drives major demand"),
]


def impact_for_multiplier(multiplier: float) -> str:
    """Qualitative impact tier for a demand multiplier."""
    if multiplier >= 2.0:
        return "very_high"
    if multiplier >= 1.5:
        return "high"
    if multiplier >= 1.2:
        return "moderate"
    return "low"


def create_custom_event(
    name: str,
    event_date: date,
    event_type: str,
    impact_multiplier: float,
    description: Optional[str] = None,
) -> SpecialEvent:
    """
    Build an ad-hoc, non-recurring event.

    Raises:
        ValueError: If the multiplier is not positive
    """
    if impact_multiplier <= 0:
        raise ValueError(f"Impact multiplier must be positive, got {impact_multiplier}")
    return SpecialEvent(
        id=generate_id(f"custom_{_slug(name)}"),
        name=name,
        date=event_date,
        type=event_type,
        impact=impact_for_multiplier(impact_multiplier),
        impact_multiplier=impact_multiplier,
        description=description or f"Custom event: {name}",
        recurring=False,
    )


class EventCalendar(ABC):
    """Date-range lookup over special events. Matching is by calendar date only."""

    @abstractmethod
    def events_for_date_range(self, start: date, end: date) -> List[SpecialEvent]:
        """Events dated between start and end, both inclusive."""
        pass

    def events_for_date(self, target: date) -> List[SpecialEvent]:
        return self.events_for_date_range(target, target)


class StaticEventCalendar(EventCalendar):
    """In-memory calendar built from a list of events."""

    def __init__(self, events: Iterable[SpecialEvent] | None = None):
        self._events: List[SpecialEvent] = list(events or [])

    @classmethod
    def annual(cls) -> "StaticEventCalendar":
        """Calendar pre-loaded with the built-in holiday table."""
        return cls(ANNUAL_HOLIDAYS)

    @property
    def events(self) -> List[SpecialEvent]:
        return list(self._events)

    def add_event(self, event: SpecialEvent) -> None:
        self._events.append(event)

    def events_for_date_range(self, start: date, end: date) -> List[SpecialEvent]:
        return [event for event in self._events if start <= event.date <= end]

    def next_upcoming_event(self, today: date) -> Optional[SpecialEvent]:
        """Earliest event on or after today, or None."""
        upcoming = [event for event in self._events if event.date >= today]
        if not upcoming:
            return None
        return min(upcoming, key=lambda event: event.date)

    def high_impact_events_in_next(self, days: int, today: date) -> List[SpecialEvent]:
        """High and very-high impact events from today through today + days."""
        window = self.events_for_date_range(today, today + timedelta(days=days))
        return [event for event in window if event.impact in ("very_high", "high")]

    def __len__(self) -> int:
        return len(self._events)

"""
modules/planning/itinerary_generator.py
-----------------------------------------
Deterministic, template-based itinerary skeleton.

Day layout for an N-day trip:
  Day 1          — travel: arrival sentence chosen by travel type
  Day N (N > 1)  — travel: fixed wrap-up / departure sentence
  Interior days  — first ceil(EXPLORE_SHARE × interior) are "explore",
                   the rest "relax"

Activity catalogs are fixed tuples indexed by modulo; no randomness, so the
same intent always yields the same plan. This output is also the fallback
whenever AI itinerary generation fails (see ai_itinerary.py).
"""

from __future__ import annotations

import math
from typing import Optional

from tripsense import config
from tripsense.core.enums import DayPurpose, TravelType
from tripsense.schemas.trip import DayPlan, Itinerary, SimpleDay, TripIntent

EXPLORE_ACTIVITIES: tuple[str, ...] = (
    "Explore iconic landmarks and local neighborhoods",
    "Discover hidden gems and cultural hotspots",
    "Wander through markets and taste authentic cuisine",
    "Experience adventure activities and outdoor spots",
    "Visit museums, galleries, and heritage sites",
)

RELAX_ACTIVITIES: tuple[str, ...] = (
    "Unwind at scenic viewpoints and cafes",
    "Enjoy leisurely walks and spa time",
    "Savor sunset views and fine dining",
    "Relax by the beach or pool",
)

_ARRIVAL_ACTIVITIES: dict[TravelType, str] = {
    TravelType.FAMILY: "Arrive, check in, and settle with the family",
    TravelType.COUPLE: "Arrive, check in, and enjoy a romantic evening",
    TravelType.SOLO:   "Arrive, check in, and take an evening stroll",
}
_DEFAULT_ARRIVAL = "Arrive, check in, and explore nearby"
DEPARTURE_ACTIVITY = "Morning at leisure, pack up, and head home"

DEFAULT_SOURCE = "your city"
DEFAULT_DESTINATION = "destination"

# ── One-line-per-day templates: (arrival, middle, return) ───────────────────
_SIMPLE_TEMPLATES: dict[TravelType, tuple[str, str, str]] = {
    TravelType.FAMILY: (
        "Arrival, rest, and family bonding",
        "Family sightseeing and fun",
        "Pack up, family breakfast, and return",
    ),
    TravelType.COUPLE: (
        "Arrival and relax together",
        "Explore and enjoy together",
        "Leisure morning and return",
    ),
    TravelType.SOLO: (
        "Arrival and chill solo",
        "Solo exploring and relaxing",
        "Explore, relax, and return",
    ),
    TravelType.UNKNOWN: (
        "Arrival and rest",
        "Sightseeing and relaxing",
        "Explore and return",
    ),
}


def _interior_day(middle_day: int, total_middle_days: int) -> tuple[str, DayPurpose]:
    if total_middle_days == 1:
        return EXPLORE_ACTIVITIES[0], DayPurpose.EXPLORE

    explore_days = math.ceil(total_middle_days * config.EXPLORE_SHARE)
    if middle_day <= explore_days:
        return EXPLORE_ACTIVITIES[(middle_day - 1) % len(EXPLORE_ACTIVITIES)], DayPurpose.EXPLORE

    relax_index = (middle_day - explore_days - 1) % len(RELAX_ACTIVITIES)
    return RELAX_ACTIVITIES[relax_index], DayPurpose.RELAX


def plan_day(day: int, days: int, travel_type: TravelType) -> DayPlan:
    """Template entry for `day` of a `days`-long trip."""
    if day == 1:
        # Checked before the last-day branch: a 1-day trip is an arrival day.
        activity = _ARRIVAL_ACTIVITIES.get(travel_type, _DEFAULT_ARRIVAL)
        return DayPlan(day=day, activity=activity, purpose=DayPurpose.TRAVEL)
    if day == days:
        return DayPlan(day=day, activity=DEPARTURE_ACTIVITY, purpose=DayPurpose.TRAVEL)

    activity, purpose = _interior_day(day - 1, days - 2)
    return DayPlan(day=day, activity=activity, purpose=purpose)


def generate_itinerary(parsed_trip: TripIntent) -> Itinerary:
    """
    Build the day-by-day template plan for a parsed trip.

    Missing fields fall back to defaults instead of failing:
    days → DEFAULT_TRIP_DAYS, source → "your city", destination → "destination".
    """
    days = parsed_trip.number_of_days or config.DEFAULT_TRIP_DAYS
    travel_type = parsed_trip.travel_type
    return Itinerary(
        source=parsed_trip.source_city or DEFAULT_SOURCE,
        destination=parsed_trip.destination_city or DEFAULT_DESTINATION,
        days=days,
        travel_type=travel_type,
        plan=[plan_day(i, days, travel_type) for i in range(1, days + 1)],
    )


def generate_itinerary_simple(
    number_of_days: Optional[int],
    travel_type: Optional[TravelType] = None,
) -> list[SimpleDay]:
    """Generic {day, plan} list; used where only a one-liner per day is shown."""
    days = number_of_days or 1
    arrival, middle, departure = _SIMPLE_TEMPLATES.get(
        travel_type or TravelType.UNKNOWN, _SIMPLE_TEMPLATES[TravelType.UNKNOWN]
    )
    plans: list[SimpleDay] = []
    for i in range(1, days + 1):
        if i == 1:
            plan = arrival
        elif i == days:
            plan = departure
        else:
            plan = middle
        plans.append(SimpleDay(day=i, plan=plan))
    return plans

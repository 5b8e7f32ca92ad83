"""
modules/recommendation/flight_recommender.py
---------------------------------------------
Flight-timing heuristic keyed on travel type, plus mock carrier options.

  family  → morning, direct
  couple  → evening, direct
  solo    → morning, one-stop
  other   → morning, direct

Pure lookup; no external state.
"""

from __future__ import annotations
from typing import Optional

from tripsense.core.enums import FlightTiming, FlightType, TravelType
from tripsense.schemas.trip import FlightOption, FlightRecommendation

_FLIGHT_RULES: dict[TravelType, FlightRecommendation] = {
    TravelType.FAMILY: FlightRecommendation(
        timing=FlightTiming.MORNING,
        type=FlightType.DIRECT,
        explanation="Family ke saath travel hai, toh morning ka direct flight best rahega.",
    ),
    TravelType.COUPLE: FlightRecommendation(
        timing=FlightTiming.EVENING,
        type=FlightType.DIRECT,
        explanation="Couple ke liye evening ka direct flight romantic hoga.",
    ),
    TravelType.SOLO: FlightRecommendation(
        timing=FlightTiming.MORNING,
        type=FlightType.ONE_STOP,
        explanation="Solo trip hai, toh morning ka one-stop flight bhi sahi hai.",
    ),
}

_DEFAULT_FLIGHT = FlightRecommendation(
    timing=FlightTiming.MORNING,
    type=FlightType.DIRECT,
    explanation="Morning ka direct flight convenient rahega.",
)

# (airline, price, duration)
_MOCK_CARRIERS: tuple[tuple[str, str, str], ...] = (
    ("IndiGo",    "₹4500", "2h 15m"),
    ("Air India", "₹5200", "2h 10m"),
    ("Vistara",   "₹4800", "2h 20m"),
)


def recommend_flight(travel_type: Optional[TravelType | str]) -> FlightRecommendation:
    try:
        key = TravelType(travel_type)
    except ValueError:
        return _DEFAULT_FLIGHT
    return _FLIGHT_RULES.get(key, _DEFAULT_FLIGHT)


def recommend_flights(
    source_city: Optional[str],
    destination_city: Optional[str],
) -> list[FlightOption]:
    """Mock carrier list for a route; empty unless both cities are known."""
    if not source_city or not destination_city:
        return []
    return [
        FlightOption(
            airline=airline,
            origin=source_city,
            destination=destination_city,
            price=price,
            duration=duration,
        )
        for airline, price, duration in _MOCK_CARRIERS
    ]

"""
modules/recommendation/hotel_recommender.py
---------------------------------------------
Stay-area heuristic keyed on travel type and trip length, plus mock hotels.

The base area comes from the travel type; afterwards any stay longer than
LONG_STAY_THRESHOLD_DAYS is overridden with the peaceful residential area,
whatever the travel type.
"""

from __future__ import annotations
from typing import Optional

from tripsense import config
from tripsense.core.enums import TravelType
from tripsense.schemas.trip import HotelAreaRecommendation, HotelOption

_AREA_RULES: dict[TravelType, HotelAreaRecommendation] = {
    TravelType.FAMILY: HotelAreaRecommendation(
        area="near main attractions",
        reason="Family ke saath ho toh sab jagah aasani se ja sakte ho.",
    ),
    TravelType.COUPLE: HotelAreaRecommendation(
        area="quiet or scenic area",
        reason="Couple trip hai, toh shanti aur privacy milegi.",
    ),
    TravelType.SOLO: HotelAreaRecommendation(
        area="central or lively area",
        reason="Solo ho toh safe aur happening jagah pe raho.",
    ),
}

_DEFAULT_AREA = HotelAreaRecommendation(
    area="city center",
    reason="Yahan se sab kuch aasaan hai.",
)

LONG_STAY_AREA = HotelAreaRecommendation(
    area="peaceful residential area",
    reason="Lamba stay hai toh shanti zaroori hai.",
)

# (name, type, note) per travel type
_MOCK_HOTELS: dict[TravelType, tuple[tuple[str, str, str], ...]] = {
    TravelType.FAMILY: (
        ("Family Comfort Inn",   "Hotel",  "Family rooms available"),
        ("Kids Friendly Resort", "Resort", "Play area for kids"),
    ),
    TravelType.COUPLE: (
        ("Romantic Retreat", "Hotel",  "Couple packages available"),
        ("Lovers Paradise",  "Resort", "Private suites"),
    ),
    TravelType.SOLO: (
        ("Solo Stay",  "Hostel", "Meet other travelers"),
        ("Budget Inn", "Hotel",  "Affordable and safe"),
    ),
    TravelType.UNKNOWN: (
        ("City Center Hotel",   "Hotel",      "Good location"),
        ("Standard Guesthouse", "Guesthouse", "Simple and clean"),
    ),
}


def _as_travel_type(travel_type: Optional[TravelType | str]) -> TravelType:
    try:
        return TravelType(travel_type)
    except ValueError:
        return TravelType.UNKNOWN


def recommend_hotel_area(
    travel_type: Optional[TravelType | str],
    number_of_days: Optional[int],
) -> HotelAreaRecommendation:
    recommendation = _AREA_RULES.get(_as_travel_type(travel_type), _DEFAULT_AREA)
    # Long stays win over the travel-type choice.
    if number_of_days and number_of_days > config.LONG_STAY_THRESHOLD_DAYS:
        recommendation = LONG_STAY_AREA
    return recommendation


def recommend_hotels(
    destination_city: Optional[str],
    travel_type: Optional[TravelType | str],
) -> list[HotelOption]:
    """Two mock stays for the destination; empty when it is unknown."""
    if not destination_city:
        return []
    return [
        HotelOption(name=name, type=kind, location=destination_city, note=note)
        for name, kind, note in _MOCK_HOTELS[_as_travel_type(travel_type)]
    ]

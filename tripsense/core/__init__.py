"""core — shared enums for the trip planning pipeline."""

from tripsense.core.enums import (
    DayPurpose,
    FlightTiming,
    FlightType,
    FollowUpField,
    Language,
    TravelType,
)

__all__ = [
    "DayPurpose",
    "FlightTiming",
    "FlightType",
    "FollowUpField",
    "Language",
    "TravelType",
]

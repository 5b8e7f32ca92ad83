"""schemas — dataclasses passed between pipeline stages."""

from tripsense.schemas.trip import (
    DayPlan,
    FlightOption,
    FlightRecommendation,
    HotelAreaRecommendation,
    HotelOption,
    Itinerary,
    NeedsFollowUp,
    PlanReady,
    SimpleDay,
    TripIntent,
    TripPlan,
    TripPlanResult,
)

__all__ = [
    "DayPlan",
    "FlightOption",
    "FlightRecommendation",
    "HotelAreaRecommendation",
    "HotelOption",
    "Itinerary",
    "NeedsFollowUp",
    "PlanReady",
    "SimpleDay",
    "TripIntent",
    "TripPlan",
    "TripPlanResult",
]

"""modules/planning — template itinerary and optional AI rewrite."""

from tripsense.modules.planning.itinerary_generator import (
    DEPARTURE_ACTIVITY,
    EXPLORE_ACTIVITIES,
    RELAX_ACTIVITIES,
    generate_itinerary,
    generate_itinerary_simple,
    plan_day,
)

__all__ = [
    "DEPARTURE_ACTIVITY",
    "EXPLORE_ACTIVITIES",
    "RELAX_ACTIVITIES",
    "generate_itinerary",
    "generate_itinerary_simple",
    "plan_day",
]

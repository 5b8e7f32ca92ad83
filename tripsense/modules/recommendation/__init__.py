"""modules/recommendation — flight and hotel heuristics."""

from tripsense.modules.recommendation.flight_recommender import recommend_flight, recommend_flights
from tripsense.modules.recommendation.hotel_recommender import (
    LONG_STAY_AREA,
    recommend_hotel_area,
    recommend_hotels,
)

__all__ = [
    "LONG_STAY_AREA",
    "recommend_flight",
    "recommend_flights",
    "recommend_hotel_area",
    "recommend_hotels",
]

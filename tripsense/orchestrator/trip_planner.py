"""
orchestrator/trip_planner.py
-----------------------------
Single entry point that chains the pipeline stages:

  1. Intent Parser          → TripIntent
  2. Follow-Up Selector     → questions for missing required fields
       ↳ any questions?  return NeedsFollowUp (nothing else is computed)
  3. Itinerary Generator    → Itinerary
  4. Flight heuristic       → FlightRecommendation
  5. Hotel-area heuristic   → HotelAreaRecommendation
  → PlanReady(TripPlan)

Stateless: multi-turn clarification is the caller appending the answer to
the original text (combine_follow_up_answer) and calling again.
"""

from __future__ import annotations

import logging

from tripsense.core.enums import Language
from tripsense.modules.input.follow_up import get_follow_up_fields, get_follow_up_questions
from tripsense.modules.input.intent_parser import parse_travel_input
from tripsense.modules.planning.itinerary_generator import generate_itinerary
from tripsense.modules.recommendation.flight_recommender import recommend_flight
from tripsense.modules.recommendation.hotel_recommender import recommend_hotel_area
from tripsense.schemas.trip import (
    NeedsFollowUp,
    PlanReady,
    TripIntent,
    TripPlan,
    TripPlanResult,
)

logger = logging.getLogger(__name__)


def build_trip_plan(parsed: TripIntent) -> TripPlan:
    return TripPlan(
        parsed=parsed,
        itinerary=generate_itinerary(parsed),
        flight=recommend_flight(parsed.travel_type),
        hotel_area=recommend_hotel_area(parsed.travel_type, parsed.number_of_days),
    )


def plan_trip(input_text: str) -> TripPlan:
    """Plan without the completeness gate; generator defaults fill the gaps."""
    return build_trip_plan(parse_travel_input(input_text))


def create_trip_plan(
    input_text: str,
    language: Language | str = Language.ENGLISH,
) -> TripPlanResult:
    """
    Plan a trip from free text, or say what is still missing.

    Example:
        create_trip_plan("Goa")
        → NeedsFollowUp(questions=["Where are you traveling from? (Source city)",
                                   "Where do you want to go? (Destination city)"], ...)
    """
    parsed = parse_travel_input(input_text)
    questions = get_follow_up_questions(parsed, language)
    if questions:
        logger.debug("Intent incomplete, missing %s", [f.value for f in parsed.missing_fields()])
        return NeedsFollowUp(
            questions=questions,
            fields=get_follow_up_fields(parsed),
            parsed=parsed,
        )

    logger.debug(
        "Planning %s → %s, %d day(s), %s",
        parsed.source_city, parsed.destination_city,
        parsed.number_of_days, parsed.travel_type.value,
    )
    return PlanReady(plan=build_trip_plan(parsed))

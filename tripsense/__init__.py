"""tripsense — rule-based free-text trip planner."""

from tripsense.modules.input.follow_up import combine_follow_up_answer
from tripsense.orchestrator.trip_planner import create_trip_plan, plan_trip
from tripsense.schemas.trip import NeedsFollowUp, PlanReady, TripPlan

__version__ = "0.1.0"

__all__ = [
    "NeedsFollowUp",
    "PlanReady",
    "TripPlan",
    "combine_follow_up_answer",
    "create_trip_plan",
    "plan_trip",
]

"""orchestrator — composes parsing, slot filling and generation."""

from tripsense.orchestrator.trip_planner import build_trip_plan, create_trip_plan, plan_trip

__all__ = ["build_trip_plan", "create_trip_plan", "plan_trip"]

"""
schemas/trip.py
---------------
Dataclass definitions for the trip planning pipeline.

TripIntent   — what the Intent Parser extracted from a free-text request
DayPlan      — one day of the template itinerary
Itinerary    — day-by-day plan produced by the Itinerary Generator
TripPlan     — aggregate returned once the intent is complete

The planner's two outcomes are modelled as a tagged union:
  NeedsFollowUp — required fields are missing; ask the user
  PlanReady     — intent was complete; the TripPlan is attached

Every dataclass exposes to_dict() which produces the camelCase shape the
web front end consumes (sourceCity, travelType, followUpQuestions, ...).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from tripsense.core.enums import DayPurpose, FlightTiming, FlightType, FollowUpField, TravelType


# ─────────────────────────────────────────────────────────────────────────────
# Parsed intent
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TripIntent:
    """
    Structured trip parameters extracted from user text.
    Complete iff source, destination and number of days are all set;
    travel_type may stay UNKNOWN.
    """
    source_city: Optional[str] = None
    destination_city: Optional[str] = None
    number_of_days: Optional[int] = None
    travel_type: TravelType = TravelType.UNKNOWN

    def missing_fields(self) -> list[FollowUpField]:
        """Required fields still unset, in the order they should be asked."""
        missing: list[FollowUpField] = []
        if not self.source_city:
            missing.append(FollowUpField.SOURCE)
        if not self.destination_city:
            missing.append(FollowUpField.DESTINATION)
        if not self.number_of_days:
            missing.append(FollowUpField.DAYS)
        return missing

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def to_dict(self) -> dict[str, Any]:
        return {
            "sourceCity":      self.source_city,
            "destinationCity": self.destination_city,
            "numberOfDays":    self.number_of_days,
            "travelType":      TravelType(self.travel_type).value,
        }


# ─────────────────────────────────────────────────────────────────────────────
# Itinerary
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DayPlan:
    """One itinerary entry. `day` is 1-based and contiguous."""
    day: int
    activity: str
    purpose: DayPurpose

    def to_dict(self) -> dict[str, Any]:
        return {"day": self.day, "activity": self.activity, "purpose": self.purpose.value}


@dataclass(frozen=True)
class SimpleDay:
    """Compact {day, plan} entry used by the one-line-per-day itinerary."""
    day: int
    plan: str

    def to_dict(self) -> dict[str, Any]:
        return {"day": self.day, "plan": self.plan}


@dataclass(frozen=True)
class Itinerary:
    source: str
    destination: str
    days: int
    travel_type: TravelType
    plan: list[DayPlan] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source":      self.source,
            "destination": self.destination,
            "days":        self.days,
            "travelType":  TravelType(self.travel_type).value,
            "plan":        [d.to_dict() for d in self.plan],
        }


# ─────────────────────────────────────────────────────────────────────────────
# Recommendations
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FlightRecommendation:
    timing: FlightTiming
    type: FlightType
    explanation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "timing":      FlightTiming(self.timing).value,
            "type":        FlightType(self.type).value,
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class FlightOption:
    """Mock carrier option shown next to the flight-timing recommendation."""
    airline: str
    origin: str
    destination: str
    price: str
    duration: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "airline":  self.airline,
            "from":     self.origin,
            "to":       self.destination,
            "price":    self.price,
            "duration": self.duration,
        }


@dataclass(frozen=True)
class HotelAreaRecommendation:
    area: str
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return {"area": self.area, "reason": self.reason}


@dataclass(frozen=True)
class HotelOption:
    name: str
    type: str            # "Hotel" | "Resort" | "Hostel" | "Guesthouse"
    location: str
    note: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type, "location": self.location, "note": self.note}


# ─────────────────────────────────────────────────────────────────────────────
# Aggregate plan + planner result
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TripPlan:
    parsed: TripIntent
    itinerary: Itinerary
    flight: FlightRecommendation
    hotel_area: HotelAreaRecommendation

    def to_dict(self) -> dict[str, Any]:
        return {
            "parsed":    self.parsed.to_dict(),
            "itinerary": self.itinerary.to_dict(),
            "flight":    self.flight.to_dict(),
            "hotelArea": self.hotel_area.to_dict(),
        }


@dataclass(frozen=True)
class NeedsFollowUp:
    """Intent is incomplete. `fields[i]` is the slot `questions[i]` asks for."""
    questions: list[str]
    fields: list[FollowUpField] = field(default_factory=list)
    parsed: Optional[TripIntent] = None

    def to_dict(self) -> dict[str, Any]:
        return {"followUpQuestions": list(self.questions)}


@dataclass(frozen=True)
class PlanReady:
    plan: TripPlan

    def to_dict(self) -> dict[str, Any]:
        return {"plan": self.plan.to_dict()}


TripPlanResult = Union[NeedsFollowUp, PlanReady]

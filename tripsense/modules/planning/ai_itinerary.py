"""
modules/planning/ai_itinerary.py
---------------------------------
Optional LLM rewrite of the template itinerary.

The LLM is asked for a JSON object:
    {"itinerary": [{"day": 1, "title": "...", "plan": "Morning: ... "}, ...]}

Every entry must carry an integer `day` and string `title` / `plan`. Any
failure (provider error, non-JSON text, wrong shape) is logged and the
template TripPlan is returned unchanged, so callers always get a plan with
the same structure.

LLM clients expose `.complete(prompt: str) -> str`:
  StubLLMClient — no API calls (USE_STUB_LLM=true, the default)
  GeminiClient  — google-genai backed
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import replace
from typing import Any, Optional, Protocol

from google import genai as genai_sdk
from pydantic import BaseModel, StrictInt, StrictStr, ValidationError

from tripsense import config
from tripsense.core.enums import DayPurpose, TravelType
from tripsense.schemas.trip import DayPlan, TripIntent, TripPlan

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# LLM clients
# ─────────────────────────────────────────────────────────────────────────────

class LLMClient(Protocol):
    def complete(self, prompt: str) -> str: ...


class StubLLMClient:
    """No-op LLM client. Its reply is not JSON, so callers fall back to templates."""

    def complete(self, prompt: str) -> str:  # noqa: ARG002
        return "[stub response]"


class GeminiClient:

    def __init__(self, model: Optional[str] = None, api_key: Optional[str] = None):
        self._client = genai_sdk.Client(
            api_key=api_key or config.LLM_API_KEY,
            # google-genai reads the timeout in milliseconds
            http_options={"timeout": config.LLM_TIMEOUT_SECONDS * 1000},
        )
        self._model = model or config.LLM_MODEL_NAME

    def complete(self, prompt: str) -> str:
        response = self._client.models.generate_content(
            model=self._model,
            contents=prompt,
        )
        return response.text


_PROVIDERS: dict[str, type] = {
    "google": GeminiClient,
}


def make_llm_client() -> LLMClient:
    """Client for LLM_PROVIDER; the stub when disabled, unkeyed or unsupported."""
    if config.USE_STUB_LLM or not config.LLM_API_KEY:
        return StubLLMClient()
    provider = config.LLM_PROVIDER.strip().lower()
    client_cls = _PROVIDERS.get(provider)
    if client_cls is None:
        logger.warning("Unsupported LLM provider %r; using stub client", provider)
        return StubLLMClient()
    return client_cls()


# ─────────────────────────────────────────────────────────────────────────────
# Response schema
# ─────────────────────────────────────────────────────────────────────────────

class AIDay(BaseModel):
    day: StrictInt
    title: StrictStr
    plan: StrictStr


class AIItinerary(BaseModel):
    itinerary: list[AIDay]


# ─────────────────────────────────────────────────────────────────────────────
# Prompt
# ─────────────────────────────────────────────────────────────────────────────

_TRAVEL_TYPE_NOTES: dict[TravelType, str] = {
    TravelType.FAMILY: (
        "This is a family trip - keep activities family-friendly, safe, and suitable "
        "for all ages. Include kid-friendly spots and avoid late-night or intense activities."
    ),
    TravelType.COUPLE: (
        "This is a couple trip - include romantic spots, leisure activities, "
        "and experiences for two."
    ),
    TravelType.SOLO: (
        "This is a solo trip - include flexible activities, social opportunities, "
        "and safe exploration options."
    ),
}
_DEFAULT_NOTE = "Keep activities practical and enjoyable for general travelers."

_ITINERARY_PROMPT = """Generate a {days}-day itinerary for {source} to {destination}.

{note}

Grounding requirements:
- Each time block must name real, destination-specific landmarks, attractions, neighborhoods, or famous experiences.
- Balance sightseeing, food, culture, and downtime; keep a relaxed, realistic pace.

Day structure:
- Morning (8-12): Specific landmark/museum/temple/park + short why relevant.
- Afternoon (12-5): Named attraction + food stop with a specific dish.
- Evening (5-10): Named neighborhood/market/waterfront/show + dinner spot.

Trip flow rules:
- Day 1: Arrival logistics, light exploration near stay.
- Middle days: Cover top landmarks + a local cultural/food experience each day.
- Last day: One meaningful stop, checkout, and departure prep.
{extra}
Respond with ONLY valid JSON — no markdown, no explanation:

{{
  "itinerary": [
    {{"day": 1, "title": "Arrival & First Impressions", "plan": "Afternoon: ... Evening: ..."}}
  ]
}}
"""


def build_itinerary_prompt(parsed_trip: TripIntent, additional_context: str = "") -> str:
    return _ITINERARY_PROMPT.format(
        days=parsed_trip.number_of_days or config.DEFAULT_TRIP_DAYS,
        source=parsed_trip.source_city or "",
        destination=parsed_trip.destination_city or "",
        note=_TRAVEL_TYPE_NOTES.get(parsed_trip.travel_type, _DEFAULT_NOTE),
        extra=f"\nAdditional context:{additional_context}\n" if additional_context else "",
    )


# ─────────────────────────────────────────────────────────────────────────────
# Parsing / validation
# ─────────────────────────────────────────────────────────────────────────────

def _load_json(raw: str) -> Any:
    raw = re.sub(r"```(?:json)?", "", raw).strip().rstrip("`").strip()
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        match = re.search(r"\{.*\}", raw, re.DOTALL)
        if match:
            try:
                return json.loads(match.group())
            except json.JSONDecodeError:
                pass
    return None


def parse_ai_itinerary(raw: Optional[str]) -> Optional[list[AIDay]]:
    """Validated day list from an LLM reply, or None if it is unusable."""
    if not raw:
        logger.warning("No content received from LLM")
        return None

    data = _load_json(raw)
    if data is None:
        logger.warning("Failed to parse LLM itinerary JSON")
        return None

    try:
        return AIItinerary.model_validate(data).itinerary
    except ValidationError as exc:
        logger.warning("Invalid itinerary structure received: %d error(s)", exc.error_count())
        return None


# ─────────────────────────────────────────────────────────────────────────────
# Enhancement with fallback
# ─────────────────────────────────────────────────────────────────────────────

def generate_ai_itinerary(
    parsed_trip: TripIntent,
    llm_client: LLMClient,
    additional_context: str = "",
) -> Optional[list[AIDay]]:
    prompt = build_itinerary_prompt(parsed_trip, additional_context)
    try:
        raw = llm_client.complete(prompt)
    except Exception as exc:
        logger.warning("LLM itinerary call failed (%s); falling back", type(exc).__name__)
        return None
    return parse_ai_itinerary(raw)


def enhance_itinerary(
    trip_plan: TripPlan,
    llm_client: Optional[LLMClient] = None,
    additional_context: str = "",
) -> TripPlan:
    """
    Replace template activities with AI-written ones when the LLM returns a
    valid itinerary; otherwise return `trip_plan` untouched.
    """
    client = llm_client or make_llm_client()
    ai_days = generate_ai_itinerary(trip_plan.parsed, client, additional_context)
    if not ai_days:
        return trip_plan

    last_day = len(ai_days)
    plan = [
        DayPlan(
            day=d.day,
            activity=f"{d.title}\n\n{d.plan}",
            purpose=DayPurpose.TRAVEL if i in (1, last_day) else DayPurpose.EXPLORE,
        )
        for i, d in enumerate(ai_days, start=1)
    ]
    logger.info("Itinerary replaced with %d AI-generated day(s)", len(plan))
    return replace(trip_plan, itinerary=replace(trip_plan.itinerary, plan=plan))

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from tripsense import config
from tripsense.core.enums import FollowUpField, Language
from tripsense.modules.input.follow_up import combine_follow_up_answer
from tripsense.modules.input.intent_parser import parse_travel_input
from tripsense.modules.planning.ai_itinerary import enhance_itinerary, make_llm_client
from tripsense.orchestrator.trip_planner import create_trip_plan
from tripsense.schemas.trip import PlanReady

logger = logging.getLogger(__name__)

app = FastAPI(title="tripsense API")


class TripRequest(BaseModel):
    text: str
    language: Language = Language.ENGLISH


class FollowUpRequest(BaseModel):
    original_text: str
    answer: str
    answered: FollowUpField = FollowUpField.SOURCE
    language: Language = Language.ENGLISH


class ParseRequest(BaseModel):
    text: str


def _ensure_trip_length(text: str) -> None:
    """Reject day counts above MAX_TRIP_DAYS before any plan is built."""
    days = parse_travel_input(text).number_of_days
    if days and days > config.MAX_TRIP_DAYS:
        raise HTTPException(
            status_code=422,
            detail=f"Trips longer than {config.MAX_TRIP_DAYS} days are not supported (got {days})",
        )


@app.get("/")
async def root():
    return {"message": "tripsense is running"}


@app.post("/parse")
def parse(request: ParseRequest) -> Dict[str, Any]:
    return parse_travel_input(request.text).to_dict()


@app.post("/trip-plan")
def trip_plan(request: TripRequest) -> Dict[str, Any]:
    """Either {"followUpQuestions": [...]} or {"plan": {...}}."""
    _ensure_trip_length(request.text)
    try:
        return create_trip_plan(request.text, request.language).to_dict()
    except Exception as e:
        logger.exception("Trip planning failed")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/trip-plan/follow-up")
def trip_plan_follow_up(request: FollowUpRequest) -> Dict[str, Any]:
    combined = combine_follow_up_answer(request.original_text, request.answer, request.answered)
    _ensure_trip_length(combined)
    try:
        result = create_trip_plan(combined, request.language).to_dict()
    except Exception as e:
        logger.exception("Trip planning failed")
        raise HTTPException(status_code=500, detail=str(e))
    result["text"] = combined
    return result


@app.post("/trip-plan/ai")
def trip_plan_ai(request: TripRequest) -> Dict[str, Any]:
    """Same as /trip-plan, with the itinerary rewritten by the LLM when it succeeds."""
    _ensure_trip_length(request.text)
    result = create_trip_plan(request.text, request.language)
    if not isinstance(result, PlanReady):
        return result.to_dict()
    try:
        plan = enhance_itinerary(result.plan, make_llm_client())
    except Exception as e:
        logger.exception("AI enhancement failed")
        raise HTTPException(status_code=500, detail=str(e))
    return PlanReady(plan=plan).to_dict()


def run() -> None:
    import uvicorn

    config.configure_logging()
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    run()

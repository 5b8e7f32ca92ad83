import json

import pytest

from tripsense import config
from tripsense.core.enums import DayPurpose, TravelType
from tripsense.modules.planning import ai_itinerary
from tripsense.modules.planning.ai_itinerary import (
    StubLLMClient,
    build_itinerary_prompt,
    enhance_itinerary,
    make_llm_client,
    parse_ai_itinerary,
)
from tripsense.orchestrator.trip_planner import build_trip_plan


@pytest.fixture
def template_plan(goa_intent):
    return build_trip_plan(goa_intent)


def test_valid_reply_replaces_activities(template_plan, ai_reply, fake_llm):
    client = fake_llm(ai_reply)
    enhanced = enhance_itinerary(template_plan, client)

    plan = enhanced.itinerary.plan
    assert len(plan) == 4
    assert plan[0].activity == "Arrival\n\nEvening: Calangute beach walk."
    assert [d.purpose for d in plan] == [
        DayPurpose.TRAVEL, DayPurpose.EXPLORE, DayPurpose.EXPLORE, DayPurpose.TRAVEL,
    ]
    assert enhanced.flight == template_plan.flight
    assert enhanced.itinerary.destination == "goa"
    assert len(client.prompts) == 1


def test_markdown_fenced_reply_is_accepted(ai_reply):
    days = parse_ai_itinerary(f"```json\n{ai_reply}\n```")
    assert [d.day for d in days] == [1, 2, 3, 4]


@pytest.mark.parametrize("reply", [
    "",
    "[stub response]",
    json.dumps({"days": []}),
    json.dumps({"itinerary": "day one"}),
    json.dumps({"itinerary": [{"day": "1", "title": "A", "plan": "B"}]}),
    json.dumps({"itinerary": [{"day": 1, "title": "A"}]}),
    json.dumps({"itinerary": [{"day": 1, "title": 5, "plan": "B"}]}),
])
def test_unusable_reply_falls_back_to_template(template_plan, fake_llm, reply):
    assert enhance_itinerary(template_plan, fake_llm(reply)) is template_plan


def test_provider_error_falls_back_to_template(template_plan, fake_llm):
    client = fake_llm(error=ConnectionError("timed out"))
    assert enhance_itinerary(template_plan, client) is template_plan


def test_stub_client_falls_back_to_template(template_plan):
    assert enhance_itinerary(template_plan, StubLLMClient()) is template_plan


def test_prompt_mentions_trip_details(goa_intent):
    prompt = build_itinerary_prompt(goa_intent, "\n- Budget: flexible")
    assert "4-day itinerary for mumbai to goa" in prompt
    assert "solo trip" in prompt
    assert "Budget: flexible" in prompt


def test_prompt_default_note_for_unknown_travel_type(goa_intent):
    from dataclasses import replace

    prompt = build_itinerary_prompt(replace(goa_intent, travel_type=TravelType.UNKNOWN))
    assert "general travelers" in prompt


def test_stub_client_selected_by_config(monkeypatch):
    monkeypatch.setattr(config, "USE_STUB_LLM", True)
    assert isinstance(make_llm_client(), StubLLMClient)


def test_gemini_client_selected_when_enabled(monkeypatch):
    created = []

    class _Gemini:
        def __init__(self):
            created.append(self)

    monkeypatch.setattr(config, "USE_STUB_LLM", False)
    monkeypatch.setattr(config, "LLM_API_KEY", "test-key")
    monkeypatch.setattr(config, "LLM_PROVIDER", "Google")
    monkeypatch.setitem(ai_itinerary._PROVIDERS, "google", _Gemini)
    assert isinstance(make_llm_client(), _Gemini)
    assert len(created) == 1


def test_unsupported_provider_falls_back_to_stub(monkeypatch):
    monkeypatch.setattr(config, "USE_STUB_LLM", False)
    monkeypatch.setattr(config, "LLM_API_KEY", "test-key")
    monkeypatch.setattr(config, "LLM_PROVIDER", "openai")
    assert isinstance(make_llm_client(), StubLLMClient)


def test_gemini_timeout_is_sent_in_milliseconds(monkeypatch):
    monkeypatch.setattr(config, "LLM_TIMEOUT_SECONDS", 60)
    client = ai_itinerary.GeminiClient(api_key="test-key")
    assert client._client._api_client._http_options.timeout == 60000

import json

import pytest

from tripsense.core.enums import TravelType
from tripsense.schemas.trip import TripIntent


class FakeLLMClient:
    """Returns a canned reply and records every prompt it receives."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def goa_intent():
    return TripIntent(
        source_city="mumbai",
        destination_city="goa",
        number_of_days=4,
        travel_type=TravelType.SOLO,
    )


@pytest.fixture
def ai_reply():
    return json.dumps({
        "itinerary": [
            {"day": 1, "title": "Arrival", "plan": "Evening: Calangute beach walk."},
            {"day": 2, "title": "North Goa", "plan": "Morning: Fort Aguada."},
            {"day": 3, "title": "Old Goa", "plan": "Morning: Basilica of Bom Jesus."},
            {"day": 4, "title": "Departure", "plan": "Morning: Panjim market, checkout."},
        ]
    })


@pytest.fixture
def fake_llm():
    return FakeLLMClient

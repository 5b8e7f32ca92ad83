import pytest
from fastapi.testclient import TestClient

from tripsense import config, server
from tripsense.modules.planning.ai_itinerary import StubLLMClient


@pytest.fixture
def client():
    return TestClient(server.app)


def test_root(client):
    assert client.get("/").status_code == 200


def test_incomplete_request_returns_questions(client):
    response = client.post("/trip-plan", json={"text": "Goa"})
    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"followUpQuestions"}
    assert len(body["followUpQuestions"]) == 2


def test_complete_request_returns_plan(client):
    response = client.post(
        "/trip-plan",
        json={"text": "3 day family trip from Chennai to Ooty", "language": "hindi"},
    )
    body = response.json()
    assert body["plan"]["parsed"]["travelType"] == "family"
    assert body["plan"]["flight"]["timing"] == "morning"
    assert len(body["plan"]["itinerary"]["plan"]) == 3


def test_unknown_language_rejected(client):
    response = client.post("/trip-plan", json={"text": "Goa", "language": "french"})
    assert response.status_code == 422


def test_follow_up_endpoint_combines_answer(client):
    response = client.post(
        "/trip-plan/follow-up",
        json={"original_text": "5 days to Goa", "answer": "Mumbai"},
    )
    body = response.json()
    assert body["text"] == "5 days to Goa From Mumbai."
    assert body["plan"]["parsed"]["sourceCity"] == "mumbai"


def test_parse_endpoint(client):
    response = client.post("/parse", json={"text": "from Kochi to Munnar"})
    assert response.json() == {
        "sourceCity": "kochi",
        "destinationCity": "munnar",
        "numberOfDays": None,
        "travelType": "unknown",
    }


def test_ai_endpoint_falls_back_to_template(client, monkeypatch):
    monkeypatch.setattr(server, "make_llm_client", StubLLMClient)
    payload = {"text": "4 days solo from Pune to Hampi"}
    ai_body = client.post("/trip-plan/ai", json=payload).json()
    assert ai_body == client.post("/trip-plan", json=payload).json()


def test_ai_endpoint_passes_through_questions(client):
    body = client.post("/trip-plan/ai", json={"text": "Hampi"}).json()
    assert "followUpQuestions" in body


@pytest.mark.parametrize("path", ["/trip-plan", "/trip-plan/ai"])
def test_oversized_trip_rejected(client, path):
    response = client.post(path, json={"text": "from delhi to goa 2000000 days"})
    assert response.status_code == 422
    assert "2000000" in response.json()["detail"]


def test_oversized_follow_up_rejected(client):
    response = client.post(
        "/trip-plan/follow-up",
        json={"original_text": "to goa from delhi", "answer": "900", "answered": "days"},
    )
    assert response.status_code == 422


def test_trip_at_day_limit_is_planned(client, monkeypatch):
    monkeypatch.setattr(config, "MAX_TRIP_DAYS", 10)
    response = client.post("/trip-plan", json={"text": "from delhi to goa 10 days"})
    assert response.status_code == 200
    assert len(response.json()["plan"]["itinerary"]["plan"]) == 10
    assert client.post("/trip-plan", json={"text": "from delhi to goa 11 days"}).status_code == 422

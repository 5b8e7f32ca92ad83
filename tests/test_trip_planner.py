from tripsense.core.enums import FollowUpField, TravelType
from tripsense.modules.input.follow_up import combine_follow_up_answer
from tripsense.orchestrator.trip_planner import create_trip_plan, plan_trip
from tripsense.schemas.trip import NeedsFollowUp, PlanReady


def test_destination_only_needs_follow_up():
    result = create_trip_plan("Goa", "english")
    assert isinstance(result, NeedsFollowUp)
    assert len(result.questions) == 2
    assert result.fields == [FollowUpField.SOURCE, FollowUpField.DESTINATION]
    assert result.to_dict() == {"followUpQuestions": result.questions}


def test_complete_request_builds_plan():
    result = create_trip_plan("Plan a 6 day trip from Delhi to Manali with my wife")
    assert isinstance(result, PlanReady)
    plan = result.plan
    assert plan.parsed.travel_type == TravelType.COUPLE
    assert plan.itinerary.days == 6
    assert len(plan.itinerary.plan) == 6
    assert plan.flight.timing == "evening"
    assert plan.hotel_area.area == "peaceful residential area"


def test_plan_dict_shape():
    data = create_trip_plan("Create a 5-day trip to Goa from Mumbai").to_dict()
    assert set(data) == {"plan"}
    assert set(data["plan"]) == {"parsed", "itinerary", "flight", "hotelArea"}
    assert data["plan"]["parsed"] == {
        "sourceCity": "mumbai",
        "destinationCity": "goa",
        "numberOfDays": 5,
        "travelType": "unknown",
    }
    assert data["plan"]["itinerary"]["destination"] == "goa"


def test_follow_up_in_requested_language():
    result = create_trip_plan("5 din ka trip", "hinglish")
    assert result.questions == [
        "Kahan se travel kar rahe ho? (Source city)",
        "Kahan jaana hai? (Destination city)",
    ]


def test_identical_calls_give_identical_results():
    text = "4 days solo trip from Pune to Hampi"
    assert create_trip_plan(text, "english") == create_trip_plan(text, "english")
    assert create_trip_plan(text).to_dict() == create_trip_plan(text).to_dict()


def test_none_input_asks_questions():
    result = create_trip_plan(None)
    assert isinstance(result, NeedsFollowUp)
    assert len(result.questions) == 2


def test_clarification_rounds_reach_a_plan():
    text = "Goa"
    answers = {
        FollowUpField.SOURCE: "Mumbai",
        FollowUpField.DESTINATION: "Goa",
        FollowUpField.DAYS: "4",
    }
    result = create_trip_plan(text)
    rounds = 0
    while isinstance(result, NeedsFollowUp):
        field = result.fields[0]
        text = combine_follow_up_answer(text, answers[field], field)
        result = create_trip_plan(text)
        rounds += 1
        assert rounds < 5

    assert text == "Goa From Mumbai. To Goa. 4 days."
    assert result.plan.parsed.source_city == "mumbai"
    assert result.plan.parsed.destination_city == "goa"
    assert result.plan.parsed.number_of_days == 4


def test_plan_trip_skips_completeness_gate():
    plan = plan_trip("")
    assert plan.itinerary.days == 3
    assert plan.itinerary.destination == "destination"
    assert plan.flight.timing == "morning"
    assert plan.hotel_area.area == "city center"

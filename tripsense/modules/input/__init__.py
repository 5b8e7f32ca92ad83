"""modules/input — free-text intent parsing and follow-up slot filling."""

from tripsense.modules.input.intent_parser import (
    classify_travel_type,
    extract_cities,
    extract_number_of_days,
    parse_travel_input,
)
from tripsense.modules.input.follow_up import (
    TRAVEL_QUESTIONS,
    combine_follow_up_answer,
    get_follow_up_fields,
    get_follow_up_questions,
    resolve_language,
)

__all__ = [
    "TRAVEL_QUESTIONS",
    "classify_travel_type",
    "combine_follow_up_answer",
    "extract_cities",
    "extract_number_of_days",
    "get_follow_up_fields",
    "get_follow_up_questions",
    "parse_travel_input",
    "resolve_language",
]

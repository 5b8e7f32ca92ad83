"""
modules/input/follow_up.py
---------------------------
Slot-filling for an incomplete TripIntent.

Only the three required fields are ever asked for, in this order:
source city → destination city → number of days. At most
MAX_FOLLOW_UP_QUESTIONS (2) are returned per turn. Travel type is never a
blocking question; the generators handle UNKNOWN.

The caller appends the user's answer to the original request and re-runs
the whole pipeline; nothing here is stateful.
"""

from __future__ import annotations

from tripsense import config
from tripsense.core.enums import FollowUpField, Language
from tripsense.schemas.trip import TripIntent

# General guidance questions surfaced by chat flows (not used for slot-filling).
TRAVEL_QUESTIONS: tuple[str, ...] = (
    "What is your source city?",
    "What is your destination city?",
    "How many days do you plan to travel?",
    "Who are you traveling with? (family, solo, couple, etc.)",
    "What is your preferred mode of transport?",
    "Do you have any specific interests or activities in mind?",
    "What is your approximate budget?",
)

_QUESTIONS: dict[Language, dict[FollowUpField, str]] = {
    Language.ENGLISH: {
        FollowUpField.SOURCE:      "Where are you traveling from? (Source city)",
        FollowUpField.DESTINATION: "Where do you want to go? (Destination city)",
        FollowUpField.DAYS:        "How many days will you travel for?",
    },
    Language.HINGLISH: {
        FollowUpField.SOURCE:      "Kahan se travel kar rahe ho? (Source city)",
        FollowUpField.DESTINATION: "Kahan jaana hai? (Destination city)",
        FollowUpField.DAYS:        "Kitne din ke liye travel karna hai?",
    },
    Language.HINDI: {
        FollowUpField.SOURCE:      "आप कहाँ से यात्रा कर रहे हैं? (शहर)",
        FollowUpField.DESTINATION: "आप कहाँ जाना चाहते हैं? (शहर)",
        FollowUpField.DAYS:        "आप कितने दिनों के लिए यात्रा करेंगे?",
    },
}

# How an answer is folded back into the request so the parser picks it up.
_ANSWER_TEMPLATES: dict[FollowUpField, str] = {
    FollowUpField.SOURCE:      "From {answer}.",
    FollowUpField.DESTINATION: "To {answer}.",
    FollowUpField.DAYS:        "{answer} days.",
}


def resolve_language(language: Language | str | None) -> Language:
    """Map a language name (any case) to Language; unknown values → ENGLISH."""
    if isinstance(language, Language):
        return language
    try:
        return Language(str(language).strip().lower())
    except ValueError:
        return Language.ENGLISH


def get_follow_up_fields(parsed_trip: TripIntent) -> list[FollowUpField]:
    return parsed_trip.missing_fields()[: config.MAX_FOLLOW_UP_QUESTIONS]


def get_follow_up_questions(
    parsed_trip: TripIntent,
    language: Language | str = Language.ENGLISH,
) -> list[str]:
    """
    Up to two localized questions for the required fields still missing.

    Example:
        get_follow_up_questions(parse_travel_input("3 days family trip with kids"))
        → ["Where are you traveling from? (Source city)",
           "Where do you want to go? (Destination city)"]
    """
    catalog = _QUESTIONS[resolve_language(language)]
    return [catalog[f] for f in get_follow_up_fields(parsed_trip)]


def combine_follow_up_answer(
    original_text: str,
    answer: str,
    answered: FollowUpField = FollowUpField.SOURCE,
) -> str:
    """
    Append a follow-up answer to the original request.

    With the default (source) this is `f"{original_text} From {answer}."`,
    the form the web front end sends back. Destination and day answers get
    "To ..." / "... days." so the parser can recover them too.
    """
    template = _ANSWER_TEMPLATES[answered]
    return f"{original_text} {template.format(answer=answer.strip())}"

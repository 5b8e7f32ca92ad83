"""
modules/input/intent_parser.py
-------------------------------
Rule-based extraction of trip parameters from a single free-text request.
No LLM involved: pure regex / keyword matching over English, Hinglish and
Hindi phrasing.

Three independent extractors run in sequence:
  extract_cities          — "from X to Y" > "from X" > "to Y" / "trip to Y"
  extract_number_of_days  — first "<digits> day(s)" / "<digits> din"
  classify_travel_type    — family > solo > couple keyword sets

Each returns None (or UNKNOWN) when nothing matches, so they can be tested
and reordered without touching the others. parse_travel_input() never
raises: None, non-string and empty input all yield an empty TripIntent.
"""

from __future__ import annotations

import re
from typing import Optional

from tripsense.core.enums import TravelType
from tripsense.schemas.trip import TripIntent

# ─────────────────────────────────────────────────────────────────────────────
# City patterns
# ─────────────────────────────────────────────────────────────────────────────

# Words that link clauses together; never part of a city name.
_CONNECTORS = (
    "from", "to", "for", "with", "in", "on", "at", "and", "by", "via",
    "go", "visit", "fly", "trip", "travel",
)
_NOT_CONNECTOR = r"(?!(?:" + "|".join(_CONNECTORS) + r")\b)"

# A city is one or two alphabetic words; longer names are cut to two.
_CITY = rf"{_NOT_CONNECTOR}[a-z]+(?:\s+{_NOT_CONNECTOR}[a-z]+)?"

_FROM_TO_RE = re.compile(rf"\bfrom\s+({_CITY})\s+to\s+({_CITY})")
_FROM_RE = re.compile(rf"\bfrom\s+({_CITY})")
_TO_RE = re.compile(rf"\b(?:trip to|travel to|to)\s+({_CITY})")

# ─────────────────────────────────────────────────────────────────────────────
# Day-count pattern  (5 days, 3-day, 7 din)
# ─────────────────────────────────────────────────────────────────────────────

_DAYS_RE = re.compile(r"(\d+)[\s\-]*(?:days?|din)")

# ─────────────────────────────────────────────────────────────────────────────
# Travel-type keywords, checked in this order; first hit wins.
# ─────────────────────────────────────────────────────────────────────────────

_TRAVEL_TYPE_KEYWORDS: tuple[tuple[TravelType, tuple[str, ...]], ...] = (
    (TravelType.FAMILY, (
        "parents", "family", "kids", "children", "saath", "with family",
        "with parents", "bacche", "bachchon", "maa", "papa",
    )),
    (TravelType.SOLO, ("solo", "alone", "by myself", "akela", "akeli")),
    (TravelType.COUPLE, (
        "couple", "partner", "wife", "husband", "girlfriend", "boyfriend",
        "saathi", "patni", "pati",
    )),
)


def extract_cities(text: str) -> tuple[Optional[str], Optional[str]]:
    """Return (source_city, destination_city) from lowercased text."""
    source: Optional[str] = None
    destination: Optional[str] = None

    match = _FROM_TO_RE.search(text)
    if match:
        source = match.group(1).strip()
        destination = match.group(2).strip()
    else:
        match = _FROM_RE.search(text)
        if match:
            source = match.group(1).strip()

    if not destination:
        match = _TO_RE.search(text)
        if match:
            destination = match.group(1).strip()

    return source or None, destination or None


def extract_number_of_days(text: str) -> Optional[int]:
    match = _DAYS_RE.search(text)
    if not match:
        return None
    return int(match.group(1)) or None


def classify_travel_type(text: str) -> TravelType:
    # Substring match, so "saathi" also hits the family "saath" keyword.
    for travel_type, keywords in _TRAVEL_TYPE_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return travel_type
    return TravelType.UNKNOWN


def parse_travel_input(input_text: object) -> TripIntent:
    """
    Parse a free-text travel request into a TripIntent.

    Example:
        parse_travel_input("Create a 5-day trip to Goa from Mumbai")
        → TripIntent(source_city="mumbai", destination_city="goa",
                     number_of_days=5, travel_type=TravelType.UNKNOWN)
    """
    if not input_text or not isinstance(input_text, str):
        return TripIntent()

    text = input_text.lower()
    source, destination = extract_cities(text)
    return TripIntent(
        source_city=source,
        destination_city=destination,
        number_of_days=extract_number_of_days(text),
        travel_type=classify_travel_type(text),
    )

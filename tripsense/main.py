"""
main.py
-------
Interactive trip planner.

  1. Read a free-text request (or take it from --text)
  2. While required details are missing, ask the follow-up question and
     append the answer to the request
  3. Print the itinerary, flight and stay-area recommendations

Run:
  tripsense
  tripsense --text "5-day family trip to Goa from Mumbai" --language hinglish --json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Callable, Optional

from tripsense import config
from tripsense.core.enums import Language
from tripsense.modules.input.follow_up import combine_follow_up_answer, resolve_language
from tripsense.modules.planning.ai_itinerary import enhance_itinerary, make_llm_client
from tripsense.orchestrator.trip_planner import create_trip_plan
from tripsense.schemas.trip import NeedsFollowUp, TripPlan

_MAX_ROUNDS = 6


def _print_banner() -> None:
    print("\n" + "=" * 60)
    print("  TRIPSENSE — Trip Planner")
    print("=" * 60)


def print_plan(plan: TripPlan) -> None:
    itinerary = plan.itinerary
    print(f"\n── {itinerary.source.title()} → {itinerary.destination.title()}"
          f" · {itinerary.days} day(s) · {itinerary.travel_type.value} ──")
    for day in itinerary.plan:
        print(f"  Day {day.day:<2} [{day.purpose.value:<7}] {day.activity}")
    print(f"\n  ✈  {plan.flight.timing.value} / {plan.flight.type.value} — {plan.flight.explanation}")
    print(f"  🏨 {plan.hotel_area.area} — {plan.hotel_area.reason}")


def converse(
    text: str,
    language: Language,
    ask: Callable[[str], str] = input,
    max_rounds: int = _MAX_ROUNDS,
) -> Optional[TripPlan]:
    """Run the follow-up loop until a plan is ready, the user gives up, or rounds run out."""
    for _ in range(max_rounds):
        result = create_trip_plan(text, language)
        if not isinstance(result, NeedsFollowUp):
            return result.plan

        answer = ask(f"  {result.questions[0]} ").strip()
        if not answer or answer.lower() in ("quit", "exit"):
            return None
        text = combine_follow_up_answer(text, answer, result.fields[0])
    return None


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="tripsense", description="Plan a trip from one sentence.")
    parser.add_argument("--text", help="trip request; prompted for when omitted")
    parser.add_argument("--language", default=config.DEFAULT_LANGUAGE,
                        help="english | hinglish | hindi")
    parser.add_argument("--ai", action="store_true", help="rewrite the itinerary with the LLM")
    parser.add_argument("--json", action="store_true", help="print the plan as JSON")
    args = parser.parse_args(argv)

    config.configure_logging()
    language = resolve_language(args.language)

    if not args.json:
        _print_banner()
    text = args.text or input("  Describe your trip: ").strip()
    if not text:
        print("  ⚠  Nothing to plan.")
        return 1

    plan = converse(text, language)
    if plan is None:
        print("  ⚠  Not enough details to build a plan.")
        return 1

    if args.ai:
        plan = enhance_itinerary(plan, make_llm_client())

    if args.json:
        print(json.dumps(plan.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_plan(plan)
    return 0


if __name__ == "__main__":
    sys.exit(main())

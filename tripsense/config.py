"""
config.py
---------
Central configuration for tripsense.
All secrets loaded from environment variables — never hard-coded.
"""

import logging
import os

# ── LLM ──────────────────────────────────────────────────────────────────────
LLM_PROVIDER: str = os.getenv("LLM_PROVIDER", "google")
LLM_MODEL_NAME: str = os.getenv("LLM_MODEL_NAME", "gemini-1.5-flash")

# Set USE_STUB_LLM=true to skip all LLM API calls; the template itinerary is
# then returned unchanged by the AI augmentation layer.
USE_STUB_LLM: bool = os.getenv("USE_STUB_LLM", "true").lower() in ("1", "true", "yes")
LLM_API_KEY: str = os.getenv("GEMINI_API_KEY", os.getenv("LLM_API_KEY", ""))
LLM_TIMEOUT_SECONDS: int = int(os.getenv("LLM_TIMEOUT_SECONDS", "60"))

# ── Planner defaults ─────────────────────────────────────────────────────────
DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "english")   # "english" | "hinglish" | "hindi"
DEFAULT_TRIP_DAYS: int = int(os.getenv("DEFAULT_TRIP_DAYS", "3"))
LONG_STAY_THRESHOLD_DAYS: int = int(os.getenv("LONG_STAY_THRESHOLD_DAYS", "5"))
EXPLORE_SHARE: float = float(os.getenv("EXPLORE_SHARE", "0.7"))     # share of interior days spent exploring
MAX_FOLLOW_UP_QUESTIONS: int = int(os.getenv("MAX_FOLLOW_UP_QUESTIONS", "2"))

# Longest trip the HTTP API will build a plan for; longer requests get a 422.
MAX_TRIP_DAYS: int = int(os.getenv("MAX_TRIP_DAYS", "60"))

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# ── HTTP API ─────────────────────────────────────────────────────────────────
API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))


def configure_logging(level: str | None = None) -> None:
    """Apply LOG_LEVEL to the root logger. Safe to call more than once."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)

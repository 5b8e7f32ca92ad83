from enum import Enum


class TravelType(str, Enum):
    FAMILY = "family"
    SOLO = "solo"
    COUPLE = "couple"
    UNKNOWN = "unknown"


class DayPurpose(str, Enum):
    TRAVEL = "travel"
    EXPLORE = "explore"
    RELAX = "relax"


class Language(str, Enum):
    ENGLISH = "english"
    HINGLISH = "hinglish"
    HINDI = "hindi"


class FollowUpField(str, Enum):
    SOURCE = "source"
    DESTINATION = "destination"
    DAYS = "days"


class FlightTiming(str, Enum):
    MORNING = "morning"
    EVENING = "evening"


class FlightType(str, Enum):
    DIRECT = "direct"
    ONE_STOP = "one-stop"

from enum import StrEnum


class TimeOfDay(StrEnum):
    MORNING = "morning"
    EVENING = "evening"
    ANY = "any"

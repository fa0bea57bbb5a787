from __future__ import annotations

from enum import Enum


class EventKind(str, Enum):
    """Kind of an attendance event as stored in the event log."""

    ENTRY = "entry"
    EXIT = "exit"


class Period(str, Enum):
    """Period label of a specialist appointment."""

    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    OFF_SHIFT = "Off-shift"


class EducationLevel(str, Enum):
    """Coarse education-level bucket derived from a class code."""

    EARLY_CHILDHOOD = "early_childhood"
    EARLY_ELEMENTARY = "early_elementary"
    LATE_ELEMENTARY = "late_elementary"
    SECONDARY = "secondary"
    UNCLASSIFIED = "unclassified"


class PresenceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"


class WorkPeriod(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    FULL = "full"


class RecordOutcome(str, Enum):
    """Result of appending a scan to the event log."""

    RECORDED = "recorded"
    TOO_SOON = "too_soon"

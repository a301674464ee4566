from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance state derived from which timestamps are populated."""

    NOT_CHECKED_IN = "Not Checked In"
    CHECKED_IN = "Checked In"
    CHECKED_OUT = "Checked Out"


class GeofenceOutcome(str, Enum):
    """What a single location report did to the attendance store."""

    REJECTED = "REJECTED"
    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"
    NO_CHANGE = "NO_CHANGE"
    FAILED = "FAILED"

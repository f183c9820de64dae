"""Enumerated values stored on events and guests.

Values are the literal strings written to the JSON document.
"""

from enum import Enum


class EventStatus(str, Enum):
    """Lifecycle status of an Event."""

    PENDING = "PENDING"
    RUNNING = "RUNNING"
    CANCELED = "CANCELED"
    FINISHED = "FINISHED"


class Sex(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class GuestStatus(str, Enum):
    """Presence of a Guest at its event."""

    NOTSET = "NOTSET"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"

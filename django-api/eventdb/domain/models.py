"""Domain models representing persisted state.

These are pure data records with no behaviour. The JSON mapping lives in
eventdb/stores/codec.py.
"""

from dataclasses import dataclass
from datetime import datetime

from eventdb.domain.value_objects import EventStatus, GuestStatus, Sex


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: int
    title: str
    organizer: str = ""
    venu: str = ""
    description: str = ""
    start: datetime | None = None
    end: datetime | None = None
    status: EventStatus = EventStatus.PENDING


@dataclass(frozen=True)
class Guest:
    """Domain representation of a Guest attached to an Event."""

    id: int
    event_id: int
    firstname: str
    lastname: str
    age: int | None = None
    sex: Sex | None = None
    guest_image_path: str | None = None
    enter: datetime | None = None
    exit: datetime | None = None
    is_present: GuestStatus = GuestStatus.NOTSET


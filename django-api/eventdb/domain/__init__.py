from eventdb.domain.models import Event, Guest
from eventdb.domain.value_objects import EventStatus, GuestStatus, Sex

__all__ = [
    "Event",
    "Guest",
    "EventStatus",
    "GuestStatus",
    "Sex",
]

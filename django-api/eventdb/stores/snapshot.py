"""In-memory state of the whole store."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Self

from eventdb.domain import Event, Guest


@dataclass
class Snapshot:
    """Both entity maps keyed by id, plus the id counters.

    Counters only ever grow, so they stay >= the highest id in their map.
    """

    events: dict[int, Event] = field(default_factory=dict)
    guests: dict[int, Guest] = field(default_factory=dict)
    event_counter: int = 0
    guest_counter: int = 0

    @classmethod
    def from_records(
        cls,
        events: Iterable[Event] = (),
        guests: Iterable[Guest] = (),
        event_counter: int | None = None,
        guest_counter: int | None = None,
    ) -> Self:
        """Build a snapshot from record sequences.

        Counters are raised to the highest id present, so a missing or stale
        counter never hands out an id that is already taken.
        """
        event_map = {event.id: event for event in events}
        guest_map = {guest.id: guest for guest in guests}
        event_counter = max(event_counter or 0, max(event_map, default=0))
        guest_counter = max(guest_counter or 0, max(guest_map, default=0))
        return cls(
            events=event_map,
            guests=guest_map,
            event_counter=event_counter,
            guest_counter=guest_counter,
        )

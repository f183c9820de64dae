"""Store facade: one handle over the snapshot, its backend and the services.

EventDB(backend) builds an isolated handle; EventDB.create() and
EventDB.create_test() manage the process-wide instance used by the HTTP
handlers. Construction loads the snapshot before returning, so a handle is
always ready to serve.
"""

import logging
import threading
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, Self

from django.conf import settings

from eventdb.domain import Event, EventStatus, Guest
from eventdb.domain.errors import StoreReadError
from eventdb.services import EventService, GuestService
from eventdb.stores import Snapshot, SnapshotBackend, VolatileBackend, backend_for

logger = logging.getLogger(__name__)


class EventDB:
    """Events and their guests, kept in memory and mirrored to a backend."""

    _instance: ClassVar["EventDB | None"] = None
    _instance_lock = threading.Lock()

    def __init__(self, backend: SnapshotBackend, snapshot: Snapshot | None = None) -> None:
        """Build a handle, loading the backend unless a snapshot is supplied.

        Raises:
            StoreReadError: If the backend's stored document cannot be read.
        """
        self.backend = backend
        self.snapshot = snapshot if snapshot is not None else backend.initialize()
        lock = threading.RLock()
        self.events = EventService(self.snapshot, backend, lock)
        self.guests = GuestService(self.snapshot, backend, lock)

    def __repr__(self) -> str:
        return f"EventDB({self.backend!r})"

    @classmethod
    def create(cls) -> Self:
        """Return the process-wide instance, building it from settings once.

        The storage directory comes from settings.EVENTDB_DATA_STORE. A store
        that cannot be read at startup ends the process.
        """
        with cls._instance_lock:
            if cls._instance is None:
                backend = backend_for(settings.EVENTDB_DATA_STORE)
                try:
                    cls._instance = cls(backend)
                except StoreReadError as exc:
                    logger.exception("cannot start with unreadable events database")
                    raise SystemExit(1) from exc
            return cls._instance

    @classmethod
    def create_test(
        cls,
        events: Iterable[Event] | None = None,
        guests: Iterable[Guest] | None = None,
        event_counter: int | None = None,
        guest_counter: int | None = None,
    ) -> Self:
        """Return the process-wide instance, seeding an in-memory one if unset."""
        with cls._instance_lock:
            if cls._instance is None:
                snapshot = Snapshot.from_records(
                    events or (), guests or (), event_counter, guest_counter
                )
                cls._instance = cls(VolatileBackend(), snapshot)
            return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._instance_lock:
            cls._instance = None

    # Events

    def create_event(self, fields: Mapping[str, Any]) -> Event:
        return self.events.create_event(fields)

    def get_all_events(self) -> list[Event]:
        return self.events.get_all_events()

    def filter_events(
        self,
        keyword: str | None = None,
        status: EventStatus | str | None = None,
        venue: str | None = None,
        organizer: str | None = None,
    ) -> list[Event]:
        return self.events.filter_events(keyword, status, venue, organizer)

    def get_event_by_id(self, event_id: int) -> Event:
        return self.events.get_event_by_id(event_id)

    def update_event(self, event_id: int, fields: Mapping[str, Any]) -> Event:
        return self.events.update_event(event_id, fields)

    # Guests

    def add_guest_for_event(self, event_id: int, fields: Mapping[str, Any]) -> Guest:
        return self.guests.add_guest_for_event(event_id, fields)

    def get_all_guests_for_event(self, event_id: int) -> list[Guest]:
        return self.guests.get_all_guests_for_event(event_id)

    def get_guest_by_id(self, guest_id: int) -> Guest:
        return self.guests.get_guest_by_id(guest_id)

    def filter_guests_for_event(self, event_id: int, keyword: str) -> list[Guest]:
        return self.guests.filter_guests_for_event(event_id, keyword)

    def update_guest(self, guest_id: int, fields: Mapping[str, Any]) -> Guest:
        return self.guests.update_guest(guest_id, fields)

    def remove_guest(self, guest_id: int) -> bool:
        return self.guests.remove_guest(guest_id)

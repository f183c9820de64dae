"""Event service - create, read, update and filter events.

Services:
- Operate on the Snapshot owned by the EventDB facade
- Validate input and map it to domain models
- Persist the full snapshot after every mutation, rolling back on failure
- Return domain models or raise domain errors
"""

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from eventdb.domain import Event, EventStatus
from eventdb.domain.errors import EventNotFoundError
from eventdb.services.base import SnapshotService
from eventdb.stores.codec import EVENT_CONVERTERS, EVENT_REQUIRED, coerce_fields

logger = logging.getLogger(__name__)


class EventService(SnapshotService):
    """Service for event operations."""

    def create_event(self, fields: Mapping[str, Any]) -> Event:
        """Store a new event under the next event id.

        The id is consumed even if the write fails, so it is never reused.

        Raises:
            InvalidFieldError: If fields contain unknown names or bad values.
            StoreWriteError: If the snapshot could not be persisted.
        """
        values = coerce_fields(fields, EVENT_CONVERTERS, EVENT_REQUIRED)
        events = self._snapshot.events
        with self._lock:
            event_id = self._generate_event_id()
            event = Event(id=event_id, **values)
            events[event_id] = event

            self._commit(lambda: events.pop(event_id, None), "error creating event")

        logger.info("event %s saved successfully", event_id)
        return event

    def _generate_event_id(self) -> int:
        self._snapshot.event_counter += 1
        return self._snapshot.event_counter

    def get_all_events(self) -> list[Event]:
        """Return all events."""
        with self._lock:
            return list(self._snapshot.events.values())

    def filter_events(
        self,
        keyword: str | None = None,
        status: EventStatus | str | None = None,
        venue: str | None = None,
        organizer: str | None = None,
    ) -> list[Event]:
        """Return events matching every filter that is given.

        keyword is a case-sensitive substring of the title; status, venue and
        organizer must match exactly. Empty filters are ignored.
        """
        return [
            event
            for event in self.get_all_events()
            if (not keyword or keyword in event.title)
            and (not status or event.status == status)
            and (not venue or event.venu == venue)
            and (not organizer or event.organizer == organizer)
        ]

    def get_event_by_id(self, event_id: int) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        try:
            return self._snapshot.events[event_id]
        except KeyError:
            raise EventNotFoundError(event_id) from None

    def update_event(self, event_id: int, fields: Mapping[str, Any]) -> Event:
        """Apply a partial update to an event.

        Every field present in ``fields`` is written, including empty strings;
        absent fields keep their current value.

        Raises:
            EventNotFoundError: If the event does not exist.
            InvalidFieldError: If fields contain unknown names or bad values.
            StoreWriteError: If the snapshot could not be persisted.
        """
        events = self._snapshot.events
        with self._lock:
            old_event = self.get_event_by_id(event_id)
            event = dataclasses.replace(old_event, **coerce_fields(fields, EVENT_CONVERTERS))
            events[event_id] = event

            def rollback() -> None:
                events[event_id] = old_event

            self._commit(rollback, "error updating event")

        logger.info("updated event with id %s saved successfully", event_id)
        return event

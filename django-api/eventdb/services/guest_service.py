"""Guest service - guests scoped by their owning event.

Guest ids are unique across all events. Lookups by event are a linear scan
over the guest map.
"""

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from eventdb.domain import Guest
from eventdb.domain.errors import EventNotFoundError, GuestNotFoundError
from eventdb.services.base import SnapshotService
from eventdb.stores.codec import GUEST_CONVERTERS, GUEST_REQUIRED, coerce_fields

logger = logging.getLogger(__name__)


class GuestService(SnapshotService):
    """Service for guest operations."""

    def add_guest_for_event(self, event_id: int, fields: Mapping[str, Any]) -> Guest:
        """Store a new guest for an existing event.

        Raises:
            EventNotFoundError: If the event does not exist.
            InvalidFieldError: If fields contain unknown names or bad values.
            StoreWriteError: If the snapshot could not be persisted.
        """
        values = coerce_fields(fields, GUEST_CONVERTERS, GUEST_REQUIRED)
        guests = self._snapshot.guests
        with self._lock:
            self._require_event(event_id)
            guest_id = self._generate_guest_id()
            guest = Guest(id=guest_id, event_id=event_id, **values)
            guests[guest_id] = guest

            self._commit(lambda: guests.pop(guest_id, None), "error adding guest")

        logger.info("add guest for event %s saved successfully", event_id)
        logger.debug("saved guest", extra={"guest": guest})
        return guest

    def _generate_guest_id(self) -> int:
        self._snapshot.guest_counter += 1
        return self._snapshot.guest_counter

    def _require_event(self, event_id: int) -> None:
        if event_id not in self._snapshot.events:
            raise EventNotFoundError(event_id)

    def get_all_guests_for_event(self, event_id: int) -> list[Guest]:
        """Return the guests of an event, empty if it has none.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        with self._lock:
            self._require_event(event_id)
            guests = list(self._snapshot.guests.values())
        return [guest for guest in guests if guest.event_id == event_id]

    def get_guest_by_id(self, guest_id: int) -> Guest:
        try:
            return self._snapshot.guests[guest_id]
        except KeyError:
            raise GuestNotFoundError(guest_id) from None

    def filter_guests_for_event(self, event_id: int, keyword: str) -> list[Guest]:
        """Return guests of an event whose first or last name contains keyword."""
        return [
            guest
            for guest in self.get_all_guests_for_event(event_id)
            if keyword in guest.firstname or keyword in guest.lastname
        ]

    def update_guest(self, guest_id: int, fields: Mapping[str, Any]) -> Guest:
        """Apply a partial update to a guest.

        Present fields are written even when falsy, so is_present can be reset
        to NOTSET and guest_image_path cleared with None.

        Raises:
            GuestNotFoundError: If the guest does not exist.
            InvalidFieldError: If fields contain unknown names or bad values.
            StoreWriteError: If the snapshot could not be persisted.
        """
        guests = self._snapshot.guests
        with self._lock:
            old_guest = self.get_guest_by_id(guest_id)
            guest = dataclasses.replace(old_guest, **coerce_fields(fields, GUEST_CONVERTERS))
            guests[guest_id] = guest

            def rollback() -> None:
                guests[guest_id] = old_guest

            self._commit(rollback, "error updating guest")

        logger.info("updated guest with id %s saved successfully", guest_id)
        return guest

    def remove_guest(self, guest_id: int) -> bool:
        """Delete a guest.

        Raises:
            GuestNotFoundError: If the guest does not exist.
            StoreWriteError: If the snapshot could not be persisted; the guest
                is restored.
        """
        guests = self._snapshot.guests
        with self._lock:
            guest = self.get_guest_by_id(guest_id)
            del guests[guest_id]

            def rollback() -> None:
                guests[guest_id] = guest

            self._commit(rollback, "error removing guest")

        logger.info("remove guest with id %s saved successfully", guest_id)
        return True

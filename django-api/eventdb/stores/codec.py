"""Translation between domain records and the JSON document.

Document shape::

    {
      "eventCounter": 3,
      "guestCounter": 7,
      "events": [{"id": 1, "title": ..., "status": "PENDING", ...}],
      "guests": [{"id": 1, "eventId": 1, "firstname": ..., ...}]
    }

The same field converters validate caller input for create/update, so a
record in memory always has the types the document can round-trip.
"""

from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from enum import Enum
from typing import Any

from eventdb.domain import Event, EventStatus, Guest, GuestStatus, Sex
from eventdb.domain.errors import InvalidFieldError, StoreReadError
from eventdb.stores.snapshot import Snapshot

Converter = Callable[[Any], Any]


def _text(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidFieldError(f"{value!r} is not a string")
    return value


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError(f"{value!r} is not an integer")
    return value


def _datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            pass
    raise InvalidFieldError(f"{value!r} is not an ISO-8601 datetime")


def _choice(enum_cls: type[Enum]) -> Converter:
    def convert(value: Any) -> Enum:
        try:
            return enum_cls(value)
        except ValueError:
            raise InvalidFieldError(
                f"{value!r} is not a valid {enum_cls.__name__}"
            ) from None

    return convert


def _optional(convert: Converter) -> Converter:
    def wrapper(value: Any) -> Any:
        return None if value is None else convert(value)

    return wrapper


EVENT_CONVERTERS: dict[str, Converter] = {
    "title": _text,
    "organizer": _text,
    "venu": _text,
    "description": _text,
    "start": _optional(_datetime),
    "end": _optional(_datetime),
    "status": _choice(EventStatus),
}

EVENT_REQUIRED = ("title",)

GUEST_CONVERTERS: dict[str, Converter] = {
    "firstname": _text,
    "lastname": _text,
    "age": _optional(_integer),
    "sex": _optional(_choice(Sex)),
    "guest_image_path": _optional(_text),
    "enter": _optional(_datetime),
    "exit": _optional(_datetime),
    "is_present": _choice(GuestStatus),
}

GUEST_REQUIRED = ("firstname", "lastname")


def coerce_fields(
    fields: Mapping[str, Any],
    converters: Mapping[str, Converter],
    required: Iterable[str] = (),
) -> dict[str, Any]:
    """Validate field names and convert values to their domain types.

    Raises:
        InvalidFieldError: If a name is not writable, a required name is
            missing, or a value does not convert.
    """
    unknown = set(fields) - set(converters)
    if unknown:
        raise InvalidFieldError(f"unknown fields: {', '.join(sorted(unknown))}")
    missing = [name for name in required if name not in fields]
    if missing:
        raise InvalidFieldError(f"missing fields: {', '.join(missing)}")
    return {name: converters[name](value) for name, value in fields.items()}


def _json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def event_to_dict(event: Event) -> dict[str, Any]:
    data = {"id": event.id}
    for name in EVENT_CONVERTERS:
        data[name] = _json_value(getattr(event, name))
    return data


def guest_to_dict(guest: Guest) -> dict[str, Any]:
    data = {"id": guest.id, "eventId": guest.event_id}
    for name in GUEST_CONVERTERS:
        data[name] = _json_value(getattr(guest, name))
    return data


def event_from_dict(data: Mapping[str, Any]) -> Event:
    fields = dict(data)
    event_id = _integer(fields.pop("id"))
    return Event(id=event_id, **coerce_fields(fields, EVENT_CONVERTERS, EVENT_REQUIRED))


def guest_from_dict(data: Mapping[str, Any]) -> Guest:
    fields = dict(data)
    guest_id = _integer(fields.pop("id"))
    event_id = _integer(fields.pop("eventId"))
    values = coerce_fields(fields, GUEST_CONVERTERS, GUEST_REQUIRED)
    return Guest(id=guest_id, event_id=event_id, **values)


def dump_snapshot(snapshot: Snapshot) -> dict[str, Any]:
    """Return the JSON-ready document for a snapshot."""
    return {
        "eventCounter": snapshot.event_counter,
        "guestCounter": snapshot.guest_counter,
        "events": [event_to_dict(event) for event in snapshot.events.values()],
        "guests": [guest_to_dict(guest) for guest in snapshot.guests.values()],
    }


def load_snapshot(data: Any) -> Snapshot:
    """Build a snapshot from a parsed JSON document.

    Raises:
        StoreReadError: If the document does not have the expected shape.
    """
    try:
        return Snapshot.from_records(
            events=[event_from_dict(item) for item in data["events"]],
            guests=[guest_from_dict(item) for item in data["guests"]],
            event_counter=_integer(data["eventCounter"]),
            guest_counter=_integer(data["guestCounter"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise StoreReadError(f"malformed events document: {exc!r}") from exc

"""Domain error codes for the event store."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    READ_ERROR = "READ ERROR"
    WRITE_ERROR = "WRITE ERROR"
    NOT_FOUND = "NOT FOUND"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event id is not in the store."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message=f"event with id {event_id} does not exist",
        )
        object.__setattr__(self, "event_id", event_id)


class GuestNotFoundError(DomainError):
    """Raised when a guest id is not in the store."""

    def __init__(self, guest_id: int) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message=f"guest with id {guest_id} not found",
        )
        object.__setattr__(self, "guest_id", guest_id)


class StoreWriteError(DomainError):
    """Raised when persisting the snapshot fails after an in-memory change."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.WRITE_ERROR, message=message)


class StoreReadError(DomainError):
    """Raised when the backing document cannot be read or parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.READ_ERROR, message=message)


class InvalidFieldError(ValueError):
    """Raised when create/update input names an unknown field or bad value."""

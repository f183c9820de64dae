from eventdb.services.event_service import EventService
from eventdb.services.guest_service import GuestService

__all__ = ["EventService", "GuestService"]

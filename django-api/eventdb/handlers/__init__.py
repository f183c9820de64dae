from eventdb.handlers.views import (
    EventDetailView,
    EventListView,
    GuestDetailView,
    GuestListView,
)

__all__ = ["EventDetailView", "EventListView", "GuestDetailView", "GuestListView"]

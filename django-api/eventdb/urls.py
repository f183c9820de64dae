from django.urls import path

from eventdb.handlers import EventDetailView, EventListView, GuestDetailView, GuestListView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<int:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<int:event_id>/guests",
        GuestListView.as_view(),
        name="guest-list",
    ),
    path("guests/<int:guest_id>", GuestDetailView.as_view(), name="guest-detail"),
]

"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call the EventDB facade for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from eventdb.database import EventDB
from eventdb.domain.errors import DomainError, ErrorCode, InvalidFieldError
from eventdb.handlers.serializers import (
    EventInputSerializer,
    EventSerializer,
    GuestInputSerializer,
    GuestSerializer,
)

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.WRITE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.READ_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class EventDBView(APIView):
    """Base view mapping store errors to JSON error responses."""

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            http_status = _STATUS_BY_CODE[exc.code]
            message = exc.message
            if http_status >= 500:
                logger.error("%s %s failed: %s", self.request.method, self.request.path, exc)
                message = "The events database could not complete the request"
            return Response({"code": exc.code.value, "message": message}, status=http_status)
        if isinstance(exc, InvalidFieldError):
            return Response(
                {"code": "INVALID INPUT", "message": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return super().handle_exception(exc)

    @property
    def db(self) -> EventDB:
        return EventDB.create()


class EventListView(EventDBView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        params = request.query_params
        events = self.db.filter_events(
            keyword=params.get("keyword"),
            status=params.get("status"),
            venue=params.get("venue"),
            organizer=params.get("organizer"),
        )
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.db.create_event(serializer.validated_data)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(EventDBView):
    """Handler for GET/PATCH /api/events/{event_id}"""

    def get(self, request: Request, event_id: int) -> Response:
        return Response(EventSerializer(self.db.get_event_by_id(event_id)).data)

    def patch(self, request: Request, event_id: int) -> Response:
        serializer = EventInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        event = self.db.update_event(event_id, serializer.validated_data)
        return Response(EventSerializer(event).data)


class GuestListView(EventDBView):
    """Handler for GET/POST /api/events/{event_id}/guests"""

    def get(self, request: Request, event_id: int) -> Response:
        keyword = request.query_params.get("keyword")
        if keyword:
            guests = self.db.filter_guests_for_event(event_id, keyword)
        else:
            guests = self.db.get_all_guests_for_event(event_id)
        return Response(GuestSerializer(guests, many=True).data)

    def post(self, request: Request, event_id: int) -> Response:
        serializer = GuestInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        guest = self.db.add_guest_for_event(event_id, serializer.validated_data)
        return Response(GuestSerializer(guest).data, status=status.HTTP_201_CREATED)


class GuestDetailView(EventDBView):
    """Handler for GET/PATCH/DELETE /api/guests/{guest_id}"""

    def get(self, request: Request, guest_id: int) -> Response:
        return Response(GuestSerializer(self.db.get_guest_by_id(guest_id)).data)

    def patch(self, request: Request, guest_id: int) -> Response:
        serializer = GuestInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        guest = self.db.update_guest(guest_id, serializer.validated_data)
        return Response(GuestSerializer(guest).data)

    def delete(self, request: Request, guest_id: int) -> Response:
        self.db.remove_guest(guest_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

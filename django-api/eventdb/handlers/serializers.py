"""Serializers for transforming domain models to API responses and back.

Output serializers read attributes straight off the frozen dataclasses.
Input serializers only validate format; with partial=True their
validated_data holds exactly the keys the client sent.
"""

from rest_framework import serializers

from eventdb.domain import EventStatus, GuestStatus, Sex


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField()
    title = serializers.CharField()
    organizer = serializers.CharField()
    venu = serializers.CharField()
    description = serializers.CharField()
    start = serializers.DateTimeField(allow_null=True)
    end = serializers.DateTimeField(allow_null=True)
    status = serializers.CharField(source="status.value")


class EventInputSerializer(serializers.Serializer):
    """Validates create/update payloads for events."""

    title = serializers.CharField()
    organizer = serializers.CharField(required=False, allow_blank=True)
    venu = serializers.CharField(required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    start = serializers.DateTimeField(required=False, allow_null=True)
    end = serializers.DateTimeField(required=False, allow_null=True)
    status = serializers.ChoiceField(choices=[s.value for s in EventStatus], required=False)


class GuestSerializer(serializers.Serializer):
    """Serializer for Guest domain model."""

    id = serializers.IntegerField()
    eventId = serializers.IntegerField(source="event_id")
    firstname = serializers.CharField()
    lastname = serializers.CharField()
    age = serializers.IntegerField(allow_null=True)
    sex = serializers.SerializerMethodField()
    guest_image_path = serializers.CharField(allow_null=True)
    enter = serializers.DateTimeField(allow_null=True)
    exit = serializers.DateTimeField(allow_null=True)
    is_present = serializers.CharField(source="is_present.value")

    def get_sex(self, guest) -> str | None:
        return guest.sex.value if guest.sex else None


class GuestInputSerializer(serializers.Serializer):
    """Validates create/update payloads for guests."""

    firstname = serializers.CharField()
    lastname = serializers.CharField()
    age = serializers.IntegerField(required=False, allow_null=True, min_value=0)
    sex = serializers.ChoiceField(choices=[s.value for s in Sex], required=False, allow_null=True)
    guest_image_path = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    enter = serializers.DateTimeField(required=False, allow_null=True)
    exit = serializers.DateTimeField(required=False, allow_null=True)
    is_present = serializers.ChoiceField(choices=[s.value for s in GuestStatus], required=False)

"""Serializers for request parsing and for rendering domain models.

Output serializers read frozen domain dataclasses; input serializers only
check the shape of incoming data. Keys are camelCase on the wire.
"""

from rest_framework import serializers

from registrations.domain import NewRegistration, RegistrationStatus


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    date = serializers.DateTimeField()
    endDate = serializers.DateTimeField(source="end_date", allow_null=True)
    location = serializers.CharField()
    imageUrl = serializers.CharField(source="image_url", allow_null=True)
    capacity = serializers.IntegerField(allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class RegistrationSerializer(serializers.Serializer):
    """Serializer for Registration domain model."""

    id = serializers.UUIDField(source="id.value")
    eventId = serializers.UUIDField(source="event_id.value")
    name = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField(allow_null=True)
    organization = serializers.CharField(allow_null=True)
    dietaryRequirements = serializers.CharField(
        source="dietary_requirements", allow_null=True
    )
    specialRequirements = serializers.CharField(
        source="special_requirements", allow_null=True
    )
    status = serializers.CharField(source="status.value")
    createdAt = serializers.DateTimeField(source="created_at")


class EventAvailabilitySerializer(serializers.Serializer):
    """Serializer for EventAvailability snapshots."""

    totalSpots = serializers.IntegerField(source="total_spots")
    spotsRemaining = serializers.IntegerField(source="spots_remaining")
    isFull = serializers.BooleanField(source="is_full")
    isWaitlistAvailable = serializers.BooleanField(source="is_waitlist_available")
    waitlistCount = serializers.IntegerField(source="waitlist_count")
    maxWaitlistSize = serializers.IntegerField(source="max_waitlist_size")
    registrationDeadline = serializers.DateTimeField(source="registration_deadline")
    isRegistrationOpen = serializers.BooleanField(source="is_registration_open")


class EventStatusSerializer(serializers.Serializer):
    status = serializers.CharField(source="status.value")
    registrationStatus = serializers.CharField(source="registration_status.value")
    statusMessage = serializers.CharField(source="status_message")


class EventOverviewSerializer(EventSerializer):
    """Event fields flattened alongside its availability and status."""

    def to_representation(self, instance):
        data = super().to_representation(instance.event)
        data["availability"] = EventAvailabilitySerializer(instance.availability).data
        data["eventStatus"] = EventStatusSerializer(instance.event_status).data
        return data


class EventRegistrationInputSerializer(serializers.Serializer):
    """Body of POST /api/event-registrations."""

    eventId = serializers.CharField(source="event_id", min_length=1)
    name = serializers.CharField(min_length=1, max_length=100)
    email = serializers.EmailField()
    phone = serializers.CharField(min_length=10, max_length=20, required=False)
    organization = serializers.CharField(min_length=1, max_length=100, required=False)
    dietaryRequirements = serializers.CharField(
        source="dietary_requirements", max_length=500, required=False, allow_blank=True
    )
    specialRequirements = serializers.CharField(
        source="special_requirements", max_length=500, required=False, allow_blank=True
    )

    def to_domain(self) -> NewRegistration:
        return NewRegistration(**self.validated_data)


class PaginationQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=100, default=10)


class RegistrationListQuerySerializer(PaginationQuerySerializer):
    """Query string of GET /api/event-registrations."""

    SORT_FIELDS = {"createdAt": "created_at", "name": "name", "email": "email"}

    eventId = serializers.CharField(source="event_id", min_length=1)
    sortBy = serializers.ChoiceField(
        source="sort_by", choices=list(SORT_FIELDS), default="createdAt"
    )
    sortOrder = serializers.ChoiceField(
        source="sort_order", choices=["asc", "desc"], default="desc"
    )
    search = serializers.CharField(required=False, max_length=100)
    status = serializers.ChoiceField(
        choices=[s.value for s in RegistrationStatus], required=False
    )

    def validate_sortBy(self, value: str) -> str:
        return self.SORT_FIELDS[value]

    def validate_status(self, value: str) -> RegistrationStatus:
        return RegistrationStatus(value)

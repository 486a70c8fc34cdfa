"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let domain errors propagate to the exception handler
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from registrations.domain import RegistrationPolicy, RegistrationQuery
from registrations.handlers.exceptions import success_response
from registrations.handlers.serializers import (
    EventAvailabilitySerializer,
    EventOverviewSerializer,
    EventRegistrationInputSerializer,
    EventStatusSerializer,
    PaginationQuerySerializer,
    RegistrationListQuerySerializer,
    RegistrationSerializer,
)
from registrations.services import EventService, RegistrationService
from registrations.services.registration_service import parse_event_id
from registrations.stores.django_store import DjangoEventStore


def get_policy() -> RegistrationPolicy:
    """Build the policy from ``settings.EVENT_REGISTRATION``."""
    return RegistrationPolicy.from_mapping(getattr(settings, "EVENT_REGISTRATION", {}))


def get_event_service() -> EventService:
    return EventService(DjangoEventStore(), get_policy())


def get_registration_service() -> RegistrationService:
    return RegistrationService(DjangoEventStore(), get_policy())


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        query = PaginationQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        overviews, has_more = get_event_service().list_events(**query.validated_data)
        return success_response(
            {
                "events": EventOverviewSerializer(overviews, many=True).data,
                "hasMore": has_more,
            }
        )


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        overview = get_event_service().get_event(event_id)
        return success_response(EventOverviewSerializer(overview).data)


class EventRegistrationView(APIView):
    """Handler for /api/event-registrations"""

    def get(self, request: Request) -> Response:
        query = RegistrationListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = dict(query.validated_data)
        event_id = params.pop("event_id")

        listing = get_registration_service().list_registrations(
            RegistrationQuery(event_id=parse_event_id(event_id), **params)
        )
        page = listing.page

        return success_response(
            {
                "registrations": RegistrationSerializer(
                    page.registrations, many=True
                ).data,
                "pagination": {
                    "total": page.total,
                    "pages": page.pages,
                    "currentPage": page.page,
                    "perPage": page.limit,
                    "hasMore": page.has_more,
                },
                "availability": EventAvailabilitySerializer(listing.availability).data,
                "eventStatus": EventStatusSerializer(listing.event_status).data,
            }
        )

    def post(self, request: Request) -> Response:
        serializer = EventRegistrationInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        outcome = get_registration_service().register(serializer.to_domain())

        return success_response(
            {
                "message": outcome.message,
                "registration": RegistrationSerializer(outcome.registration).data,
                "availability": EventAvailabilitySerializer(outcome.availability).data,
                "eventStatus": EventStatusSerializer(outcome.event_status).data,
            },
            status=201,
        )

"""Event service - read-only catalog of club events.

Every event is returned with a freshly computed availability and status.
"""

from datetime import datetime, tzinfo
from typing import Callable

from django.utils import timezone

from registrations.domain import Event, EventOverview, RegistrationPolicy
from registrations.domain.availability import availability_for_event
from registrations.domain.errors import EventNotFoundError
from registrations.domain.status import status_for_event
from registrations.services.registration_service import parse_event_id
from registrations.stores.interfaces import EventStore


class EventService:
    """Service for event catalog operations."""

    def __init__(
        self,
        store: EventStore,
        policy: RegistrationPolicy | None = None,
        clock: Callable[[], datetime] = timezone.now,
        tz: tzinfo | None = None,
    ) -> None:
        self._store = store
        self._policy = policy or RegistrationPolicy()
        self._clock = clock
        self._tz = tz

    def _overview(self, event: Event, now: datetime) -> EventOverview:
        return EventOverview(
            event=event,
            availability=availability_for_event(event, self._policy, now),
            event_status=status_for_event(
                event, self._policy, now, self._tz or timezone.get_current_timezone()
            ),
        )

    def list_events(
        self, page: int = 1, limit: int = 10
    ) -> tuple[list[EventOverview], bool]:
        """Return one page of events ordered by date and whether more exist."""
        events = self._store.list_events(offset=(page - 1) * limit, limit=limit + 1)
        has_more = len(events) > limit
        now = self._clock()
        return [self._overview(event, now) for event in events[:limit]], has_more

    def get_event(self, event_id: str) -> EventOverview:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return self._overview(event, self._clock())

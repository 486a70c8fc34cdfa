"""Registration service - eligibility and capacity decisions live here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from datetime import datetime, tzinfo
from typing import Callable

from django.utils import timezone

from registrations.domain import (
    Event,
    EventAvailability,
    EventId,
    EventStatus,
    NewRegistration,
    RegistrationDecision,
    RegistrationListing,
    RegistrationOutcome,
    RegistrationPolicy,
    RegistrationQuery,
)
from registrations.domain.availability import (
    availability_for_event,
    can_register_for_event,
    format_event_date,
    get_registration_deadline,
    is_event_in_past,
)
from registrations.domain.errors import (
    DuplicateRegistrationError,
    EventFullError,
    EventNotFoundError,
    InvalidEventIdError,
    PastEventError,
    RegistrationClosedError,
)
from registrations.domain.status import status_for_event
from registrations.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


class RegistrationService:
    """Service for event registration and availability."""

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

    def _zone(self) -> tzinfo:
        """Time zone user-facing dates are rendered in."""
        return self._tz or timezone.get_current_timezone()

    def _load_event(self, event_id: str) -> Event:
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_availability(self, event_id: str) -> EventAvailability:
        """Return a fresh capacity snapshot for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._load_event(event_id)
        return availability_for_event(event, self._policy, self._clock())

    def get_event_status(self, event_id: str) -> EventStatus:
        """Return lifecycle and registration status for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._load_event(event_id)
        return status_for_event(event, self._policy, self._clock(), self._zone())

    def validate_registration(self, event_id: str, email: str) -> RegistrationDecision:
        """Decide whether ``email`` may register and whether to waitlist.

        Checks run in order and stop at the first failure. Nothing is written.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            PastEventError: If the event has already started.
            RegistrationClosedError: If the registration deadline has passed.
            DuplicateRegistrationError: If the email is already registered.
            EventFullError: If both the event and its waitlist are full.
        """
        event = self._load_event(event_id)
        now = self._clock()
        policy = self._policy

        if is_event_in_past(event.date, now):
            raise PastEventError()

        if not can_register_for_event(event.date, now, policy.deadline_hours):
            deadline = get_registration_deadline(event.date, policy.deadline_hours)
            raise RegistrationClosedError(format_event_date(deadline, self._zone()))

        if self._store.get_registration(event.id, email) is not None:
            raise DuplicateRegistrationError(email)

        confirmed = event.confirmed_count
        is_full = confirmed >= policy.max_attendees
        waitlist_count = event.active_count - confirmed

        if is_full and waitlist_count >= policy.max_waitlist_size:
            raise EventFullError()

        return RegistrationDecision(should_waitlist=is_full)

    def register(self, data: NewRegistration) -> RegistrationOutcome:
        """Validate and store a registration, then return a fresh snapshot.

        The check and the insert run under the store's per-event lock, so two
        concurrent requests cannot both take the last seat.
        """
        event_id = parse_event_id(data.event_id)
        with self._store.registration_lock(event_id):
            try:
                decision = self.validate_registration(data.event_id, data.email)
            except (
                DuplicateRegistrationError,
                EventFullError,
                PastEventError,
                RegistrationClosedError,
            ) as exc:
                logger.warning(
                    "Registration rejected for event %s: %s", event_id, exc.code.value
                )
                raise
            registration = self._store.create_registration(data, decision.status)
            event = self._load_event(data.event_id)

        now = self._clock()
        logger.info(
            "Registration %s stored for event %s with status %s",
            registration.id,
            event_id,
            registration.status.value,
        )
        return RegistrationOutcome(
            registration=registration,
            availability=availability_for_event(event, self._policy, now),
            event_status=status_for_event(event, self._policy, now, self._zone()),
        )

    def list_registrations(self, query: RegistrationQuery) -> RegistrationListing:
        """Return one page of an event's registrations with a fresh snapshot.

        The event is loaded once for both availability and status.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(query.event_id)
        if event is None:
            raise EventNotFoundError(str(query.event_id))
        now = self._clock()
        return RegistrationListing(
            page=self._store.list_registrations(query),
            availability=availability_for_event(event, self._policy, now),
            event_status=status_for_event(event, self._policy, now, self._zone()),
        )

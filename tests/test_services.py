"""Unit tests for RegistrationService and EventService.

These test eligibility rules and domain error mapping against an
in-memory store.
Run with: pytest tests/test_services.py -v
"""

import time
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from zoneinfo import ZoneInfo

import pytest

from registrations.domain import (
    NewRegistration,
    RegistrationPolicy,
    RegistrationQuery,
    RegistrationStatus,
    RegistrationWindowStatus,
)
from registrations.domain.errors import (
    DuplicateRegistrationError,
    EventFullError,
    EventNotFoundError,
    InvalidEventIdError,
    PastEventError,
    RegistrationClosedError,
)
from registrations.services import EventService, RegistrationService
from tests.fakes import NOW, InMemoryEventStore, make_event

MISSING_ID = "6f1c1f2e-5f43-4f5e-8d2a-000000000000"


@pytest.fixture(autouse=True)
def utc(settings):
    settings.TIME_ZONE = "UTC"


class SlowLookupStore(InMemoryEventStore):
    """Widens the gap between the duplicate check and the insert."""

    def get_registration(self, event_id, email):
        time.sleep(0.05)
        return super().get_registration(event_id, email)


def build_service(*events, policy=None) -> tuple[RegistrationService, InMemoryEventStore]:
    store = InMemoryEventStore(*events)
    return RegistrationService(store, policy, clock=lambda: NOW), store


def new_registration(event, email="ada@example.com") -> NewRegistration:
    return NewRegistration(event_id=str(event.id), name="Ada Lovelace", email=email)


class TestValidateRegistration:
    """Tests for the fail-fast eligibility checks."""

    def test_invalid_id_raises_error(self):
        service, _ = build_service()
        with pytest.raises(InvalidEventIdError):
            service.validate_registration("not-a-uuid", "ada@example.com")

    def test_event_not_found_raises_error(self):
        service, _ = build_service()
        with pytest.raises(EventNotFoundError) as excinfo:
            service.validate_registration(MISSING_ID, "ada@example.com")
        assert excinfo.value.status_code == 404

    def test_open_event_confirms(self):
        """Event in 48h with 5/100 confirmed accepts a new email."""
        event = make_event(NOW + timedelta(hours=48), confirmed=5)
        service, _ = build_service(event)

        decision = service.validate_registration(str(event.id), "ada@example.com")

        assert decision.should_waitlist is False
        assert decision.status is RegistrationStatus.CONFIRMED

    def test_closed_window_reports_deadline(self):
        """Event in 12h: the deadline passed 12h ago."""
        event = make_event(NOW + timedelta(hours=12))
        service, _ = build_service(event)

        with pytest.raises(RegistrationClosedError) as excinfo:
            service.validate_registration(str(event.id), "ada@example.com")

        assert excinfo.value.message == (
            "Registration is closed. Registration deadline was "
            "Monday, January 5, 2026 at 12:00 AM UTC"
        )
        assert excinfo.value.status_code == 400

    def test_closed_window_deadline_uses_current_time_zone(self, settings):
        settings.TIME_ZONE = "America/New_York"
        event = make_event(NOW + timedelta(hours=12))
        service, _ = build_service(event)

        with pytest.raises(RegistrationClosedError) as excinfo:
            service.validate_registration(str(event.id), "ada@example.com")

        assert excinfo.value.message.endswith("Sunday, January 4, 2026 at 7:00 PM EST")

    def test_explicit_zone_overrides_settings(self):
        event = make_event(NOW + timedelta(days=3))
        store = InMemoryEventStore(event)
        service = RegistrationService(
            store, clock=lambda: NOW, tz=ZoneInfo("Europe/Berlin")
        )

        status = service.get_event_status(str(event.id))

        assert status.status_message == (
            "Registration closes on Wednesday, January 7, 2026 at 1:00 PM CET"
        )

    def test_past_event_rejected(self):
        event = make_event(NOW - timedelta(hours=1))
        service, _ = build_service(event)

        with pytest.raises(PastEventError) as excinfo:
            service.validate_registration(str(event.id), "ada@example.com")
        assert excinfo.value.message == "Cannot register for past events"

    def test_duplicate_email_rejected(self):
        event = make_event(NOW + timedelta(days=3), confirmed=1)
        service, _ = build_service(event)

        with pytest.raises(DuplicateRegistrationError) as excinfo:
            service.validate_registration(str(event.id), "confirmed0@example.com")
        assert excinfo.value.message == "You have already registered for this event"

    def test_cancelled_registration_still_counts_as_duplicate(self):
        event = make_event(NOW + timedelta(days=3), cancelled=1)
        service, _ = build_service(event)

        with pytest.raises(DuplicateRegistrationError):
            service.validate_registration(str(event.id), "cancelled0@example.com")

    def test_full_event_waitlists(self):
        """100 confirmed and an empty waitlist: the next attendee is waitlisted."""
        event = make_event(NOW + timedelta(days=3), confirmed=100)
        service, _ = build_service(event)

        decision = service.validate_registration(str(event.id), "ada@example.com")

        assert decision.should_waitlist is True
        assert decision.status is RegistrationStatus.WAITLIST

    def test_full_waitlist_rejected(self):
        """100 confirmed and 50 waitlisted: the 151st attempt fails."""
        event = make_event(NOW + timedelta(days=3), confirmed=100, waitlisted=50)
        service, _ = build_service(event)

        with pytest.raises(EventFullError) as excinfo:
            service.validate_registration(str(event.id), "ada@example.com")
        assert "waitlist is at capacity" in excinfo.value.message

    def test_cancelled_rows_do_not_take_waitlist_slots(self):
        event = make_event(
            NOW + timedelta(days=3), confirmed=100, waitlisted=49, cancelled=10
        )
        service, _ = build_service(event)

        decision = service.validate_registration(str(event.id), "ada@example.com")
        assert decision.should_waitlist is True

    def test_injected_policy_is_used(self):
        event = make_event(NOW + timedelta(days=3), confirmed=2)
        service, _ = build_service(
            event, policy=RegistrationPolicy(max_attendees=2, max_waitlist_size=0)
        )

        with pytest.raises(EventFullError):
            service.validate_registration(str(event.id), "ada@example.com")

    def test_validation_does_not_write(self):
        event = make_event(NOW + timedelta(days=3))
        service, store = build_service(event)

        service.validate_registration(str(event.id), "ada@example.com")

        assert store.get_event(event.id).registrations == ()


class TestRegister:
    """Tests for the validate-then-insert flow."""

    def test_register_confirms_and_returns_fresh_snapshot(self):
        event = make_event(NOW + timedelta(hours=48), confirmed=5)
        service, store = build_service(event)

        outcome = service.register(new_registration(event))

        assert outcome.registration.status is RegistrationStatus.CONFIRMED
        assert outcome.availability.spots_remaining == 94
        assert outcome.event_status.registration_status is RegistrationWindowStatus.OPEN
        assert outcome.message == "Registration successful"
        assert store.lock_calls == 1

    def test_concurrent_requests_cannot_both_take_last_seat(self):
        event = make_event(NOW + timedelta(days=3), confirmed=1)
        store = SlowLookupStore(event)
        service = RegistrationService(
            store, RegistrationPolicy(max_attendees=2), clock=lambda: NOW
        )
        emails = ["ada@example.com", "grace@example.com"]

        with ThreadPoolExecutor(max_workers=2) as pool:
            outcomes = list(
                pool.map(
                    lambda email: service.register(new_registration(event, email)),
                    emails,
                )
            )

        statuses = sorted(o.registration.status.value for o in outcomes)
        assert statuses == [
            RegistrationStatus.CONFIRMED.value,
            RegistrationStatus.WAITLIST.value,
        ]
        assert store.lock_calls == 2

    def test_register_waitlists_when_full(self):
        event = make_event(NOW + timedelta(days=3), confirmed=100)
        service, _ = build_service(event)

        outcome = service.register(new_registration(event))

        assert outcome.registration.status is RegistrationStatus.WAITLIST
        assert outcome.availability.waitlist_count == 1
        assert outcome.availability.is_waitlist_available
        assert outcome.message.startswith("You have been added to the waitlist")

    def test_second_attempt_with_same_email_fails(self):
        event = make_event(NOW + timedelta(days=3))
        service, _ = build_service(event)

        service.register(new_registration(event))
        with pytest.raises(DuplicateRegistrationError):
            service.register(new_registration(event))

    def test_duplicate_rejected_even_when_event_is_full(self):
        event = make_event(NOW + timedelta(days=3), confirmed=100, waitlisted=50)
        service, _ = build_service(event)

        with pytest.raises(DuplicateRegistrationError):
            service.register(new_registration(event, email="waitlist3@example.com"))

    def test_rejection_is_logged(self, caplog):
        event = make_event(NOW - timedelta(hours=1))
        service, _ = build_service(event)

        with caplog.at_level("WARNING", logger="registrations"):
            with pytest.raises(PastEventError):
                service.register(new_registration(event))

        assert "EVENT_IN_PAST" in caplog.text

    def test_register_invalid_id(self):
        service, _ = build_service()
        with pytest.raises(InvalidEventIdError):
            service.register(
                NewRegistration(event_id="42", name="Ada", email="ada@example.com")
            )


class TestAvailabilityAccessors:
    def test_get_availability_uses_policy_defaults(self):
        event = make_event(NOW + timedelta(days=3), confirmed=40, waitlisted=0)
        service, _ = build_service(event)

        availability = service.get_availability(str(event.id))

        assert availability.total_spots == 100
        assert availability.spots_remaining == 60
        assert availability.max_waitlist_size == 50

    def test_get_availability_not_found(self):
        service, _ = build_service()
        with pytest.raises(EventNotFoundError):
            service.get_availability(MISSING_ID)

    def test_get_event_status(self):
        event = make_event(NOW + timedelta(days=3), confirmed=100)
        service, _ = build_service(event)

        status = service.get_event_status(str(event.id))
        assert status.registration_status is RegistrationWindowStatus.WAITLIST

    def test_list_registrations_filters_by_status(self):
        event = make_event(NOW + timedelta(days=3), confirmed=3, waitlisted=2)
        service, _ = build_service(event)

        listing = service.list_registrations(
            RegistrationQuery(event_id=event.id, status=RegistrationStatus.WAITLIST)
        )

        assert listing.page.total == 2
        assert {r.status for r in listing.page.registrations} == {
            RegistrationStatus.WAITLIST
        }
        assert listing.availability.spots_remaining == 97
        assert listing.availability.waitlist_count == 2
        assert listing.event_status.registration_status is RegistrationWindowStatus.OPEN

    def test_list_registrations_unknown_event(self):
        service, _ = build_service()
        with pytest.raises(EventNotFoundError):
            service.list_registrations(
                RegistrationQuery(event_id=make_event(NOW).id)
            )


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self):
        """get_event raises InvalidEventIdError for malformed UUID."""
        service = EventService(InMemoryEventStore(), clock=lambda: NOW)
        with pytest.raises(InvalidEventIdError):
            service.get_event("nope")

    def test_get_event_not_found_raises_error(self):
        """get_event raises EventNotFoundError when store returns None."""
        service = EventService(InMemoryEventStore(), clock=lambda: NOW)
        with pytest.raises(EventNotFoundError):
            service.get_event(MISSING_ID)

    def test_get_event_includes_availability(self):
        event = make_event(NOW + timedelta(days=3), confirmed=10)
        service = EventService(InMemoryEventStore(event), clock=lambda: NOW)

        overview = service.get_event(str(event.id))

        assert overview.event.id == event.id
        assert overview.availability.spots_remaining == 90

    def test_list_events_paginates_in_date_order(self):
        later = make_event(NOW + timedelta(days=5))
        sooner = make_event(NOW + timedelta(days=2))
        latest = make_event(NOW + timedelta(days=9))
        service = EventService(
            InMemoryEventStore(later, sooner, latest), clock=lambda: NOW
        )

        first, has_more = service.list_events(page=1, limit=2)
        second, no_more = service.list_events(page=2, limit=2)

        assert [o.event.id for o in first] == [sooner.id, later.id]
        assert has_more is True
        assert [o.event.id for o in second] == [latest.id]
        assert no_more is False

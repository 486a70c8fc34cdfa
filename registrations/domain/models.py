"""Domain models representing persisted and derived state.

These are pure domain objects with no API input rules.
Django ORM models are in registrations/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from registrations.domain.value_objects import (
    EventId,
    LifecycleStatus,
    RegistrationId,
    RegistrationStatus,
    RegistrationWindowStatus,
)


@dataclass(frozen=True)
class Registration:
    """Domain representation of an EventRegistration."""

    id: RegistrationId
    event_id: EventId
    name: str
    email: str
    status: RegistrationStatus
    created_at: datetime
    phone: str | None = None
    organization: str | None = None
    dietary_requirements: str | None = None
    special_requirements: str | None = None


@dataclass(frozen=True)
class NewRegistration:
    """Write-once fields submitted by a prospective attendee."""

    event_id: str
    name: str
    email: str
    phone: str | None = None
    organization: str | None = None
    dietary_requirements: str | None = None
    special_requirements: str | None = None


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event with its registrations."""

    id: EventId
    title: str
    description: str
    date: datetime
    location: str
    created_at: datetime
    updated_at: datetime
    end_date: datetime | None = None
    image_url: str | None = None
    capacity: int | None = None
    registrations: tuple[Registration, ...] = ()

    @property
    def confirmed_count(self) -> int:
        return sum(
            1 for r in self.registrations if r.status is RegistrationStatus.CONFIRMED
        )

    @property
    def active_count(self) -> int:
        """Registrations that still hold a seat or a waitlist slot."""
        return sum(
            1 for r in self.registrations if r.status is not RegistrationStatus.CANCELLED
        )


@dataclass(frozen=True)
class EventAvailability:
    """Capacity snapshot, recomputed on every read."""

    total_spots: int
    spots_remaining: int
    is_full: bool
    is_waitlist_available: bool
    waitlist_count: int
    max_waitlist_size: int
    registration_deadline: datetime
    is_registration_open: bool


@dataclass(frozen=True)
class EventStatus:
    """Lifecycle and registration status shown next to an event."""

    status: LifecycleStatus
    registration_status: RegistrationWindowStatus
    status_message: str


@dataclass(frozen=True)
class RegistrationDecision:
    """Outcome of a successful eligibility check."""

    should_waitlist: bool

    @property
    def status(self) -> RegistrationStatus:
        if self.should_waitlist:
            return RegistrationStatus.WAITLIST
        return RegistrationStatus.CONFIRMED


@dataclass(frozen=True)
class RegistrationOutcome:
    """Everything the API returns after a registration is stored."""

    registration: Registration
    availability: EventAvailability
    event_status: EventStatus

    @property
    def message(self) -> str:
        if self.registration.status is RegistrationStatus.WAITLIST:
            return (
                "You have been added to the waitlist. "
                "We will notify you if a spot becomes available."
            )
        return "Registration successful"


@dataclass(frozen=True)
class RegistrationQuery:
    """Filters for listing the registrations of one event."""

    event_id: EventId
    page: int = 1
    limit: int = 10
    sort_by: str = "created_at"
    sort_order: str = "desc"
    search: str | None = None
    status: RegistrationStatus | None = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class RegistrationPage:
    """One page of registrations plus the unpaginated total."""

    registrations: tuple[Registration, ...]
    total: int
    page: int
    limit: int

    @property
    def pages(self) -> int:
        return -(-self.total // self.limit) if self.limit else 0

    @property
    def has_more(self) -> bool:
        return (self.page - 1) * self.limit + len(self.registrations) < self.total


@dataclass(frozen=True)
class EventOverview:
    """An event with its derived capacity and status."""

    event: Event
    availability: EventAvailability
    event_status: EventStatus


@dataclass(frozen=True)
class RegistrationListing:
    """A page of registrations with the event's current snapshot."""

    page: RegistrationPage
    availability: EventAvailability
    event_status: EventStatus

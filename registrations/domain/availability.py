"""Capacity and registration-window arithmetic.

Everything here is a pure function of its arguments; callers supply ``now``
and, for user-facing text, the time zone to render in.
"""

from datetime import datetime, timedelta, tzinfo

from registrations.domain.models import Event, EventAvailability
from registrations.domain.policy import REGISTRATION_DEADLINE_HOURS, RegistrationPolicy


def get_registration_deadline(
    event_date: datetime, hours: int = REGISTRATION_DEADLINE_HOURS
) -> datetime:
    return event_date - timedelta(hours=hours)


def is_event_in_past(event_date: datetime, now: datetime) -> bool:
    return event_date < now


def can_register_for_event(
    event_date: datetime,
    now: datetime,
    hours: int = REGISTRATION_DEADLINE_HOURS,
) -> bool:
    """True up to and including the deadline instant."""
    return now <= get_registration_deadline(event_date, hours)


def format_event_date(value: datetime, tz: tzinfo | None = None) -> str:
    """Render a timestamp for end users, e.g.
    ``Monday, January 5, 2026 at 2:30 PM UTC``.

    Aware values are converted to ``tz`` when one is given.
    """
    local = value.astimezone(tz) if tz is not None and value.tzinfo else value
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    formatted = (
        f"{local:%A}, {local:%B} {local.day}, {local.year} "
        f"at {hour}:{local:%M} {meridiem}"
    )
    zone = local.tzname()
    return f"{formatted} {zone}" if zone else formatted


def calculate_availability(
    total_registrations: int,
    confirmed_registrations: int,
    max_attendees: int,
    max_waitlist_size: int,
    event_date: datetime,
    *,
    now: datetime,
    deadline_hours: int = REGISTRATION_DEADLINE_HOURS,
) -> EventAvailability:
    """Derive the capacity snapshot for an event.

    ``spots_remaining`` and ``waitlist_count`` are clamped at zero so an
    overbooked event still reports sensible numbers.
    """
    spots_remaining = max(0, max_attendees - confirmed_registrations)
    is_full = spots_remaining == 0
    waitlist_count = max(0, total_registrations - confirmed_registrations)

    return EventAvailability(
        total_spots=max_attendees,
        spots_remaining=spots_remaining,
        is_full=is_full,
        is_waitlist_available=is_full and waitlist_count < max_waitlist_size,
        waitlist_count=waitlist_count,
        max_waitlist_size=max_waitlist_size,
        registration_deadline=get_registration_deadline(event_date, deadline_hours),
        is_registration_open=can_register_for_event(event_date, now, deadline_hours),
    )


def availability_for_event(
    event: Event, policy: RegistrationPolicy, now: datetime
) -> EventAvailability:
    """Snapshot for a loaded event; cancelled rows hold no waitlist slot."""
    return calculate_availability(
        event.active_count,
        event.confirmed_count,
        policy.max_attendees,
        policy.max_waitlist_size,
        event.date,
        now=now,
        deadline_hours=policy.deadline_hours,
    )

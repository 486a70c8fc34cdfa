"""Event lifecycle and registration status shown to visitors."""

from datetime import datetime, tzinfo

from registrations.domain.availability import (
    format_event_date,
    get_registration_deadline,
)
from registrations.domain.models import Event, EventStatus
from registrations.domain.policy import (
    DEFAULT_MAX_ATTENDEES,
    REGISTRATION_DEADLINE_HOURS,
    RegistrationPolicy,
)
from registrations.domain.value_objects import (
    LifecycleStatus,
    RegistrationWindowStatus,
)


def get_event_status(
    event_date: datetime,
    registration_count: int,
    *,
    now: datetime,
    max_attendees: int = DEFAULT_MAX_ATTENDEES,
    deadline_hours: int = REGISTRATION_DEADLINE_HOURS,
    tz: tzinfo | None = None,
) -> EventStatus:
    """Derive lifecycle and registration status at ``now``.

    Events carry no end time here, so ``in-progress`` only covers the
    instant ``now == event_date``.
    """
    deadline = get_registration_deadline(event_date, deadline_hours)

    if event_date < now:
        return EventStatus(
            status=LifecycleStatus.PAST,
            registration_status=RegistrationWindowStatus.CLOSED,
            status_message="This event has ended",
        )
    if now >= event_date:
        return EventStatus(
            status=LifecycleStatus.IN_PROGRESS,
            registration_status=RegistrationWindowStatus.CLOSED,
            status_message="This event is in progress",
        )

    if registration_count >= max_attendees:
        registration_status = RegistrationWindowStatus.WAITLIST
        message = "Main registration is full - waitlist available"
    elif now > deadline:
        registration_status = RegistrationWindowStatus.CLOSED
        message = f"Registration closed on {format_event_date(deadline, tz)}"
    else:
        registration_status = RegistrationWindowStatus.OPEN
        message = f"Registration closes on {format_event_date(deadline, tz)}"

    return EventStatus(
        status=LifecycleStatus.UPCOMING,
        registration_status=registration_status,
        status_message=message,
    )


def status_for_event(
    event: Event,
    policy: RegistrationPolicy,
    now: datetime,
    tz: tzinfo | None = None,
) -> EventStatus:
    return get_event_status(
        event.date,
        event.active_count,
        now=now,
        max_attendees=policy.max_attendees,
        deadline_hours=policy.deadline_hours,
        tz=tz,
    )

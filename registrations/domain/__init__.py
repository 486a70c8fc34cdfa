from registrations.domain.models import (
    Event,
    EventAvailability,
    EventOverview,
    EventStatus,
    NewRegistration,
    Registration,
    RegistrationDecision,
    RegistrationListing,
    RegistrationOutcome,
    RegistrationPage,
    RegistrationQuery,
)
from registrations.domain.policy import RegistrationPolicy
from registrations.domain.value_objects import (
    EventId,
    LifecycleStatus,
    RegistrationId,
    RegistrationStatus,
    RegistrationWindowStatus,
)

__all__ = [
    "Event",
    "EventAvailability",
    "EventOverview",
    "EventStatus",
    "NewRegistration",
    "Registration",
    "RegistrationDecision",
    "RegistrationListing",
    "RegistrationOutcome",
    "RegistrationPage",
    "RegistrationQuery",
    "RegistrationPolicy",
    "EventId",
    "RegistrationId",
    "RegistrationStatus",
    "LifecycleStatus",
    "RegistrationWindowStatus",
]

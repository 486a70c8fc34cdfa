from registrations.services.event_service import EventService
from registrations.services.registration_service import RegistrationService

__all__ = ["EventService", "RegistrationService"]

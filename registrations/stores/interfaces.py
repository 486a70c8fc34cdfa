"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from registrations.domain import (
    Event,
    EventId,
    NewRegistration,
    Registration,
    RegistrationPage,
    RegistrationQuery,
    RegistrationStatus,
)


class EventStore(ABC):
    """Interface for event and registration persistence operations."""

    @abstractmethod
    def list_events(self, offset: int = 0, limit: int | None = None) -> list[Event]:
        """Return events ordered by date ascending, with registrations."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event with its registrations, or None if not found."""
        ...

    @abstractmethod
    def get_registration(self, event_id: EventId, email: str) -> Registration | None:
        """Return the registration for (event, email), or None."""
        ...

    @abstractmethod
    def create_registration(
        self, data: NewRegistration, status: RegistrationStatus
    ) -> Registration:
        """Insert a registration row.

        Raises:
            DuplicateRegistrationError: If (event, email) already exists.
        """
        ...

    @abstractmethod
    def list_registrations(self, query: RegistrationQuery) -> RegistrationPage:
        """Return one filtered, sorted page of an event's registrations."""
        ...

    @abstractmethod
    def registration_lock(self, event_id: EventId) -> AbstractContextManager[None]:
        """Serialize validate-then-insert sequences for one event."""
        ...

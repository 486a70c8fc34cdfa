"""Domain error codes for the registrations module.

Every error carries the HTTP status it maps to, so the API boundary never
has to guess. Messages are user-safe and shown as-is.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    EVENT_IN_PAST = "EVENT_IN_PAST"
    REGISTRATION_CLOSED = "REGISTRATION_CLOSED"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    EVENT_FULL = "EVENT_FULL"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code, user-safe message and HTTP status."""

    code: ErrorCode
    message: str
    status_code: int = 400

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
            status_code=404,
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class PastEventError(DomainError):
    """Raised when registering for an event that has already started."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_IN_PAST,
            message="Cannot register for past events",
        )


class RegistrationClosedError(DomainError):
    """Raised when the registration deadline has passed."""

    def __init__(self, formatted_deadline: str) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_CLOSED,
            message=(
                "Registration is closed. "
                f"Registration deadline was {formatted_deadline}"
            ),
        )
        self.formatted_deadline = formatted_deadline


class DuplicateRegistrationError(DomainError):
    """Raised when the email is already registered for the event."""

    def __init__(self, email: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_REGISTERED,
            message="You have already registered for this event",
        )
        self.email = email


class EventFullError(DomainError):
    """Raised when both the main list and the waitlist are at capacity."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_FULL,
            message=(
                "Event is full and waitlist is at capacity. Please try again "
                "later or contact us for more information."
            ),
        )

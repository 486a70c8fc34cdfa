"""Registration capacity and deadline configuration."""

from dataclasses import dataclass
from typing import Any, Self

DEFAULT_MAX_ATTENDEES = 100
DEFAULT_WAITLIST_SIZE = 50
REGISTRATION_DEADLINE_HOURS = 24


@dataclass(frozen=True)
class RegistrationPolicy:
    """System-wide limits applied to every event.

    The per-event ``capacity`` column is not consulted here.
    """

    max_attendees: int = DEFAULT_MAX_ATTENDEES
    max_waitlist_size: int = DEFAULT_WAITLIST_SIZE
    deadline_hours: int = REGISTRATION_DEADLINE_HOURS

    def __post_init__(self) -> None:
        if self.max_attendees <= 0:
            raise ValueError("max_attendees must be positive")
        if self.max_waitlist_size < 0:
            raise ValueError("max_waitlist_size cannot be negative")
        if self.deadline_hours < 0:
            raise ValueError("deadline_hours cannot be negative")

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> Self:
        return cls(
            max_attendees=int(values.get("MAX_ATTENDEES", DEFAULT_MAX_ATTENDEES)),
            max_waitlist_size=int(values.get("WAITLIST_SIZE", DEFAULT_WAITLIST_SIZE)),
            deadline_hours=int(
                values.get("DEADLINE_HOURS", REGISTRATION_DEADLINE_HOURS)
            ),
        )

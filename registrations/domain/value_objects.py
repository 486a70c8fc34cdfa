"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RegistrationId:
    """Unique identifier for a Registration."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


class RegistrationStatus(Enum):
    """Lifecycle of a single registration row."""

    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    WAITLIST = "WAITLIST"


class LifecycleStatus(Enum):
    """Where an event sits relative to the current time."""

    UPCOMING = "upcoming"
    IN_PROGRESS = "in-progress"
    PAST = "past"


class RegistrationWindowStatus(Enum):
    """What a prospective attendee can currently do."""

    OPEN = "open"
    CLOSED = "closed"
    FULL = "full"
    WAITLIST = "waitlist"

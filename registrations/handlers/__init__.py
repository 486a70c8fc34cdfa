from registrations.handlers.views import (
    EventDetailView,
    EventListView,
    EventRegistrationView,
)

__all__ = ["EventDetailView", "EventListView", "EventRegistrationView"]

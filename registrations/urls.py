from django.urls import path

from registrations.handlers import (
    EventDetailView,
    EventListView,
    EventRegistrationView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "event-registrations",
        EventRegistrationView.as_view(),
        name="event-registrations",
    ),
]

"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from registrations import models


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def small_policy(settings):
    """Shrink the system-wide limits so capacity tests stay fast."""
    settings.EVENT_REGISTRATION = {
        "MAX_ATTENDEES": 2,
        "WAITLIST_SIZE": 1,
        "DEADLINE_HOURS": 24,
    }
    return settings.EVENT_REGISTRATION


@pytest.fixture
def create_event():
    def _create(starts_in: timedelta = timedelta(days=3), **fields) -> models.Event:
        date: datetime = timezone.now() + starts_in
        defaults = {
            "title": "Intro to Transformers",
            "description": "Hands-on workshop",
            "location": "Engineering Hall 101",
            "date": date,
        }
        defaults.update(fields)
        return models.Event.objects.create(**defaults)

    return _create


@pytest.fixture
def add_registrations():
    def _add(
        event: models.Event,
        count: int,
        status: str = models.EventRegistration.Status.CONFIRMED,
        prefix: str = "attendee",
    ) -> None:
        models.EventRegistration.objects.bulk_create(
            models.EventRegistration(
                event=event,
                name=f"{prefix} {i}",
                email=f"{prefix}{i}@example.com",
                status=status,
            )
            for i in range(count)
        )

    return _add

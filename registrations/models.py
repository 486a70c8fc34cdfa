"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for club events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField()
    date = models.DateTimeField()
    end_date = models.DateTimeField(blank=True, null=True)
    location = models.CharField(max_length=255)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    # Collected by the admin; capacity checks use the system-wide policy.
    capacity = models.PositiveIntegerField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["date"]
        indexes = [
            models.Index(fields=["date"], name="registratio_date_3f1c2a_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class EventRegistration(models.Model):
    """Persistence model for a single attendee registration."""

    class Status(models.TextChoices):
        CONFIRMED = "CONFIRMED", "Confirmed"
        CANCELLED = "CANCELLED", "Cancelled"
        WAITLIST = "WAITLIST", "Waitlist"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="registrations"
    )
    name = models.CharField(max_length=100)
    email = models.EmailField()
    phone = models.CharField(max_length=20, blank=True, null=True)
    organization = models.CharField(max_length=100, blank=True, null=True)
    dietary_requirements = models.TextField(blank=True, null=True)
    special_requirements = models.TextField(blank=True, null=True)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.CONFIRMED
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "email"], name="unique_event_registration_email"
            ),
        ]
        indexes = [
            models.Index(
                fields=["event", "status"], name="registratio_event_i_8b7d41_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}> - {self.event.title}"

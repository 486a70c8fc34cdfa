"""Django ORM implementation of the EventStore."""

from contextlib import contextmanager
from typing import Iterator

from django.db import IntegrityError, transaction
from django.db.models import Q

from registrations import models
from registrations.domain import (
    Event,
    EventId,
    NewRegistration,
    Registration,
    RegistrationId,
    RegistrationPage,
    RegistrationQuery,
    RegistrationStatus,
)
from registrations.domain.errors import DuplicateRegistrationError
from registrations.stores.interfaces import EventStore

SORTABLE_FIELDS = {"created_at", "name", "email"}


def to_registration(row: models.EventRegistration) -> Registration:
    return Registration(
        id=RegistrationId(row.id),
        event_id=EventId(row.event_id),
        name=row.name,
        email=row.email,
        status=RegistrationStatus(row.status),
        created_at=row.created_at,
        phone=row.phone,
        organization=row.organization,
        dietary_requirements=row.dietary_requirements,
        special_requirements=row.special_requirements,
    )


def to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        description=row.description,
        date=row.date,
        end_date=row.end_date,
        location=row.location,
        image_url=row.image_url,
        capacity=row.capacity,
        created_at=row.created_at,
        updated_at=row.updated_at,
        registrations=tuple(to_registration(r) for r in row.registrations.all()),
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self, offset: int = 0, limit: int | None = None) -> list[Event]:
        queryset = models.Event.objects.prefetch_related("registrations").order_by(
            "date"
        )
        if limit is not None:
            queryset = queryset[offset : offset + limit]
        elif offset:
            queryset = queryset[offset:]
        return [to_event(row) for row in queryset]

    def get_event(self, event_id: EventId) -> Event | None:
        row = (
            models.Event.objects.prefetch_related("registrations")
            .filter(id=event_id.value)
            .first()
        )
        return to_event(row) if row is not None else None

    def get_registration(self, event_id: EventId, email: str) -> Registration | None:
        row = models.EventRegistration.objects.filter(
            event_id=event_id.value, email=email
        ).first()
        return to_registration(row) if row is not None else None

    def create_registration(
        self, data: NewRegistration, status: RegistrationStatus
    ) -> Registration:
        try:
            # Savepoint so a conflict does not poison an enclosing transaction.
            with transaction.atomic():
                row = models.EventRegistration.objects.create(
                    event_id=EventId.from_string(data.event_id).value,
                    name=data.name,
                    email=data.email,
                    phone=data.phone,
                    organization=data.organization,
                    dietary_requirements=data.dietary_requirements,
                    special_requirements=data.special_requirements,
                    status=status.value,
                )
        except IntegrityError as exc:
            raise DuplicateRegistrationError(data.email) from exc
        return to_registration(row)

    def list_registrations(self, query: RegistrationQuery) -> RegistrationPage:
        queryset = models.EventRegistration.objects.filter(event_id=query.event_id.value)
        if query.search:
            queryset = queryset.filter(
                Q(name__icontains=query.search)
                | Q(email__icontains=query.search)
                | Q(organization__icontains=query.search)
            )
        if query.status is not None:
            queryset = queryset.filter(status=query.status.value)

        sort_field = query.sort_by if query.sort_by in SORTABLE_FIELDS else "created_at"
        prefix = "" if query.sort_order == "asc" else "-"
        queryset = queryset.order_by(f"{prefix}{sort_field}")

        total = queryset.count()
        rows = queryset[query.offset : query.offset + query.limit]
        return RegistrationPage(
            registrations=tuple(to_registration(row) for row in rows),
            total=total,
            page=query.page,
            limit=query.limit,
        )

    @contextmanager
    def registration_lock(self, event_id: EventId) -> Iterator[None]:
        with transaction.atomic():
            # Row lock on the event; a no-op on backends without SELECT ... FOR UPDATE.
            list(
                models.Event.objects.select_for_update()
                .filter(id=event_id.value)
                .values_list("id", flat=True)
            )
            yield

"""
Catalogue read use cases: grouped event listing, available workshops,
a member's own workshops, and workshop details with action flags.
"""

from typing import List
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import core_only
from clubhub.domain.base import utcnow
from clubhub.domain.entities import EventMode, EventStatus
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import (
    AvailableWorkshop,
    EventInfo,
    GroupedEventsResponse,
    HostInfo,
    MyWorkshop,
    ParticipantInfo,
    WorkshopAdminDetails,
    WorkshopDetails,
)

WORKSHOP_NOT_FOUND = Error(ErrorKind.NOT_FOUND, "WORKSHOP_NOT_FOUND", "Workshop not found")

OPEN_STATUSES = [EventStatus.upcoming, EventStatus.registration_open]


class ListEventsUseCase:
    """
    Events grouped by lifecycle.

    registration_open only lists events whose deadline has not passed.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[GroupedEventsResponse]:
        now = utcnow()
        async with self.uow:
            events = await self.uow.events.list_all(mode=EventMode.event)

            groups = {status: [] for status in ("registration_open", "upcoming", "ongoing", "completed")}
            for event in events:
                if event.status == EventStatus.registration_open and now >= event.registration_deadline:
                    continue
                if event.status.value not in groups:
                    continue
                count = await self.uow.participants.count_by_event(event.id)
                groups[event.status.value].append(EventInfo.from_entity(event, count))

            return Return.ok(GroupedEventsResponse(**groups))


class ListAvailableWorkshopsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity) -> Result[List[AvailableWorkshop]]:
        now = utcnow()
        async with self.uow:
            workshops = await self.uow.events.list_all(
                mode=EventMode.workshop, statuses=OPEN_STATUSES
            )

            available = []
            for workshop in workshops:
                if now >= workshop.registration_deadline:
                    continue
                count = await self.uow.participants.count_by_event(workshop.id)
                registration = await self.uow.participants.get_by_event_and_user(
                    workshop.id, identity.user_id
                )
                info = EventInfo.from_entity(workshop, count)
                available.append(
                    AvailableWorkshop(**info.model_dump(), is_registered=registration is not None)
                )

            return Return.ok(available)


class ListMyWorkshopsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity) -> Result[List[MyWorkshop]]:
        async with self.uow:
            registrations = await self.uow.participants.list_by_user(identity.user_id)
            events = await self.uow.events.list_by_ids([r.event_id for r in registrations])
            workshops = {e.id: e for e in events if e.mode == EventMode.workshop}

            items = []
            for registration in registrations:
                workshop = workshops.get(registration.event_id)
                if workshop is None:
                    continue
                items.append(
                    MyWorkshop(
                        workshop=EventInfo.from_entity(workshop),
                        registration_status=registration.status.value,
                        attended=registration.attended,
                        registered_at=registration.registered_at.isoformat(),
                    )
                )

            return Return.ok(items)


class GetWorkshopDetailsUseCase:
    """
    Workshop details for a member.

    can_register: not registered, not full, deadline not passed, not completed
    can_cancel: registered, deadline not passed, not completed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, workshop_id: UUID) -> Result[WorkshopDetails]:
        now = utcnow()
        async with self.uow:
            workshop = await self.uow.events.get_by_id(workshop_id)
            if workshop is None or workshop.mode != EventMode.workshop:
                return Return.err(WORKSHOP_NOT_FOUND)

            hosts = await self.uow.workshop_hosts.list_by_event(workshop.id)
            count = await self.uow.participants.count_by_event(workshop.id)
            registration = await self.uow.participants.get_by_event_and_user(
                workshop.id, identity.user_id
            )

            is_registered = registration is not None
            is_open = now < workshop.registration_deadline and workshop.status != EventStatus.completed

            return Return.ok(
                WorkshopDetails(
                    workshop=EventInfo.from_entity(workshop, count),
                    hosts=[HostInfo.from_entity(h) for h in hosts],
                    registration_count=count,
                    is_registered=is_registered,
                    can_register=not is_registered and count < workshop.max_participants and is_open,
                    can_cancel=is_registered and is_open,
                )
            )


class GetWorkshopAdminDetailsUseCase:
    RECENT_LIMIT = 5

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, workshop_id: UUID) -> Result[WorkshopAdminDetails]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            workshop = await self.uow.events.get_by_id(workshop_id)
            if workshop is None or workshop.mode != EventMode.workshop:
                return Return.err(WORKSHOP_NOT_FOUND)

            hosts = await self.uow.workshop_hosts.list_by_event(workshop.id)
            registrations = await self.uow.participants.list_by_event(workshop.id)
            attended_count = sum(1 for r in registrations if r.attended)

            return Return.ok(
                WorkshopAdminDetails(
                    workshop=EventInfo.from_entity(workshop, len(registrations)),
                    hosts=[HostInfo.from_entity(h) for h in hosts],
                    registration_count=len(registrations),
                    attended_count=attended_count,
                    recent_registrations=[
                        ParticipantInfo.from_entity(r) for r in registrations[: self.RECENT_LIMIT]
                    ],
                )
            )

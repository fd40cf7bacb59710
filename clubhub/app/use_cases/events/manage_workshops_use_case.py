"""
Workshop Catalogue Use Cases (core team)

Create, update, complete and delete workshops. Every change is
recorded in the event audit log.
"""

import logging
from typing import List
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import core_only
from clubhub.domain.base import utcnow
from clubhub.domain.entities import (
    Event,
    EventAuditLog,
    EventMode,
    EventStatus,
    EventType,
    WorkshopHost,
)
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import EventInfo, HostInput, WorkshopCommand
from .validation import validate_workshop, with_naive_dates

logger = logging.getLogger(__name__)

WORKSHOP_NOT_FOUND = Error(ErrorKind.NOT_FOUND, "WORKSHOP_NOT_FOUND", "Workshop not found")
WORKSHOP_COMPLETED = Error(
    ErrorKind.INVALID_STATE, "WORKSHOP_COMPLETED", "Workshop has already been completed"
)

DELETE_ROLE = "president"


async def _replace_hosts(uow: UnitOfWork, event_id: UUID, hosts: List[HostInput]) -> None:
    await uow.workshop_hosts.delete_by_event(event_id)
    for host in hosts:
        await uow.workshop_hosts.create(
            WorkshopHost(
                event_id=event_id,
                name=host.name.strip(),
                designation=host.designation,
                profile_id=UUID(host.profile_id) if host.profile_id else None,
            )
        )


class CreateWorkshopUseCase:
    """
    Business Rules:
    - Core team only
    - Title 3-200 chars, description 20-5000 chars, capacity 1-500
    - registration_deadline < start_date <= end_date, start in the future
    - 1-10 hosts, each name at least 2 chars
    - Workshops are individual, team_size 1, created as upcoming
    - Audit: workshop_created
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, command: WorkshopCommand) -> Result[EventInfo]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        command = with_naive_dates(command)
        now = utcnow()

        error = validate_workshop(command, now)
        if error:
            return Return.err(error)

        async with self.uow:
            workshop = Event(
                title=command.title.strip(),
                description=command.description.strip(),
                mode=EventMode.workshop,
                type=EventType.individual,
                status=EventStatus.upcoming,
                max_participants=command.max_participants,
                team_size=1,
                registration_deadline=command.registration_deadline,
                start_date=command.start_date,
                end_date=command.end_date,
                category=command.category,
                banner_url=command.banner_url,
                meeting_link=command.meeting_link,
                created_by=identity.user_id,
            )
            workshop = await self.uow.events.create(workshop)

            await _replace_hosts(self.uow, workshop.id, command.hosts)

            audit = EventAuditLog(
                event_id=workshop.id,
                performed_by=identity.user_id,
                action="workshop_created",
                event_metadata={
                    "title": workshop.title,
                    "max_participants": workshop.max_participants,
                    "host_count": len(command.hosts),
                },
            )
            await self.uow.audit_logs.create(audit)

            await self.uow.commit()

            logger.info("Workshop %s created by %s", workshop.id, identity.user_id)

            return Return.ok(EventInfo.from_entity(workshop))


class UpdateWorkshopUseCase:
    """
    Business Rules:
    - Same field rules as creation, except the start may already be past
    - Completed workshops are read-only
    - Hosts are replaced as a whole
    - Audit: workshop_updated
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, workshop_id: UUID, command: WorkshopCommand
    ) -> Result[EventInfo]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        command = with_naive_dates(command)

        error = validate_workshop(command, utcnow(), require_future_start=False)
        if error:
            return Return.err(error)

        async with self.uow:
            workshop = await self.uow.events.get_by_id(workshop_id)
            if workshop is None or workshop.mode != EventMode.workshop:
                return Return.err(WORKSHOP_NOT_FOUND)

            if workshop.status == EventStatus.completed:
                return Return.err(WORKSHOP_COMPLETED)

            workshop.title = command.title.strip()
            workshop.description = command.description.strip()
            workshop.max_participants = command.max_participants
            workshop.registration_deadline = command.registration_deadline
            workshop.start_date = command.start_date
            workshop.end_date = command.end_date
            workshop.category = command.category
            workshop.banner_url = command.banner_url
            workshop.meeting_link = command.meeting_link
            workshop.updated_by = identity.user_id
            workshop.updated_at = utcnow()
            workshop = await self.uow.events.update(workshop)

            await _replace_hosts(self.uow, workshop.id, command.hosts)

            audit = EventAuditLog(
                event_id=workshop.id,
                performed_by=identity.user_id,
                action="workshop_updated",
                event_metadata={"title": workshop.title, "host_count": len(command.hosts)},
            )
            await self.uow.audit_logs.create(audit)

            await self.uow.commit()

            count = await self.uow.participants.count_by_event(workshop.id)
            return Return.ok(EventInfo.from_entity(workshop, count))


class CompleteWorkshopUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, workshop_id: UUID) -> Result[EventInfo]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            workshop = await self.uow.events.get_by_id(workshop_id)
            if workshop is None or workshop.mode != EventMode.workshop:
                return Return.err(WORKSHOP_NOT_FOUND)

            if workshop.status == EventStatus.completed:
                return Return.err(WORKSHOP_COMPLETED)

            now = utcnow()
            workshop.status = EventStatus.completed
            workshop.completed_at = now
            workshop.updated_by = identity.user_id
            workshop.updated_at = now
            workshop = await self.uow.events.update(workshop)

            registration_count = await self.uow.participants.count_by_event(workshop.id)
            attended_count = await self.uow.participants.count_by_event(workshop.id, attended=True)

            audit = EventAuditLog(
                event_id=workshop.id,
                performed_by=identity.user_id,
                action="workshop_completed",
                event_metadata={
                    "registration_count": registration_count,
                    "attended_count": attended_count,
                },
            )
            await self.uow.audit_logs.create(audit)

            await self.uow.commit()

            logger.info("Workshop %s completed by %s", workshop.id, identity.user_id)

            return Return.ok(EventInfo.from_entity(workshop, registration_count))


class DeleteWorkshopUseCase:
    """
    Business Rules:
    - Only the club president (member_role) may delete
    - Completed workshops cannot be deleted
    - Hosts, registrations and audit rows are removed with the workshop
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, workshop_id: UUID) -> Result[None]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        if (identity.member_role or "").lower() != DELETE_ROLE:
            return Return.err(
                Error(ErrorKind.FORBIDDEN, "PRESIDENT_ONLY", "Only the president can delete workshops")
            )

        async with self.uow:
            workshop = await self.uow.events.get_by_id(workshop_id)
            if workshop is None or workshop.mode != EventMode.workshop:
                return Return.err(WORKSHOP_NOT_FOUND)

            if workshop.status == EventStatus.completed:
                return Return.err(
                    Error(ErrorKind.INVALID_STATE, "WORKSHOP_COMPLETED", "Completed workshops cannot be deleted")
                )

            await self.uow.workshop_hosts.delete_by_event(workshop.id)
            await self.uow.participants.delete_by_event(workshop.id)
            await self.uow.audit_logs.delete_by_event(workshop.id)
            await self.uow.events.delete(workshop)

            await self.uow.commit()

            logger.info("Workshop %s deleted by %s", workshop_id, identity.user_id)

            return Return.ok()

"""
Event Catalogue Use Cases (core team)

Create, update and delete competitive events.
"""

import logging
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import core_only
from clubhub.domain.base import utcnow
from clubhub.domain.entities import Event, EventMode, EventStatus, EventType
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import CreateEventCommand, EventInfo, UpdateEventCommand
from .validation import validate_schedule, with_naive_dates

logger = logging.getLogger(__name__)

EVENT_NOT_FOUND = Error(ErrorKind.NOT_FOUND, "EVENT_NOT_FOUND", "Event does not exist")
TOURNAMENT_NOT_FOUND = Error(ErrorKind.NOT_FOUND, "TOURNAMENT_NOT_FOUND", "Tournament not found")


def _validate_event_fields(title: str, max_participants: int, type: EventType, team_size: int):
    if not title.strip():
        return Error(ErrorKind.VALIDATION, "INVALID_TITLE", "Title is required")
    if max_participants < 1:
        return Error(ErrorKind.VALIDATION, "INVALID_CAPACITY", "Max participants must be at least 1")
    if team_size < 1 or (type == EventType.team and team_size < 2):
        return Error(ErrorKind.VALIDATION, "INVALID_TEAM_SIZE", "Team events need a team size of at least 2")
    return None


class CreateEventUseCase:
    """
    Business Rules:
    - Core team only
    - Title required, capacity at least 1
    - Team events need team_size >= 2, individual events use team_size 1
    - registration_deadline < start_date <= end_date
    - A linked tournament must exist; linking marks the event as a tournament event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, command: CreateEventCommand) -> Result[EventInfo]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        command = with_naive_dates(command)
        team_size = command.team_size if command.type == EventType.team else 1

        error = _validate_event_fields(
            command.title, command.max_participants, command.type, team_size
        ) or validate_schedule(
            command.registration_deadline, command.start_date, command.end_date
        )
        if error:
            return Return.err(error)

        async with self.uow:
            if command.tournament_id is not None:
                if await self.uow.tournaments.get_by_id(command.tournament_id) is None:
                    return Return.err(TOURNAMENT_NOT_FOUND)

            event = Event(
                title=command.title.strip(),
                description=command.description,
                mode=EventMode.event,
                type=command.type,
                status=command.status,
                max_participants=command.max_participants,
                team_size=team_size,
                registration_deadline=command.registration_deadline,
                start_date=command.start_date,
                end_date=command.end_date,
                category=command.category,
                banner_url=command.banner_url,
                meeting_link=command.meeting_link,
                is_tournament=command.is_tournament or command.tournament_id is not None,
                tournament_id=command.tournament_id,
                created_by=identity.user_id,
            )
            event = await self.uow.events.create(event)
            await self.uow.commit()

            logger.info("Event %s created by %s", event.id, identity.user_id)

            return Return.ok(EventInfo.from_entity(event))


class UpdateEventUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, event_id: UUID, command: UpdateEventCommand
    ) -> Result[EventInfo]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        command = with_naive_dates(command)

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None or event.mode != EventMode.event:
                return Return.err(EVENT_NOT_FOUND)

            for field, value in command.model_dump(exclude_unset=True).items():
                if value is not None:
                    setattr(event, field, value)
            if event.type == EventType.individual:
                event.team_size = 1
            if event.tournament_id is not None:
                if await self.uow.tournaments.get_by_id(event.tournament_id) is None:
                    return Return.err(TOURNAMENT_NOT_FOUND)
                event.is_tournament = True

            error = _validate_event_fields(
                event.title, event.max_participants, event.type, event.team_size
            ) or validate_schedule(event.registration_deadline, event.start_date, event.end_date)
            if error:
                return Return.err(error)

            if event.status == EventStatus.completed and event.completed_at is None:
                event.completed_at = utcnow()
            event.updated_by = identity.user_id
            event.updated_at = utcnow()

            event = await self.uow.events.update(event)
            await self.uow.commit()

            count = await self.uow.participants.count_by_event(event.id)
            return Return.ok(EventInfo.from_entity(event, count))


class DeleteEventUseCase:
    """
    Business Rules:
    - Core team only
    - An ongoing event cannot be deleted
    - Registrations, winners and audit rows of the event go with it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, event_id: UUID) -> Result[None]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None or event.mode != EventMode.event:
                return Return.err(EVENT_NOT_FOUND)

            if event.status == EventStatus.ongoing:
                return Return.err(
                    Error(ErrorKind.INVALID_STATE, "EVENT_ONGOING", "Event is ongoing cannot delete.")
                )

            await self.uow.event_winners.delete_by_event(event.id)
            await self.uow.participants.delete_by_event(event.id)
            await self.uow.audit_logs.delete_by_event(event.id)
            await self.uow.events.delete(event)
            await self.uow.commit()

            logger.info("Event %s deleted by %s", event_id, identity.user_id)

            return Return.ok()

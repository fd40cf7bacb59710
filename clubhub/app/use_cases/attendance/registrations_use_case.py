"""
Registration listing and CSV export (core team)
"""

import re
from typing import List
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.events.dtos import ParticipantInfo
from clubhub.app.use_cases.guards import core_only
from clubhub.domain.entities import EventParticipant
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import RegistrationsExport

EVENT_NOT_FOUND = Error(ErrorKind.NOT_FOUND, "EVENT_NOT_FOUND", "Event not found")

CSV_HEADER = "#,Name,Email,Registered At,Status,Attended"


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def build_registrations_csv(registrations: List[EventParticipant]) -> str:
    """
    One header line plus one line per registration, in the order given.

    Name, Email, Registered At and Status are quoted; Attended is Yes/No.
    """
    lines = [CSV_HEADER]
    for index, registration in enumerate(registrations, start=1):
        lines.append(
            ",".join(
                [
                    str(index),
                    _quote(registration.name),
                    _quote(registration.email),
                    _quote(registration.registered_at.strftime("%Y-%m-%d %H:%M:%S")),
                    _quote(registration.status.value),
                    "Yes" if registration.attended else "No",
                ]
            )
        )
    return "\n".join(lines)


def _slug(title: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-") or "event"


class ListRegistrationsUseCase:
    """Registrations of an event or workshop, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, event_id: UUID) -> Result[List[ParticipantInfo]]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(EVENT_NOT_FOUND)

            registrations = await self.uow.participants.list_by_event(event.id)
            return Return.ok([ParticipantInfo.from_entity(r) for r in registrations])


class ExportRegistrationsCsvUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, event_id: UUID) -> Result[RegistrationsExport]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(EVENT_NOT_FOUND)

            registrations = await self.uow.participants.list_by_event(event.id)

            return Return.ok(
                RegistrationsExport(
                    filename=f"{_slug(event.title)}-registrations.csv",
                    content=build_registrations_csv(registrations),
                )
            )

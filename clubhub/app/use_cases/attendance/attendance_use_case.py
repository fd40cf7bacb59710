"""
Attendance Use Cases (core team)

Attendance sheet and batch attendance updates for a workshop.
"""

import logging
from typing import List
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.events.dtos import EventInfo, ParticipantInfo
from clubhub.app.use_cases.guards import core_only
from clubhub.domain.entities import EventAuditLog, EventMode, ParticipantStatus
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import AttendanceSheet, AttendanceUpdate, UpdateAttendanceResponse

logger = logging.getLogger(__name__)

WORKSHOP_NOT_FOUND = Error(ErrorKind.NOT_FOUND, "WORKSHOP_NOT_FOUND", "Workshop not found")


class GetAttendanceSheetUseCase:
    """Workshop and its participants ordered by name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, workshop_id: UUID) -> Result[AttendanceSheet]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            workshop = await self.uow.events.get_by_id(workshop_id)
            if workshop is None or workshop.mode != EventMode.workshop:
                return Return.err(WORKSHOP_NOT_FOUND)

            participants = await self.uow.participants.list_by_event(
                workshop.id, order_by_name=True
            )

            return Return.ok(
                AttendanceSheet(
                    workshop=EventInfo.from_entity(workshop, len(participants)),
                    participants=[ParticipantInfo.from_entity(p) for p in participants],
                    total_participants=len(participants),
                    attended_count=sum(1 for p in participants if p.attended),
                )
            )


class UpdateAttendanceUseCase:
    """
    Record attendance for a batch of participants.

    Business Rules:
    - Core team only, batch must not be empty
    - All or nothing: every participant id must belong to the workshop,
      otherwise nothing is written
    - status becomes confirmed when attended, registered otherwise
    - One attendance_updated audit row per batch with the resulting
      totals, committed together with the updates
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, workshop_id: UUID, updates: List[AttendanceUpdate]
    ) -> Result[UpdateAttendanceResponse]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        if not updates:
            return Return.err(
                Error(ErrorKind.VALIDATION, "EMPTY_BATCH", "No attendance updates provided")
            )

        async with self.uow:
            workshop = await self.uow.events.get_by_id(workshop_id)
            if workshop is None or workshop.mode != EventMode.workshop:
                return Return.err(WORKSHOP_NOT_FOUND)

            participants = await self.uow.participants.list_by_event(workshop.id)
            by_id = {p.id: p for p in participants}

            unknown = [str(u.participant_id) for u in updates if u.participant_id not in by_id]
            if unknown:
                return Return.err(
                    Error(
                        ErrorKind.NOT_FOUND,
                        "PARTICIPANTS_NOT_FOUND",
                        "Unknown participants for this workshop: " + ", ".join(unknown),
                    )
                )

            for update in updates:
                participant = by_id[update.participant_id]
                participant.attended = update.attended
                participant.status = (
                    ParticipantStatus.confirmed if update.attended else ParticipantStatus.registered
                )
                await self.uow.participants.update(participant)

            total = len(participants)
            attended_count = sum(1 for p in participants if p.attended)
            attendance_rate = round(attended_count / total * 100) if total else 0

            audit = EventAuditLog(
                event_id=workshop.id,
                performed_by=identity.user_id,
                action="attendance_updated",
                event_metadata={
                    "total_participants": total,
                    "attended_count": attended_count,
                    "attendance_rate": attendance_rate,
                },
            )
            await self.uow.audit_logs.create(audit)

            await self.uow.commit()

            logger.info(
                "Attendance updated for workshop %s: %s/%s attended",
                workshop.id,
                attended_count,
                total,
            )

            return Return.ok(
                UpdateAttendanceResponse(
                    updated=len(updates),
                    total_participants=total,
                    attended_count=attended_count,
                    attendance_rate=attendance_rate,
                )
            )

"""
Registration Use Cases

Individual registration and cancellation for workshops and
individual events.
"""

import logging
from uuid import UUID

from clubhub.app.repositories.errors import DuplicateRecordError
from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.domain.base import utcnow
from clubhub.domain.entities import (
    EventMode,
    EventParticipant,
    EventStatus,
    EventType,
    ParticipantStatus,
)
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import RegistrationResponse

logger = logging.getLogger(__name__)


def _label(mode: EventMode) -> str:
    return "Workshop" if mode == EventMode.workshop else "Event"


class RegisterUseCase:
    """
    Register the caller for a workshop or an individual event.

    Preconditions, checked in order (first failure wins):
    1. Event exists with the expected mode (events must be individual)
    2. Caller is not registered yet
    3. Event is not full
    4. Registration deadline has not passed
    5. Event is not completed

    The insert itself is conditional on the live participant count and
    guarded by the unique (event_id, user_id) index, so concurrent
    requests can neither overfill the event nor register twice.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, event_id: UUID, expected_mode: EventMode = EventMode.workshop
    ) -> Result[RegistrationResponse]:
        label = _label(expected_mode)
        already_registered = Error(ErrorKind.CONFLICT, "ALREADY_REGISTERED", "Already registered")
        full = Error(ErrorKind.CONFLICT, "EVENT_FULL", f"{label} is full")

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if (
                event is None
                or event.mode != expected_mode
                or (expected_mode == EventMode.event and event.type != EventType.individual)
            ):
                return Return.err(Error(ErrorKind.NOT_FOUND, "EVENT_NOT_FOUND", f"{label} not found"))

            existing = await self.uow.participants.get_by_event_and_user(event.id, identity.user_id)
            if existing is not None:
                return Return.err(already_registered)

            count = await self.uow.participants.count_by_event(event.id)
            if count >= event.max_participants:
                return Return.err(full)

            now = utcnow()
            if now >= event.registration_deadline:
                return Return.err(
                    Error(ErrorKind.DEADLINE_PASSED, "DEADLINE_PASSED", "Registration deadline has passed")
                )

            if event.status == EventStatus.completed:
                return Return.err(
                    Error(ErrorKind.INVALID_STATE, "EVENT_COMPLETED", f"{label} has already been completed")
                )

            profile = await self.uow.profiles.get_by_id(identity.user_id)
            if profile is None:
                return Return.err(
                    Error(ErrorKind.UNAUTHORIZED, "PROFILE_NOT_FOUND", "Profile not found")
                )

            participant = EventParticipant(
                event_id=event.id,
                user_id=profile.id,
                name=profile.full_name,
                email=profile.email,
                status=ParticipantStatus.registered,
                attended=False,
                registered_at=now,
            )

            try:
                inserted = await self.uow.participants.create_within_capacity(
                    participant, event.max_participants
                )
            except DuplicateRecordError:
                return Return.err(already_registered)

            if not inserted:
                return Return.err(full)

            await self.uow.commit()

            logger.info("User %s registered for %s %s", profile.id, expected_mode.value, event.id)

            return Return.ok(
                RegistrationResponse(
                    message=f"Successfully registered for {label.lower()}",
                    participant_id=str(participant.id),
                )
            )


class CancelRegistrationUseCase:
    """
    Cancel the caller's registration.

    Business Rules:
    - Registration must exist
    - Deadline must not have passed, event must not be completed
    - The row is hard-deleted; cancellations are not audited
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, event_id: UUID, expected_mode: EventMode = EventMode.workshop
    ) -> Result[RegistrationResponse]:
        label = _label(expected_mode)

        async with self.uow:
            registration = await self.uow.participants.get_by_event_and_user(
                event_id, identity.user_id
            )
            if registration is None:
                return Return.err(
                    Error(ErrorKind.NOT_FOUND, "REGISTRATION_NOT_FOUND", "No registration found")
                )

            event = await self.uow.events.get_by_id(event_id)
            if event is None or event.mode != expected_mode:
                return Return.err(Error(ErrorKind.NOT_FOUND, "EVENT_NOT_FOUND", f"{label} not found"))

            if utcnow() >= event.registration_deadline:
                return Return.err(
                    Error(
                        ErrorKind.DEADLINE_PASSED,
                        "DEADLINE_PASSED",
                        "Cannot cancel registration after the deadline",
                    )
                )

            if event.status == EventStatus.completed:
                return Return.err(
                    Error(ErrorKind.INVALID_STATE, "EVENT_COMPLETED", f"{label} has already been completed")
                )

            await self.uow.participants.delete(registration)
            await self.uow.commit()

            logger.info("User %s cancelled registration for %s", identity.user_id, event_id)

            return Return.ok(RegistrationResponse(message="Registration cancelled"))

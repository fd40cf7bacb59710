"""
Announcement Use Cases

Audience is stored as given and applied when reading:
core viewers see all + core-team, members see all + members.
"""

import logging
from typing import List
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import core_only
from clubhub.domain.base import utcnow
from clubhub.domain.entities import Announcement, ProfileRole, TargetAudience
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import AnnouncementCommand, AnnouncementInfo, UnseenCountResponse

logger = logging.getLogger(__name__)

ANNOUNCEMENT_NOT_FOUND = Error(ErrorKind.NOT_FOUND, "ANNOUNCEMENT_NOT_FOUND", "Announcement not found")


def visible_audiences(role: ProfileRole) -> List[TargetAudience]:
    if role == ProfileRole.core:
        return [TargetAudience.all, TargetAudience.core_team]
    return [TargetAudience.all, TargetAudience.members]


def _validate(command: AnnouncementCommand):
    if not command.title.strip() or not command.content.strip():
        return Error(ErrorKind.VALIDATION, "MISSING_FIELDS", "Title and content are required")
    return None


class CreateAnnouncementUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, command: AnnouncementCommand
    ) -> Result[AnnouncementInfo]:
        error = core_only(identity) or _validate(command)
        if error:
            return Return.err(error)

        async with self.uow:
            announcement = await self.uow.announcements.create(
                Announcement(
                    title=command.title.strip(),
                    content=command.content.strip(),
                    is_important=command.is_important,
                    target_audience=command.target_audience,
                    created_by=identity.user_id,
                )
            )
            await self.uow.commit()

            logger.info("Announcement %s created by %s", announcement.id, identity.user_id)

            return Return.ok(AnnouncementInfo.from_entity(announcement))


class UpdateAnnouncementUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, announcement_id: UUID, command: AnnouncementCommand
    ) -> Result[AnnouncementInfo]:
        error = core_only(identity) or _validate(command)
        if error:
            return Return.err(error)

        async with self.uow:
            announcement = await self.uow.announcements.get_by_id(announcement_id)
            if announcement is None:
                return Return.err(ANNOUNCEMENT_NOT_FOUND)

            announcement.title = command.title.strip()
            announcement.content = command.content.strip()
            announcement.is_important = command.is_important
            announcement.target_audience = command.target_audience
            announcement.updated_by = identity.user_id
            announcement.updated_at = utcnow()
            announcement = await self.uow.announcements.update(announcement)

            await self.uow.commit()

            return Return.ok(AnnouncementInfo.from_entity(announcement))


class DeleteAnnouncementUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, announcement_id: UUID) -> Result[None]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            announcement = await self.uow.announcements.get_by_id(announcement_id)
            if announcement is None:
                return Return.err(ANNOUNCEMENT_NOT_FOUND)

            await self.uow.announcements.delete(announcement)
            await self.uow.commit()

            logger.info("Announcement %s deleted by %s", announcement_id, identity.user_id)

            return Return.ok()


class ListAnnouncementsUseCase:
    """
    Announcements visible to the caller, newest first.

    With manage=True (core only) every announcement is returned.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, manage: bool = False
    ) -> Result[List[AnnouncementInfo]]:
        if manage:
            error = core_only(identity)
            if error:
                return Return.err(error)

        async with self.uow:
            audiences = None if manage else visible_audiences(identity.role)
            announcements = await self.uow.announcements.list_all(audiences)
            return Return.ok([AnnouncementInfo.from_entity(a) for a in announcements])


class GetUnseenCountUseCase:
    """Visible announcements created after the caller last marked them seen"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity) -> Result[UnseenCountResponse]:
        async with self.uow:
            profile = await self.uow.profiles.get_by_id(identity.user_id)
            if profile is None:
                return Return.err(
                    Error(ErrorKind.UNAUTHORIZED, "PROFILE_NOT_FOUND", "Profile not found")
                )

            count = await self.uow.announcements.count_since(
                visible_audiences(profile.role), profile.last_seen_announcement_at
            )
            return Return.ok(UnseenCountResponse(count=count))


class MarkAnnouncementsSeenUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity) -> Result[UnseenCountResponse]:
        async with self.uow:
            profile = await self.uow.profiles.get_by_id(identity.user_id)
            if profile is None:
                return Return.err(
                    Error(ErrorKind.UNAUTHORIZED, "PROFILE_NOT_FOUND", "Profile not found")
                )

            profile.last_seen_announcement_at = utcnow()
            await self.uow.profiles.update(profile)
            await self.uow.commit()

            return Return.ok(UnseenCountResponse(count=0))

"""
Profile Role Use Cases

Changing a profile's access role and its club position.
"""

from typing import Optional
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import core_only
from clubhub.domain.entities import ProfileRole
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import ProfileInfo

PROFILE_NOT_FOUND = Error(ErrorKind.NOT_FOUND, "PROFILE_NOT_FOUND", "Profile not found")


class UpdateProfileRoleUseCase:
    """
    Business Rules:
    - Core team only
    - is_core_team follows role == core
    - The new role applies from the next request (role is re-read per request)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, profile_id: UUID, role: ProfileRole
    ) -> Result[ProfileInfo]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            profile = await self.uow.profiles.get_by_id(profile_id)
            if profile is None:
                return Return.err(PROFILE_NOT_FOUND)

            profile.role = role
            profile.is_core_team = role == ProfileRole.core
            profile = await self.uow.profiles.update(profile)

            await self.uow.commit()

            return Return.ok(ProfileInfo.from_entity(profile))


class AssignMemberRoleUseCase:
    """Set the club position (president, secretary, ...) of a profile"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, profile_id: UUID, member_role: Optional[str]
    ) -> Result[ProfileInfo]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            profile = await self.uow.profiles.get_by_id(profile_id)
            if profile is None:
                return Return.err(PROFILE_NOT_FOUND)

            profile.member_role = member_role.strip().lower() if member_role else None
            profile = await self.uow.profiles.update(profile)

            await self.uow.commit()

            return Return.ok(ProfileInfo.from_entity(profile))

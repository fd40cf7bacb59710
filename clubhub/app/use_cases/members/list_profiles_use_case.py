from typing import List, Optional

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import core_only
from clubhub.domain.entities import ProfileRole
from clubhub.libs.result import Result, Return

from .dtos import ProfileInfo


class ListProfilesUseCase:
    """List all profiles for the core team, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, role: Optional[ProfileRole] = None
    ) -> Result[List[ProfileInfo]]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            profiles = await self.uow.profiles.list_all(role)
            return Return.ok([ProfileInfo.from_entity(p) for p in profiles])

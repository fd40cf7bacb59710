from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.team_registration_repository import ITeamRegistrationRepository
from clubhub.domain.entities import TeamRegistration


class TeamRegistrationRepository(ITeamRegistrationRepository):
    """TeamRegistration repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_team(self, team_id: UUID) -> Optional[TeamRegistration]:
        stmt = select(TeamRegistration).where(TeamRegistration.team_id == team_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_event(self, event_id: UUID) -> List[TeamRegistration]:
        stmt = select(TeamRegistration).where(TeamRegistration.event_id == event_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, registration: TeamRegistration) -> TeamRegistration:
        self.session.add(registration)
        await self.session.flush()
        await self.session.refresh(registration)
        return registration

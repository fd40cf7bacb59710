from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.application_repository import IApplicationRepository
from clubhub.domain.entities import ApplicationStatus, TeamApplication


class ApplicationRepository(IApplicationRepository):
    """TeamApplication repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, application_id: UUID) -> Optional[TeamApplication]:
        stmt = select(TeamApplication).where(TeamApplication.id == application_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending(self, team_id: UUID, user_id: UUID) -> Optional[TeamApplication]:
        stmt = select(TeamApplication).where(
            TeamApplication.team_id == team_id,
            TeamApplication.user_id == user_id,
            TeamApplication.status == ApplicationStatus.pending,
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_by_user(
        self, user_id: UUID, event_id: Optional[UUID] = None
    ) -> List[TeamApplication]:
        stmt = select(TeamApplication).where(TeamApplication.user_id == user_id)
        if event_id is not None:
            stmt = stmt.where(TeamApplication.event_id == event_id)
        stmt = stmt.order_by(col(TeamApplication.created_at).desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_pending_by_teams(self, team_ids: List[UUID]) -> List[TeamApplication]:
        if not team_ids:
            return []
        stmt = (
            select(TeamApplication)
            .where(
                col(TeamApplication.team_id).in_(team_ids),
                TeamApplication.status == ApplicationStatus.pending,
            )
            .order_by(col(TeamApplication.created_at).desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, application: TeamApplication) -> TeamApplication:
        self.session.add(application)
        await self.session.flush()
        await self.session.refresh(application)
        return application

    async def update(self, application: TeamApplication) -> TeamApplication:
        self.session.add(application)
        await self.session.flush()
        await self.session.refresh(application)
        return application

    async def delete(self, application: TeamApplication) -> None:
        await self.session.delete(application)
        await self.session.flush()

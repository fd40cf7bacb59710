from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.errors import DuplicateRecordError
from clubhub.app.repositories.team_repository import ITeamRepository
from clubhub.domain.entities import Team


class TeamRepository(ITeamRepository):
    """Team repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, team_id: UUID) -> Optional[Team]:
        stmt = select(Team).where(Team.id == team_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_event_and_name(self, event_id: UUID, name: str) -> Optional[Team]:
        stmt = select(Team).where(Team.event_id == event_id, Team.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_ids(self, team_ids: List[UUID]) -> List[Team]:
        if not team_ids:
            return []
        stmt = select(Team).where(col(Team.id).in_(team_ids))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_event(self, event_id: UUID) -> List[Team]:
        stmt = select(Team).where(Team.event_id == event_id).order_by(col(Team.created_at))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_leader(self, leader_id: UUID) -> List[Team]:
        stmt = select(Team).where(Team.leader_id == leader_id).order_by(col(Team.created_at).desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_ranked(self, limit: int) -> List[Team]:
        stmt = select(Team).order_by(col(Team.points).desc(), col(Team.name)).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_tournament(self, tournament_id: UUID) -> List[Team]:
        stmt = (
            select(Team)
            .where(Team.tournament_id == tournament_id)
            .order_by(col(Team.points).desc(), col(Team.name))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, team: Team) -> Team:
        self.session.add(team)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateRecordError(str(exc.orig)) from exc
        await self.session.refresh(team)
        return team

    async def update(self, team: Team) -> Team:
        self.session.add(team)
        await self.session.flush()
        await self.session.refresh(team)
        return team

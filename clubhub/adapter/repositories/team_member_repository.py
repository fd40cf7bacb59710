from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.team_member_repository import ITeamMemberRepository
from clubhub.domain.entities import TeamMember


class TeamMemberRepository(ITeamMemberRepository):
    """TeamMember repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, team_id: UUID, member_id: UUID) -> Optional[TeamMember]:
        stmt = select(TeamMember).where(
            TeamMember.team_id == team_id,
            TeamMember.member_id == member_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_team(self, team_id: UUID) -> List[TeamMember]:
        stmt = select(TeamMember).where(TeamMember.team_id == team_id).order_by(col(TeamMember.joined_at))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_member(self, member_id: UUID) -> List[TeamMember]:
        stmt = select(TeamMember).where(TeamMember.member_id == member_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_member_ids(self, team_ids: List[UUID]) -> List[UUID]:
        if not team_ids:
            return []
        stmt = select(TeamMember.member_id).where(col(TeamMember.team_id).in_(team_ids))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_team(self, team_id: UUID) -> int:
        stmt = select(func.count()).select_from(TeamMember).where(TeamMember.team_id == team_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, member: TeamMember) -> TeamMember:
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member

from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.tournament_repository import ITournamentRepository
from clubhub.domain.entities import Tournament


class TournamentRepository(ITournamentRepository):
    """Tournament repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, tournament_id: UUID) -> Optional[Tournament]:
        stmt = select(Tournament).where(Tournament.id == tournament_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Tournament]:
        stmt = select(Tournament).order_by(col(Tournament.created_at).desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, tournament: Tournament) -> Tournament:
        self.session.add(tournament)
        await self.session.flush()
        await self.session.refresh(tournament)
        return tournament

    async def update(self, tournament: Tournament) -> Tournament:
        self.session.add(tournament)
        await self.session.flush()
        await self.session.refresh(tournament)
        return tournament

    async def delete(self, tournament: Tournament) -> None:
        await self.session.delete(tournament)
        await self.session.flush()

from typing import List
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.event_winner_repository import IEventWinnerRepository
from clubhub.domain.entities import EventWinner


class EventWinnerRepository(IEventWinnerRepository):
    """EventWinner repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_event(self, event_id: UUID) -> List[EventWinner]:
        stmt = (
            select(EventWinner)
            .where(EventWinner.event_id == event_id)
            .order_by(col(EventWinner.position))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, winner: EventWinner) -> EventWinner:
        self.session.add(winner)
        await self.session.flush()
        await self.session.refresh(winner)
        return winner

    async def delete_by_event(self, event_id: UUID) -> None:
        await self.session.execute(delete(EventWinner).where(EventWinner.event_id == event_id))

from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.event_repository import IEventRepository
from clubhub.domain.entities import Event, EventMode, EventStatus


class EventRepository(IEventRepository):
    """Event repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _filtered(self, stmt, mode: Optional[EventMode], statuses: Optional[List[EventStatus]]):
        if mode is not None:
            stmt = stmt.where(Event.mode == mode)
        if statuses:
            stmt = stmt.where(col(Event.status).in_(statuses))
        return stmt

    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        stmt = select(Event).where(Event.id == event_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(
        self,
        mode: Optional[EventMode] = None,
        statuses: Optional[List[EventStatus]] = None,
    ) -> List[Event]:
        stmt = self._filtered(select(Event), mode, statuses)
        stmt = stmt.order_by(col(Event.start_date))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_ids(self, event_ids: List[UUID]) -> List[Event]:
        if not event_ids:
            return []
        stmt = select(Event).where(col(Event.id).in_(event_ids))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(
        self,
        mode: Optional[EventMode] = None,
        statuses: Optional[List[EventStatus]] = None,
    ) -> int:
        stmt = self._filtered(select(func.count()).select_from(Event), mode, statuses)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_tournament(self, tournament_id: UUID) -> int:
        stmt = select(func.count()).select_from(Event).where(Event.tournament_id == tournament_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, event: Event) -> Event:
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def update(self, event: Event) -> Event:
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def delete(self, event: Event) -> None:
        await self.session.delete(event)
        await self.session.flush()

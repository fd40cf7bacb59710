from typing import List
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.workshop_host_repository import IWorkshopHostRepository
from clubhub.domain.entities import WorkshopHost


class WorkshopHostRepository(IWorkshopHostRepository):
    """WorkshopHost repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_event(self, event_id: UUID) -> List[WorkshopHost]:
        stmt = select(WorkshopHost).where(WorkshopHost.event_id == event_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, host: WorkshopHost) -> WorkshopHost:
        self.session.add(host)
        await self.session.flush()
        await self.session.refresh(host)
        return host

    async def delete_by_event(self, event_id: UUID) -> None:
        await self.session.execute(delete(WorkshopHost).where(WorkshopHost.event_id == event_id))

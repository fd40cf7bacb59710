from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.announcement_repository import IAnnouncementRepository
from clubhub.domain.entities import Announcement, TargetAudience


class AnnouncementRepository(IAnnouncementRepository):
    """Announcement repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, announcement_id: UUID) -> Optional[Announcement]:
        stmt = select(Announcement).where(Announcement.id == announcement_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(
        self, audiences: Optional[List[TargetAudience]] = None
    ) -> List[Announcement]:
        stmt = select(Announcement)
        if audiences is not None:
            stmt = stmt.where(col(Announcement.target_audience).in_(audiences))
        stmt = stmt.order_by(col(Announcement.created_at).desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_since(
        self, audiences: List[TargetAudience], since: Optional[datetime]
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(Announcement)
            .where(col(Announcement.target_audience).in_(audiences))
        )
        if since is not None:
            stmt = stmt.where(col(Announcement.created_at) > since)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, announcement: Announcement) -> Announcement:
        self.session.add(announcement)
        await self.session.flush()
        await self.session.refresh(announcement)
        return announcement

    async def update(self, announcement: Announcement) -> Announcement:
        self.session.add(announcement)
        await self.session.flush()
        await self.session.refresh(announcement)
        return announcement

    async def delete(self, announcement: Announcement) -> None:
        await self.session.delete(announcement)
        await self.session.flush()

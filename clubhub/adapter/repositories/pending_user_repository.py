from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.pending_user_repository import IPendingUserRepository
from clubhub.domain.entities import PendingUser


class PendingUserRepository(IPendingUserRepository):
    """PendingUser repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, pending_user_id: UUID) -> Optional[PendingUser]:
        stmt = select(PendingUser).where(PendingUser.id == pending_user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[PendingUser]:
        stmt = select(PendingUser).where(PendingUser.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[PendingUser]:
        stmt = select(PendingUser).order_by(col(PendingUser.created_at).desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, pending_user: PendingUser) -> PendingUser:
        self.session.add(pending_user)
        await self.session.flush()
        await self.session.refresh(pending_user)
        return pending_user

    async def update(self, pending_user: PendingUser) -> PendingUser:
        self.session.add(pending_user)
        await self.session.flush()
        await self.session.refresh(pending_user)
        return pending_user

    async def delete(self, pending_user: PendingUser) -> None:
        await self.session.delete(pending_user)
        await self.session.flush()

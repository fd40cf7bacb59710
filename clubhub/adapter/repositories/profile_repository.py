from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.profile_repository import IProfileRepository
from clubhub.domain.entities import Profile, ProfileRole


class ProfileRepository(IProfileRepository):
    """Profile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, profile_id: UUID) -> Optional[Profile]:
        stmt = select(Profile).where(Profile.id == profile_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Profile]:
        stmt = select(Profile).where(Profile.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self, role: Optional[ProfileRole] = None) -> List[Profile]:
        stmt = select(Profile)
        if role is not None:
            stmt = stmt.where(Profile.role == role)
        stmt = stmt.order_by(col(Profile.created_at).desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_invitable(self, excluded_ids: List[UUID]) -> List[Profile]:
        stmt = select(Profile).where(Profile.role != ProfileRole.core)
        if excluded_ids:
            stmt = stmt.where(col(Profile.id).not_in(excluded_ids))
        stmt = stmt.order_by(col(Profile.full_name))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_role(self, role: ProfileRole) -> int:
        stmt = select(func.count()).select_from(Profile).where(Profile.role == role)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, profile: Profile) -> Profile:
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile

    async def update(self, profile: Profile) -> Profile:
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile

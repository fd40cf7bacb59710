from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.invitation_repository import IInvitationRepository
from clubhub.domain.entities import InvitationStatus, TeamInvitation


class InvitationRepository(IInvitationRepository):
    """TeamInvitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[TeamInvitation]:
        stmt = select(TeamInvitation).where(TeamInvitation.id == invitation_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_team(self, team_id: UUID) -> List[TeamInvitation]:
        stmt = (
            select(TeamInvitation)
            .where(TeamInvitation.team_id == team_id)
            .order_by(col(TeamInvitation.created_at).desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_team_and_invitee(
        self, team_id: UUID, invitee_id: UUID
    ) -> List[TeamInvitation]:
        stmt = select(TeamInvitation).where(
            TeamInvitation.team_id == team_id,
            TeamInvitation.invitee_id == invitee_id,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_pending_by_invitee(self, invitee_id: UUID) -> List[TeamInvitation]:
        stmt = (
            select(TeamInvitation)
            .where(
                TeamInvitation.invitee_id == invitee_id,
                TeamInvitation.status == InvitationStatus.pending,
            )
            .order_by(col(TeamInvitation.created_at).desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, invitation: TeamInvitation) -> TeamInvitation:
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: TeamInvitation) -> TeamInvitation:
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def delete_by_team_and_invitee(self, team_id: UUID, invitee_id: UUID) -> None:
        await self.session.execute(
            delete(TeamInvitation).where(
                TeamInvitation.team_id == team_id,
                TeamInvitation.invitee_id == invitee_id,
            )
        )

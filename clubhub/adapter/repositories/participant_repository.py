from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func, insert, literal
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.errors import DuplicateRecordError
from clubhub.app.repositories.participant_repository import IParticipantRepository
from clubhub.domain.entities import Event, EventMode, EventParticipant

_INSERT_COLUMNS = (
    "id",
    "event_id",
    "user_id",
    "name",
    "email",
    "status",
    "attended",
    "registered_at",
)


class ParticipantRepository(IParticipantRepository):
    """EventParticipant repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, participant_id: UUID) -> Optional[EventParticipant]:
        stmt = select(EventParticipant).where(EventParticipant.id == participant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_event_and_user(
        self, event_id: UUID, user_id: UUID
    ) -> Optional[EventParticipant]:
        stmt = select(EventParticipant).where(
            EventParticipant.event_id == event_id,
            EventParticipant.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_event(
        self, event_id: UUID, order_by_name: bool = False
    ) -> List[EventParticipant]:
        stmt = select(EventParticipant).where(EventParticipant.event_id == event_id)
        if order_by_name:
            stmt = stmt.order_by(col(EventParticipant.name))
        else:
            stmt = stmt.order_by(col(EventParticipant.registered_at).desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_user(self, user_id: UUID) -> List[EventParticipant]:
        stmt = (
            select(EventParticipant)
            .where(EventParticipant.user_id == user_id)
            .order_by(col(EventParticipant.registered_at).desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_event(self, event_id: UUID, attended: Optional[bool] = None) -> int:
        stmt = (
            select(func.count())
            .select_from(EventParticipant)
            .where(EventParticipant.event_id == event_id)
        )
        if attended is not None:
            stmt = stmt.where(EventParticipant.attended == attended)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_user(
        self,
        user_id: UUID,
        mode: Optional[EventMode] = None,
        attended: Optional[bool] = None,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(EventParticipant)
            .where(EventParticipant.user_id == user_id)
        )
        if mode is not None:
            stmt = stmt.join(Event, Event.id == EventParticipant.event_id).where(
                Event.mode == mode
            )
        if attended is not None:
            stmt = stmt.where(EventParticipant.attended == attended)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create_within_capacity(
        self, participant: EventParticipant, max_participants: int
    ) -> bool:
        table = EventParticipant.__table__

        current_count = (
            select(func.count())
            .select_from(table)
            .where(table.c.event_id == participant.event_id)
            .correlate(None)
            .scalar_subquery()
        )
        row = select(
            *[literal(getattr(participant, name), table.c[name].type) for name in _INSERT_COLUMNS]
        ).where(current_count < max_participants)
        stmt = insert(table).from_select(list(_INSERT_COLUMNS), row)

        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise DuplicateRecordError(str(exc.orig)) from exc

        return result.rowcount == 1

    async def update(self, participant: EventParticipant) -> EventParticipant:
        self.session.add(participant)
        await self.session.flush()
        await self.session.refresh(participant)
        return participant

    async def delete(self, participant: EventParticipant) -> None:
        await self.session.delete(participant)
        await self.session.flush()

    async def delete_by_event(self, event_id: UUID) -> None:
        await self.session.execute(
            delete(EventParticipant).where(EventParticipant.event_id == event_id)
        )

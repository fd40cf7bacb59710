from typing import List
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.app.repositories.audit_log_repository import IAuditLogRepository
from clubhub.domain.entities import EventAuditLog


class AuditLogRepository(IAuditLogRepository):
    """EventAuditLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_log: EventAuditLog) -> EventAuditLog:
        self.session.add(audit_log)
        await self.session.flush()
        await self.session.refresh(audit_log)
        return audit_log

    async def list_recent(self, limit: int = 10) -> List[EventAuditLog]:
        stmt = select(EventAuditLog).order_by(col(EventAuditLog.performed_at).desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_by_event(self, event_id: UUID) -> None:
        await self.session.execute(delete(EventAuditLog).where(EventAuditLog.event_id == event_id))

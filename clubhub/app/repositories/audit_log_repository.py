from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from clubhub.domain.entities import EventAuditLog


class IAuditLogRepository(ABC):
    """EventAuditLog repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_log: EventAuditLog) -> EventAuditLog:
        """Create a new audit log row (immutable)"""
        pass

    @abstractmethod
    async def list_recent(self, limit: int = 10) -> List[EventAuditLog]:
        """List the most recent audit rows, newest first"""
        pass

    @abstractmethod
    async def delete_by_event(self, event_id: UUID) -> None:
        """Delete audit rows of a deleted workshop"""
        pass

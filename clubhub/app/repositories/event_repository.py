from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from clubhub.domain.entities import Event, EventMode, EventStatus


class IEventRepository(ABC):
    """Event repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID"""
        pass

    @abstractmethod
    async def list_all(
        self,
        mode: Optional[EventMode] = None,
        statuses: Optional[List[EventStatus]] = None,
    ) -> List[Event]:
        """List events ordered by start date, optionally filtered"""
        pass

    @abstractmethod
    async def list_by_ids(self, event_ids: List[UUID]) -> List[Event]:
        """List events by IDs"""
        pass

    @abstractmethod
    async def count(
        self,
        mode: Optional[EventMode] = None,
        statuses: Optional[List[EventStatus]] = None,
    ) -> int:
        """Count events, optionally filtered"""
        pass

    @abstractmethod
    async def count_by_tournament(self, tournament_id: UUID) -> int:
        """Count events that belong to a tournament"""
        pass

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Create a new event"""
        pass

    @abstractmethod
    async def update(self, event: Event) -> Event:
        """Update existing event"""
        pass

    @abstractmethod
    async def delete(self, event: Event) -> None:
        """Delete an event"""
        pass

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from clubhub.domain.entities import EventWinner


class IEventWinnerRepository(ABC):
    """EventWinner repository interface - application layer"""

    @abstractmethod
    async def list_by_event(self, event_id: UUID) -> List[EventWinner]:
        """List winners of an event by position"""
        pass

    @abstractmethod
    async def create(self, winner: EventWinner) -> EventWinner:
        """Create a new winner row"""
        pass

    @abstractmethod
    async def delete_by_event(self, event_id: UUID) -> None:
        """Delete every winner row of an event"""
        pass

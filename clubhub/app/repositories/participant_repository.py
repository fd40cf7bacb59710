from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from clubhub.domain.entities import EventMode, EventParticipant


class IParticipantRepository(ABC):
    """EventParticipant repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, participant_id: UUID) -> Optional[EventParticipant]:
        """Get registration by ID"""
        pass

    @abstractmethod
    async def get_by_event_and_user(
        self, event_id: UUID, user_id: UUID
    ) -> Optional[EventParticipant]:
        """Get a user's registration for an event"""
        pass

    @abstractmethod
    async def list_by_event(
        self, event_id: UUID, order_by_name: bool = False
    ) -> List[EventParticipant]:
        """List registrations of an event, newest first or by name"""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: UUID) -> List[EventParticipant]:
        """List a user's registrations, newest first"""
        pass

    @abstractmethod
    async def count_by_event(self, event_id: UUID, attended: Optional[bool] = None) -> int:
        """Count registrations of an event"""
        pass

    @abstractmethod
    async def count_by_user(
        self,
        user_id: UUID,
        mode: Optional[EventMode] = None,
        attended: Optional[bool] = None,
    ) -> int:
        """Count a user's registrations, optionally by event mode and attendance"""
        pass

    @abstractmethod
    async def create_within_capacity(
        self, participant: EventParticipant, max_participants: int
    ) -> bool:
        """
        Insert the registration only while the event has fewer than
        max_participants rows, as a single conditional statement.

        Returns:
            True if the row was inserted, False if the event was full

        Raises:
            DuplicateRecordError: the user is already registered
        """
        pass

    @abstractmethod
    async def update(self, participant: EventParticipant) -> EventParticipant:
        """Update existing registration"""
        pass

    @abstractmethod
    async def delete(self, participant: EventParticipant) -> None:
        """Hard-delete a registration"""
        pass

    @abstractmethod
    async def delete_by_event(self, event_id: UUID) -> None:
        """Delete every registration of an event"""
        pass

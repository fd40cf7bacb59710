from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from clubhub.domain.entities import WorkshopHost


class IWorkshopHostRepository(ABC):
    """WorkshopHost repository interface - application layer"""

    @abstractmethod
    async def list_by_event(self, event_id: UUID) -> List[WorkshopHost]:
        """List hosts of a workshop"""
        pass

    @abstractmethod
    async def create(self, host: WorkshopHost) -> WorkshopHost:
        """Create a new host"""
        pass

    @abstractmethod
    async def delete_by_event(self, event_id: UUID) -> None:
        """Delete all hosts of a workshop"""
        pass

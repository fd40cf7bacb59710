from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from clubhub.domain.entities import Announcement, TargetAudience


class IAnnouncementRepository(ABC):
    """Announcement repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, announcement_id: UUID) -> Optional[Announcement]:
        """Get announcement by ID"""
        pass

    @abstractmethod
    async def list_all(
        self, audiences: Optional[List[TargetAudience]] = None
    ) -> List[Announcement]:
        """List announcements newest first, optionally restricted to audiences"""
        pass

    @abstractmethod
    async def count_since(
        self, audiences: List[TargetAudience], since: Optional[datetime]
    ) -> int:
        """Count announcements for audiences created after since (all when None)"""
        pass

    @abstractmethod
    async def create(self, announcement: Announcement) -> Announcement:
        """Create a new announcement"""
        pass

    @abstractmethod
    async def update(self, announcement: Announcement) -> Announcement:
        """Update existing announcement"""
        pass

    @abstractmethod
    async def delete(self, announcement: Announcement) -> None:
        """Delete an announcement"""
        pass

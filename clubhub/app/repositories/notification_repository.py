from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from clubhub.domain.entities import Notification


class INotificationRepository(ABC):
    """Notification repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, notification_id: UUID) -> Optional[Notification]:
        """Get notification by ID"""
        pass

    @abstractmethod
    async def list_by_recipient(self, recipient_id: UUID, limit: int = 50) -> List[Notification]:
        """List a user's notifications, newest first"""
        pass

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        pass

    @abstractmethod
    async def update(self, notification: Notification) -> Notification:
        """Update existing notification"""
        pass

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from clubhub.domain.entities import PendingUser


class IPendingUserRepository(ABC):
    """PendingUser repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, pending_user_id: UUID) -> Optional[PendingUser]:
        """Get pending user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[PendingUser]:
        """Get pending user by email"""
        pass

    @abstractmethod
    async def list_all(self) -> List[PendingUser]:
        """List pending users, newest first"""
        pass

    @abstractmethod
    async def create(self, pending_user: PendingUser) -> PendingUser:
        """Create a new pending user"""
        pass

    @abstractmethod
    async def update(self, pending_user: PendingUser) -> PendingUser:
        """Update existing pending user"""
        pass

    @abstractmethod
    async def delete(self, pending_user: PendingUser) -> None:
        """Delete a pending user"""
        pass

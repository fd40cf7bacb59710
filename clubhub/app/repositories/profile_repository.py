from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from clubhub.domain.entities import Profile, ProfileRole


class IProfileRepository(ABC):
    """Profile repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, profile_id: UUID) -> Optional[Profile]:
        """Get profile by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Profile]:
        """Get profile by email"""
        pass

    @abstractmethod
    async def list_all(self, role: Optional[ProfileRole] = None) -> List[Profile]:
        """List profiles, newest first, optionally filtered by role"""
        pass

    @abstractmethod
    async def list_invitable(self, excluded_ids: List[UUID]) -> List[Profile]:
        """List non-core profiles whose id is not in excluded_ids"""
        pass

    @abstractmethod
    async def count_by_role(self, role: ProfileRole) -> int:
        """Count profiles with the given role"""
        pass

    @abstractmethod
    async def create(self, profile: Profile) -> Profile:
        """Create a new profile"""
        pass

    @abstractmethod
    async def update(self, profile: Profile) -> Profile:
        """Update existing profile"""
        pass

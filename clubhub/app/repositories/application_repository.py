from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from clubhub.domain.entities import TeamApplication


class IApplicationRepository(ABC):
    """TeamApplication repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[TeamApplication]:
        """Get application by ID"""
        pass

    @abstractmethod
    async def get_pending(self, team_id: UUID, user_id: UUID) -> Optional[TeamApplication]:
        """Get a user's pending application to a team"""
        pass

    @abstractmethod
    async def list_by_user(
        self, user_id: UUID, event_id: Optional[UUID] = None
    ) -> List[TeamApplication]:
        """List a user's applications, newest first"""
        pass

    @abstractmethod
    async def list_pending_by_teams(self, team_ids: List[UUID]) -> List[TeamApplication]:
        """List pending applications to the given teams"""
        pass

    @abstractmethod
    async def create(self, application: TeamApplication) -> TeamApplication:
        """Create a new application"""
        pass

    @abstractmethod
    async def update(self, application: TeamApplication) -> TeamApplication:
        """Update existing application"""
        pass

    @abstractmethod
    async def delete(self, application: TeamApplication) -> None:
        """Hard-delete an application"""
        pass

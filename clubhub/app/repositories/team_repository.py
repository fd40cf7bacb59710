from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from clubhub.domain.entities import Team


class ITeamRepository(ABC):
    """Team repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, team_id: UUID) -> Optional[Team]:
        """Get team by ID"""
        pass

    @abstractmethod
    async def get_by_event_and_name(self, event_id: UUID, name: str) -> Optional[Team]:
        """Get team of an event by name"""
        pass

    @abstractmethod
    async def list_by_ids(self, team_ids: List[UUID]) -> List[Team]:
        """List teams by IDs"""
        pass

    @abstractmethod
    async def list_by_event(self, event_id: UUID) -> List[Team]:
        """List teams of an event"""
        pass

    @abstractmethod
    async def list_by_leader(self, leader_id: UUID) -> List[Team]:
        """List teams led by a user"""
        pass

    @abstractmethod
    async def list_ranked(self, limit: int) -> List[Team]:
        """List teams ordered by points desc, then name"""
        pass

    @abstractmethod
    async def list_by_tournament(self, tournament_id: UUID) -> List[Team]:
        """List teams of a tournament ordered by points desc, then name"""
        pass

    @abstractmethod
    async def create(self, team: Team) -> Team:
        """Create a new team"""
        pass

    @abstractmethod
    async def update(self, team: Team) -> Team:
        """Update existing team"""
        pass

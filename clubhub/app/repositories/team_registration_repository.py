from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from clubhub.domain.entities import TeamRegistration


class ITeamRegistrationRepository(ABC):
    """TeamRegistration repository interface - application layer"""

    @abstractmethod
    async def get_by_team(self, team_id: UUID) -> Optional[TeamRegistration]:
        """Get the registration of a team"""
        pass

    @abstractmethod
    async def list_by_event(self, event_id: UUID) -> List[TeamRegistration]:
        """List team registrations of an event"""
        pass

    @abstractmethod
    async def create(self, registration: TeamRegistration) -> TeamRegistration:
        """Register a team for its event"""
        pass

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from clubhub.domain.entities import TeamMember


class ITeamMemberRepository(ABC):
    """TeamMember repository interface - application layer"""

    @abstractmethod
    async def get(self, team_id: UUID, member_id: UUID) -> Optional[TeamMember]:
        """Get a membership row"""
        pass

    @abstractmethod
    async def list_by_team(self, team_id: UUID) -> List[TeamMember]:
        """List members of a team"""
        pass

    @abstractmethod
    async def list_by_member(self, member_id: UUID) -> List[TeamMember]:
        """List a user's team memberships"""
        pass

    @abstractmethod
    async def list_member_ids(self, team_ids: List[UUID]) -> List[UUID]:
        """List member ids across the given teams (flattened)"""
        pass

    @abstractmethod
    async def count_by_team(self, team_id: UUID) -> int:
        """Count members of a team"""
        pass

    @abstractmethod
    async def create(self, member: TeamMember) -> TeamMember:
        """Add a member to a team"""
        pass

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from clubhub.domain.entities import TeamInvitation


class IInvitationRepository(ABC):
    """TeamInvitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[TeamInvitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def list_by_team(self, team_id: UUID) -> List[TeamInvitation]:
        """List all invitations of a team, newest first"""
        pass

    @abstractmethod
    async def list_by_team_and_invitee(
        self, team_id: UUID, invitee_id: UUID
    ) -> List[TeamInvitation]:
        """List every invitation row for (team, invitee)"""
        pass

    @abstractmethod
    async def list_pending_by_invitee(self, invitee_id: UUID) -> List[TeamInvitation]:
        """List persisted-pending invitations addressed to a user, newest first"""
        pass

    @abstractmethod
    async def create(self, invitation: TeamInvitation) -> TeamInvitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: TeamInvitation) -> TeamInvitation:
        """Update existing invitation"""
        pass

    @abstractmethod
    async def delete_by_team_and_invitee(self, team_id: UUID, invitee_id: UUID) -> None:
        """Delete every invitation row for (team, invitee)"""
        pass

"""
Team Workflow DTOs

Commands and responses for teams, invitations, applications and
notifications.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from clubhub.domain.entities import TeamInvitation


# ============================================================================
# Command DTOs
# ============================================================================


class CreateTeamCommand(BaseModel):
    event_id: UUID
    name: str
    description: Optional[str] = None
    member_ids: List[UUID] = Field(default_factory=list)


# ============================================================================
# Response DTOs
# ============================================================================


class TeamInfo(BaseModel):
    id: str
    name: str
    description: Optional[str]
    leader_id: str
    event_id: Optional[str]
    points: int
    member_count: int
    is_registered: bool


class CreateTeamResponse(BaseModel):
    team: TeamInfo
    invitations_sent: int


class InvitationResponse(BaseModel):
    invitation_id: str
    status: str
    expires_at: str


class InvitationInfo(BaseModel):
    id: str
    team_id: str
    team_name: Optional[str]
    inviter_id: str
    inviter_name: Optional[str]
    invitee_id: str
    invitee_name: Optional[str]
    status: str
    created_at: str
    expires_at: str
    responded_at: Optional[str]

    @classmethod
    def build(
        cls,
        invitation: TeamInvitation,
        status: str,
        team_name: Optional[str] = None,
        inviter_name: Optional[str] = None,
        invitee_name: Optional[str] = None,
    ) -> "InvitationInfo":
        return cls(
            id=str(invitation.id),
            team_id=str(invitation.team_id),
            team_name=team_name,
            inviter_id=str(invitation.inviter_id),
            inviter_name=inviter_name,
            invitee_id=str(invitation.invitee_id),
            invitee_name=invitee_name,
            status=status,
            created_at=invitation.created_at.isoformat(),
            expires_at=invitation.expires_at.isoformat(),
            responded_at=invitation.responded_at.isoformat() if invitation.responded_at else None,
        )


class AvailableMember(BaseModel):
    id: str
    full_name: str
    email: str


class ApplicationInfo(BaseModel):
    id: str
    team_id: str
    team_name: Optional[str]
    user_id: str
    applicant_name: Optional[str]
    event_id: Optional[str]
    status: str
    created_at: str


class TeamNeedingMembers(BaseModel):
    id: str
    name: str
    leader_name: Optional[str]
    member_count: int
    team_size: int
    spots_left: int
    has_applied: bool


class MyTeam(BaseModel):
    id: str
    name: str
    event_id: Optional[str]
    event_title: Optional[str]
    is_leader: bool
    member_count: int
    points: int
    is_registered: bool


class NotificationInfo(BaseModel):
    id: str
    title: str
    message: str
    type: str
    read: bool
    created_at: str
    team_id: Optional[str]
    team_name: Optional[str]


class StatusResponse(BaseModel):
    status: str
    message: str

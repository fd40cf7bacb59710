"""
TeamInvitation Entity

Leader-initiated request for a member to join a team.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from clubhub.domain.base import utcnow

from .enums import InvitationStatus


class TeamInvitation(SQLModel, table=True):
    """
    TeamInvitation entity - directed invitation from a team leader.

    Business Rules:
    - First invitation expires after 7 days, a reinvite after 24 hours
    - At most one active (pending, unexpired) invitation per (team, invitee)
    - pending -> accepted | declined | cancelled; terminal states are final
    - expired is derived on read, never stored
    - Token is single-use, cryptographically secure
    """

    __tablename__ = "team_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)
    inviter_id: UUID = Field(foreign_key="profiles.id", nullable=False)
    invitee_id: UUID = Field(foreign_key="profiles.id", nullable=False, index=True)
    event_id: Optional[UUID] = Field(default=None, foreign_key="events.id")

    token: str = Field(unique=True, index=True, max_length=64)
    status: InvitationStatus = Field(default=InvitationStatus.pending)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    responded_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_team_invitation_team_invitee", "team_id", "invitee_id"),
        Index("idx_team_invitation_status", "status"),
    )

    def effective_status(self, now: datetime) -> InvitationStatus:
        if self.status == InvitationStatus.pending and now > self.expires_at:
            return InvitationStatus.expired
        return self.status

    def is_active(self, now: datetime) -> bool:
        return self.effective_status(now) == InvitationStatus.pending

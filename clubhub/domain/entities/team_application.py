"""
TeamApplication Entity

Member-initiated request to join a team.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from clubhub.domain.base import utcnow

from .enums import ApplicationStatus


class TeamApplication(SQLModel, table=True):
    """
    TeamApplication entity.

    Business Rules:
    - Withdrawable by the applicant only while pending (hard delete)
    - Accepted or rejected by the team leader only
    """

    __tablename__ = "team_applications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="profiles.id", nullable=False, index=True)
    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)
    event_id: Optional[UUID] = Field(default=None, foreign_key="events.id")

    status: ApplicationStatus = Field(default=ApplicationStatus.pending)
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_team_application_status", "status"),)

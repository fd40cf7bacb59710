"""
TeamRegistration Entity

A team entered into its event.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from clubhub.domain.base import utcnow

from .enums import ParticipantStatus


class TeamRegistration(SQLModel, table=True):
    """
    TeamRegistration entity - created once a team reaches the event's
    team_size, or immediately for tournament events.
    """

    __tablename__ = "team_registrations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)
    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)

    status: ParticipantStatus = Field(default=ParticipantStatus.registered)
    registered_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_team_registration_event_team", "event_id", "team_id", unique=True),
    )

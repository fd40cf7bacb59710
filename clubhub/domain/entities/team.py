"""
Team Entity

Group of members competing in a team event.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from clubhub.domain.base import utcnow


class Team(SQLModel, table=True):
    """
    Team entity - led by exactly one profile.

    Business Rules:
    - Name is unique per event
    - Only the leader manages invitations and applications
    - points accumulate through core-team adjustments and event wins
    """

    __tablename__ = "teams"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)

    leader_id: UUID = Field(foreign_key="profiles.id", nullable=False, index=True)
    event_id: Optional[UUID] = Field(default=None, foreign_key="events.id", index=True)
    tournament_id: Optional[UUID] = Field(default=None, foreign_key="tournaments.id", index=True)

    points: int = Field(default=0)
    is_tournament: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_team_event_name", "event_id", "name", unique=True),
        Index("idx_team_points", "points"),
    )

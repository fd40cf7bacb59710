"""
EventWinner Entity

Podium place of a completed event.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from clubhub.domain.base import utcnow


class EventWinner(SQLModel, table=True):
    """
    EventWinner entity - one row per podium position.

    Business Rules:
    - team_id is set for team events, user_id for individual events
    - points_awarded were added to the team's points and are taken back
      when the winners are declared again
    """

    __tablename__ = "event_winners"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)
    position: int
    team_id: Optional[UUID] = Field(default=None, foreign_key="teams.id")
    user_id: Optional[UUID] = Field(default=None, foreign_key="profiles.id")

    points_awarded: int = Field(default=0)
    prize: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_event_winner_position", "event_id", "position", unique=True),)

"""
Event Entity

Scheduled activity: competitive event or workshop.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from clubhub.domain.base import utcnow

from .enums import EventMode, EventStatus, EventType


class Event(SQLModel, table=True):
    """
    Event entity - events and workshops share one table, split by mode.

    Business Rules:
    - status gates every write (registration, cancellation, deletion)
    - Workshops are individual with team_size 1
    - Registration closes at registration_deadline
    """

    __tablename__ = "events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    description: str = Field(default="")

    mode: EventMode = Field(default=EventMode.event)
    type: EventType = Field(default=EventType.individual)
    status: EventStatus = Field(default=EventStatus.upcoming)

    max_participants: int = Field(default=0)
    team_size: int = Field(default=1)

    category: Optional[str] = Field(default=None, max_length=100)
    banner_url: Optional[str] = Field(default=None, max_length=500)
    meeting_link: Optional[str] = Field(default=None, max_length=500)

    is_tournament: bool = Field(default=False)
    tournament_id: Optional[UUID] = Field(default=None, foreign_key="tournaments.id", index=True)

    registration_deadline: datetime = Field(sa_column=Column(DateTime))
    start_date: datetime = Field(sa_column=Column(DateTime))
    end_date: datetime = Field(sa_column=Column(DateTime))

    created_by: Optional[UUID] = Field(default=None)
    updated_by: Optional[UUID] = Field(default=None)
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_event_mode_status", "mode", "status"),
        Index("idx_event_start_date", "start_date"),
    )

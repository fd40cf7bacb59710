"""
EventParticipant Entity

Individual registration for a workshop or an individual event.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from clubhub.domain.base import utcnow

from .enums import ParticipantStatus


class EventParticipant(SQLModel, table=True):
    """
    EventParticipant entity - one row per (event_id, user_id).

    Business Rules:
    - (event_id, user_id) must be unique
    - name/email are a snapshot of the profile at registration time
    - status becomes confirmed when attendance is recorded
    - Cancellation hard-deletes the row
    """

    __tablename__ = "event_participants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="profiles.id", nullable=False, index=True)

    name: str = Field(default="", max_length=255)
    email: str = Field(default="", max_length=255)

    status: ParticipantStatus = Field(default=ParticipantStatus.registered)
    attended: bool = Field(default=False)

    registered_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_participant_event_user", "event_id", "user_id", unique=True),
    )

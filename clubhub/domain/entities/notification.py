"""
Notification Entity

Per-user message produced by the team workflow.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from clubhub.domain.base import utcnow


class Notification(SQLModel, table=True):
    """
    Notification entity.

    team_id references the team directly so readers never have to recover
    it from the message text.
    """

    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    recipient_id: UUID = Field(foreign_key="profiles.id", nullable=False, index=True)
    team_id: Optional[UUID] = Field(default=None, foreign_key="teams.id")

    title: str = Field(max_length=255)
    message: str = Field(default="")
    type: str = Field(default="team", max_length=50)
    read: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_notification_recipient_type", "recipient_id", "type"),)

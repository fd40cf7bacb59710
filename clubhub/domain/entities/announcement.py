"""
Announcement Entity

Club-wide message with an audience.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from clubhub.domain.base import utcnow

from .enums import TargetAudience


class Announcement(SQLModel, table=True):
    """
    Announcement entity.

    Business Rules:
    - Every audience is stored the same way; filtering happens on read
    - Updates stamp updated_at/updated_by
    """

    __tablename__ = "announcements"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=255)
    content: str

    is_important: bool = Field(default=False)
    target_audience: TargetAudience = Field(default=TargetAudience.all)

    created_by: Optional[UUID] = Field(default=None)
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_by: Optional[UUID] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

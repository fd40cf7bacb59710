"""
PendingUser Entity

Approved email waiting for signup completion.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from clubhub.domain.base import utcnow

from .enums import ProfileRole


class PendingUser(SQLModel, table=True):
    """
    PendingUser entity - provisional signup record.

    Business Rules:
    - Created by a core-team approval step
    - Signup is only allowed for emails with a pending row
    - Consumed exactly once: email verification or manual promotion
    """

    __tablename__ = "pending_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    full_name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)

    role: ProfileRole = Field(default=ProfileRole.member)
    member_role: Optional[str] = Field(default=None, max_length=100)
    is_core_team: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

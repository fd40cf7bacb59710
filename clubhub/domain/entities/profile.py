"""
Profile Entity

Confirmed identity record with a platform role.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from clubhub.domain.base import utcnow

from .enums import ProfileRole


class Profile(SQLModel, table=True):
    """
    Profile entity - a confirmed member of the club.

    Business Rules:
    - Created on confirmed signup or manual promotion of a PendingUser
    - is_core_team mirrors role == core
    - Never hard-deleted
    """

    __tablename__ = "profiles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    full_name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)

    role: ProfileRole = Field(default=ProfileRole.member)
    member_role: Optional[str] = Field(default=None, max_length=100)
    is_core_team: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_seen_announcement_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_profile_role", "role"),)

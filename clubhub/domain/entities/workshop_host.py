"""
WorkshopHost Entity

Speaker attached to a workshop.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class WorkshopHost(SQLModel, table=True):
    __tablename__ = "workshop_hosts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    designation: Optional[str] = Field(default=None, max_length=255)
    profile_id: Optional[UUID] = Field(default=None)

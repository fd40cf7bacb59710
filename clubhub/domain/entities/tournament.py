"""
Tournament Entity

Season-long competition grouping events; teams collect points across it.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from clubhub.domain.base import utcnow

from .enums import TournamentStatus


class Tournament(SQLModel, table=True):
    """
    Tournament entity - events and teams point at it through tournament_id.

    Business Rules:
    - Status only moves forward (upcoming -> registration_open -> ongoing -> completed)
    - A reset zeroes the teams' points and returns it to upcoming
    - Cannot be deleted while events or teams reference it
    """

    __tablename__ = "tournaments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    description: str = Field(default="")
    year: int

    status: TournamentStatus = Field(default=TournamentStatus.upcoming)

    start_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_by: Optional[UUID] = Field(default=None)
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_tournament_year", "year"),)

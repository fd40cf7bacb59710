"""
Tournament & Event Winner DTOs
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from clubhub.app.use_cases.leaderboard import LeaderboardEntry
from clubhub.domain.entities import Tournament, TournamentStatus


class TournamentCommand(BaseModel):
    title: str
    description: str = ""
    year: int
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class TournamentStatusCommand(BaseModel):
    status: TournamentStatus


class TournamentInfo(BaseModel):
    id: str
    title: str
    description: str
    year: int
    status: str
    start_date: Optional[str]
    end_date: Optional[str]
    team_count: int = 0
    event_count: int = 0

    @classmethod
    def from_entity(
        cls, tournament: Tournament, team_count: int = 0, event_count: int = 0
    ) -> "TournamentInfo":
        return cls(
            id=str(tournament.id),
            title=tournament.title,
            description=tournament.description,
            year=tournament.year,
            status=tournament.status.value,
            start_date=tournament.start_date.isoformat() if tournament.start_date else None,
            end_date=tournament.end_date.isoformat() if tournament.end_date else None,
            team_count=team_count,
            event_count=event_count,
        )


class TournamentDetails(BaseModel):
    tournament: TournamentInfo
    leaderboard: List[LeaderboardEntry]


class WinnerInput(BaseModel):
    """A podium place; points default by position when omitted"""

    position: int
    team_id: Optional[UUID] = None
    user_id: Optional[UUID] = None
    points: Optional[int] = None
    prize: Optional[str] = None


class SetWinnersCommand(BaseModel):
    winners: List[WinnerInput] = Field(default_factory=list)


class WinnerInfo(BaseModel):
    position: int
    team_id: Optional[str]
    team_name: Optional[str] = None
    user_id: Optional[str]
    user_name: Optional[str] = None
    points_awarded: int
    prize: Optional[str]

from pydantic import BaseModel


class LeaderboardEntry(BaseModel):
    rank: int
    team_id: str
    name: str
    points: int
    member_count: int


class TeamPointsResponse(BaseModel):
    team_id: str
    points: int

from .dtos import LeaderboardEntry, TeamPointsResponse
from .leaderboard_use_case import AdjustTeamPointsUseCase, GetLeaderboardUseCase, rank_teams

__all__ = [
    "GetLeaderboardUseCase",
    "AdjustTeamPointsUseCase",
    "LeaderboardEntry",
    "TeamPointsResponse",
    "rank_teams",
]

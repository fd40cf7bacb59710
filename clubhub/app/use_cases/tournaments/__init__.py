"""
Tournament Use Cases

Tournament lifecycle, per-tournament standings and event winners.
"""

from .dtos import (
    SetWinnersCommand,
    TournamentCommand,
    TournamentDetails,
    TournamentInfo,
    TournamentStatusCommand,
    WinnerInfo,
    WinnerInput,
)
from .tournament_use_cases import (
    CreateTournamentUseCase,
    DeleteTournamentUseCase,
    GetTournamentDetailsUseCase,
    GetTournamentLeaderboardUseCase,
    ListTournamentsUseCase,
    ResetTournamentUseCase,
    UpdateTournamentStatusUseCase,
)
from .winners_use_case import ListEventWinnersUseCase, SetEventWinnersUseCase

__all__ = [
    # Use Cases
    "CreateTournamentUseCase",
    "ListTournamentsUseCase",
    "GetTournamentDetailsUseCase",
    "UpdateTournamentStatusUseCase",
    "ResetTournamentUseCase",
    "DeleteTournamentUseCase",
    "GetTournamentLeaderboardUseCase",
    "SetEventWinnersUseCase",
    "ListEventWinnersUseCase",
    # DTOs
    "TournamentCommand",
    "TournamentStatusCommand",
    "TournamentInfo",
    "TournamentDetails",
    "WinnerInput",
    "SetWinnersCommand",
    "WinnerInfo",
]

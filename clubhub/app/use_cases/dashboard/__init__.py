"""
Dashboard Use Cases
"""

from .dashboard_use_cases import (
    GetCoreStatsUseCase,
    GetMemberStatsUseCase,
    GetRecentActivityUseCase,
    GetUpcomingEventsUseCase,
)
from .dtos import ActivityItem, CoreStats, MemberStats, UpcomingEvents

__all__ = [
    "GetCoreStatsUseCase",
    "GetMemberStatsUseCase",
    "GetRecentActivityUseCase",
    "GetUpcomingEventsUseCase",
    "CoreStats",
    "MemberStats",
    "ActivityItem",
    "UpcomingEvents",
]

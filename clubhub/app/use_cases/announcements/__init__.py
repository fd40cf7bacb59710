"""
Announcement Use Cases
"""

from .announcement_use_cases import (
    CreateAnnouncementUseCase,
    DeleteAnnouncementUseCase,
    GetUnseenCountUseCase,
    ListAnnouncementsUseCase,
    MarkAnnouncementsSeenUseCase,
    UpdateAnnouncementUseCase,
    visible_audiences,
)
from .dtos import AnnouncementCommand, AnnouncementInfo, UnseenCountResponse

__all__ = [
    "CreateAnnouncementUseCase",
    "UpdateAnnouncementUseCase",
    "DeleteAnnouncementUseCase",
    "ListAnnouncementsUseCase",
    "GetUnseenCountUseCase",
    "MarkAnnouncementsSeenUseCase",
    "visible_audiences",
    "AnnouncementCommand",
    "AnnouncementInfo",
    "UnseenCountResponse",
]

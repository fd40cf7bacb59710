"""
Announcement DTOs
"""

from typing import Optional

from pydantic import BaseModel

from clubhub.domain.entities import Announcement, TargetAudience


class AnnouncementCommand(BaseModel):
    title: str
    content: str
    is_important: bool = False
    target_audience: TargetAudience = TargetAudience.all


class AnnouncementInfo(BaseModel):
    id: str
    title: str
    content: str
    is_important: bool
    target_audience: str
    created_by: Optional[str]
    created_at: str
    updated_at: Optional[str]

    @classmethod
    def from_entity(cls, announcement: Announcement) -> "AnnouncementInfo":
        return cls(
            id=str(announcement.id),
            title=announcement.title,
            content=announcement.content,
            is_important=announcement.is_important,
            target_audience=announcement.target_audience.value,
            created_by=str(announcement.created_by) if announcement.created_by else None,
            created_at=announcement.created_at.isoformat(),
            updated_at=announcement.updated_at.isoformat() if announcement.updated_at else None,
        )


class UnseenCountResponse(BaseModel):
    count: int

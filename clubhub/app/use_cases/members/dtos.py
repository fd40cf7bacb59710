"""
Member Administration DTOs
"""

from typing import Optional

from pydantic import BaseModel

from clubhub.domain.entities import PendingUser, Profile, ProfileRole


class CreatePendingUserCommand(BaseModel):
    full_name: str
    email: str
    role: ProfileRole = ProfileRole.member
    member_role: Optional[str] = None


class UpdatePendingUserCommand(BaseModel):
    full_name: Optional[str] = None
    role: Optional[ProfileRole] = None
    member_role: Optional[str] = None


class ProfileInfo(BaseModel):
    id: str
    full_name: str
    email: str
    role: str
    member_role: Optional[str]
    is_core_team: bool
    created_at: str

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileInfo":
        return cls(
            id=str(profile.id),
            full_name=profile.full_name,
            email=profile.email,
            role=profile.role.value,
            member_role=profile.member_role,
            is_core_team=profile.is_core_team,
            created_at=profile.created_at.isoformat(),
        )


class PendingUserInfo(BaseModel):
    id: str
    full_name: str
    email: str
    role: str
    member_role: Optional[str]
    created_at: str

    @classmethod
    def from_entity(cls, pending_user: PendingUser) -> "PendingUserInfo":
        return cls(
            id=str(pending_user.id),
            full_name=pending_user.full_name,
            email=pending_user.email,
            role=pending_user.role.value,
            member_role=pending_user.member_role,
            created_at=pending_user.created_at.isoformat(),
        )

"""
Member Administration Use Cases
"""

from .dtos import CreatePendingUserCommand, PendingUserInfo, ProfileInfo, UpdatePendingUserCommand
from .list_profiles_use_case import ListProfilesUseCase
from .pending_users_use_case import (
    CreatePendingUserUseCase,
    DeletePendingUserUseCase,
    ListPendingUsersUseCase,
    UpdatePendingUserUseCase,
)
from .promote_pending_user_use_case import PromotePendingUserUseCase
from .update_profile_role_use_case import AssignMemberRoleUseCase, UpdateProfileRoleUseCase

__all__ = [
    "ListProfilesUseCase",
    "ListPendingUsersUseCase",
    "CreatePendingUserUseCase",
    "UpdatePendingUserUseCase",
    "DeletePendingUserUseCase",
    "PromotePendingUserUseCase",
    "UpdateProfileRoleUseCase",
    "AssignMemberRoleUseCase",
    "CreatePendingUserCommand",
    "UpdatePendingUserCommand",
    "ProfileInfo",
    "PendingUserInfo",
]

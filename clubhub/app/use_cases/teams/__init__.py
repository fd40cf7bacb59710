"""
Team Workflow Use Cases

Team creation, invitations, applications and notifications.
"""

from .application_use_cases import (
    ApplyToTeamUseCase,
    ListMyApplicationsUseCase,
    ListTeamApplicationsUseCase,
    RespondApplicationUseCase,
    WithdrawApplicationUseCase,
)
from .available_members_use_case import GetAvailableMembersUseCase
from .create_team_use_case import CreateTeamUseCase
from .dtos import (
    ApplicationInfo,
    AvailableMember,
    CreateTeamCommand,
    CreateTeamResponse,
    InvitationInfo,
    InvitationResponse,
    MyTeam,
    NotificationInfo,
    StatusResponse,
    TeamInfo,
    TeamNeedingMembers,
)
from .invitation_use_cases import (
    CancelInvitationUseCase,
    GetTeamInvitationStatusUseCase,
    ListMyInvitationsUseCase,
    ReinviteMemberUseCase,
    RespondInvitationUseCase,
    SendInvitationUseCase,
)
from .notifications_use_case import ListNotificationsUseCase, MarkNotificationReadUseCase
from .team_queries_use_case import ListMyTeamsUseCase, ListTeamsNeedingMembersUseCase, load_my_teams

__all__ = [
    # Use Cases
    "CreateTeamUseCase",
    "SendInvitationUseCase",
    "CancelInvitationUseCase",
    "ReinviteMemberUseCase",
    "RespondInvitationUseCase",
    "GetTeamInvitationStatusUseCase",
    "ListMyInvitationsUseCase",
    "GetAvailableMembersUseCase",
    "ApplyToTeamUseCase",
    "RespondApplicationUseCase",
    "WithdrawApplicationUseCase",
    "ListMyApplicationsUseCase",
    "ListTeamApplicationsUseCase",
    "ListTeamsNeedingMembersUseCase",
    "ListMyTeamsUseCase",
    "ListNotificationsUseCase",
    "MarkNotificationReadUseCase",
    # DTOs
    "CreateTeamCommand",
    "CreateTeamResponse",
    "TeamInfo",
    "InvitationResponse",
    "InvitationInfo",
    "AvailableMember",
    "ApplicationInfo",
    "TeamNeedingMembers",
    "MyTeam",
    "NotificationInfo",
    "StatusResponse",
]

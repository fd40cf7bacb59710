"""
Club Hub Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ApplicationStatus,
    EventMode,
    EventStatus,
    EventType,
    InvitationStatus,
    ParticipantStatus,
    ProfileRole,
    TargetAudience,
    TournamentStatus,
)

# Export all entities
from .account import Account
from .profile import Profile
from .pending_user import PendingUser
from .event import Event
from .workshop_host import WorkshopHost
from .event_participant import EventParticipant
from .event_audit_log import EventAuditLog
from .tournament import Tournament
from .event_winner import EventWinner
from .team import Team
from .team_member import TeamMember
from .team_registration import TeamRegistration
from .team_invitation import TeamInvitation
from .team_application import TeamApplication
from .notification import Notification
from .announcement import Announcement

__all__ = [
    # Enums
    "ApplicationStatus",
    "EventMode",
    "EventStatus",
    "EventType",
    "InvitationStatus",
    "ParticipantStatus",
    "ProfileRole",
    "TargetAudience",
    "TournamentStatus",
    # Entities
    "Account",
    "Profile",
    "PendingUser",
    "Event",
    "WorkshopHost",
    "EventParticipant",
    "EventAuditLog",
    "Tournament",
    "EventWinner",
    "Team",
    "TeamMember",
    "TeamRegistration",
    "TeamInvitation",
    "TeamApplication",
    "Notification",
    "Announcement",
]

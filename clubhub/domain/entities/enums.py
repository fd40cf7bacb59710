"""
Club Hub Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class ProfileRole(str, Enum):
    """Platform role deciding which dashboard a profile can use"""

    member = "member"
    core = "core"


class EventMode(str, Enum):
    """Competitive event or non-competitive workshop"""

    event = "event"
    workshop = "workshop"


class EventType(str, Enum):
    """Whether participants register alone or as a team"""

    individual = "individual"
    team = "team"


class EventStatus(str, Enum):
    """Event lifecycle status"""

    upcoming = "upcoming"
    registration_open = "registration_open"
    ongoing = "ongoing"
    completed = "completed"
    cancelled = "cancelled"


class ParticipantStatus(str, Enum):
    """Individual registration status"""

    registered = "registered"
    confirmed = "confirmed"


class InvitationStatus(str, Enum):
    """
    Team invitation status

    ``expired`` is never persisted; it is derived on read from a pending
    invitation whose expires_at has passed.
    """

    pending = "pending"
    accepted = "accepted"
    declined = "declined"
    cancelled = "cancelled"
    expired = "expired"


class ApplicationStatus(str, Enum):
    """Team application status"""

    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"


class TournamentStatus(str, Enum):
    """Tournament lifecycle status"""

    upcoming = "upcoming"
    registration_open = "registration_open"
    ongoing = "ongoing"
    completed = "completed"


class TargetAudience(str, Enum):
    """Who an announcement is shown to"""

    all = "all"
    core_team = "core-team"
    members = "members"

"""
Event & Workshop Use Case DTOs

Command and Response classes for the catalogue and registration.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from clubhub.domain.entities import (
    Event,
    EventParticipant,
    EventStatus,
    EventType,
    WorkshopHost,
)


# ============================================================================
# Command DTOs
# ============================================================================


class HostInput(BaseModel):
    name: str
    designation: Optional[str] = None
    profile_id: Optional[str] = None


class CreateEventCommand(BaseModel):
    title: str
    description: str = ""
    type: EventType = EventType.individual
    status: EventStatus = EventStatus.upcoming
    max_participants: int
    team_size: int = 1
    registration_deadline: datetime
    start_date: datetime
    end_date: datetime
    category: Optional[str] = None
    banner_url: Optional[str] = None
    meeting_link: Optional[str] = None
    is_tournament: bool = False
    tournament_id: Optional[UUID] = None


class UpdateEventCommand(BaseModel):
    """Partial update, unset fields keep their value"""

    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[EventType] = None
    status: Optional[EventStatus] = None
    max_participants: Optional[int] = None
    team_size: Optional[int] = None
    registration_deadline: Optional[datetime] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    category: Optional[str] = None
    banner_url: Optional[str] = None
    meeting_link: Optional[str] = None
    is_tournament: Optional[bool] = None
    tournament_id: Optional[UUID] = None


class WorkshopCommand(BaseModel):
    """Full workshop definition, used for create and for update (hosts replaced)"""

    title: str
    description: str
    max_participants: int
    registration_deadline: datetime
    start_date: datetime
    end_date: datetime
    category: Optional[str] = None
    banner_url: Optional[str] = None
    meeting_link: Optional[str] = None
    hosts: List[HostInput] = Field(default_factory=list)


# ============================================================================
# Response DTOs
# ============================================================================


class EventInfo(BaseModel):
    id: str
    title: str
    description: str
    mode: str
    type: str
    status: str
    max_participants: int
    team_size: int
    category: Optional[str]
    banner_url: Optional[str]
    meeting_link: Optional[str]
    is_tournament: bool
    tournament_id: Optional[str] = None
    registration_deadline: str
    start_date: str
    end_date: str
    registration_count: int = 0

    @classmethod
    def from_entity(cls, event: Event, registration_count: int = 0) -> "EventInfo":
        return cls(
            id=str(event.id),
            title=event.title,
            description=event.description,
            mode=event.mode.value,
            type=event.type.value,
            status=event.status.value,
            max_participants=event.max_participants,
            team_size=event.team_size,
            category=event.category,
            banner_url=event.banner_url,
            meeting_link=event.meeting_link,
            is_tournament=event.is_tournament,
            tournament_id=str(event.tournament_id) if event.tournament_id else None,
            registration_deadline=event.registration_deadline.isoformat(),
            start_date=event.start_date.isoformat(),
            end_date=event.end_date.isoformat(),
            registration_count=registration_count,
        )


class GroupedEventsResponse(BaseModel):
    registration_open: List[EventInfo]
    upcoming: List[EventInfo]
    ongoing: List[EventInfo]
    completed: List[EventInfo]


class HostInfo(BaseModel):
    id: str
    name: str
    designation: Optional[str]
    profile_id: Optional[str]

    @classmethod
    def from_entity(cls, host: WorkshopHost) -> "HostInfo":
        return cls(
            id=str(host.id),
            name=host.name,
            designation=host.designation,
            profile_id=str(host.profile_id) if host.profile_id else None,
        )


class ParticipantInfo(BaseModel):
    id: str
    user_id: str
    name: str
    email: str
    status: str
    attended: bool
    registered_at: str

    @classmethod
    def from_entity(cls, participant: EventParticipant) -> "ParticipantInfo":
        return cls(
            id=str(participant.id),
            user_id=str(participant.user_id),
            name=participant.name,
            email=participant.email,
            status=participant.status.value,
            attended=participant.attended,
            registered_at=participant.registered_at.isoformat(),
        )


class AvailableWorkshop(EventInfo):
    is_registered: bool = False


class WorkshopDetails(BaseModel):
    workshop: EventInfo
    hosts: List[HostInfo]
    registration_count: int
    is_registered: bool
    can_register: bool
    can_cancel: bool


class MyWorkshop(BaseModel):
    workshop: EventInfo
    registration_status: str
    attended: bool
    registered_at: str


class WorkshopAdminDetails(BaseModel):
    workshop: EventInfo
    hosts: List[HostInfo]
    registration_count: int
    attended_count: int
    recent_registrations: List[ParticipantInfo]


class RegistrationResponse(BaseModel):
    success: bool = True
    message: str
    participant_id: Optional[str] = None

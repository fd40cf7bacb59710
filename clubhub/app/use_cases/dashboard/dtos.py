from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from clubhub.app.use_cases.events.dtos import EventInfo
from clubhub.app.use_cases.teams.dtos import MyTeam


class CoreStats(BaseModel):
    total_events: int
    upcoming_events: int
    active_members: int
    total_workshops: int
    completed_events: int


class MemberStats(BaseModel):
    events_participated: int
    workshops_attended: int
    team_points: int
    my_teams: List[MyTeam]
    pending_invitations: int
    pending_applications: int
    pending_actions: int


class ActivityItem(BaseModel):
    id: str
    action: str
    event_id: Optional[str]
    event_title: Optional[str]
    performed_by: Optional[str]
    metadata: Dict[str, Any]
    performed_at: str


class UpcomingEvents(BaseModel):
    events: List[EventInfo]

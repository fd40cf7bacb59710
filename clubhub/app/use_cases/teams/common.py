"""
Helpers shared by the team workflow use cases.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.domain.base import generate_token
from clubhub.domain.entities import (
    Event,
    InvitationStatus,
    Notification,
    Team,
    TeamInvitation,
    TeamMember,
    TeamRegistration,
)

from .dtos import TeamInfo


async def load_led_team(uow: UnitOfWork, team_id: UUID, identity: Identity) -> Optional[Team]:
    """The team, when the caller leads it; None for missing or foreign teams"""
    team = await uow.teams.get_by_id(team_id)
    if team is None or team.leader_id != identity.user_id:
        return None
    return team


async def is_on_event_team(uow: UnitOfWork, event_id: Optional[UUID], user_id: UUID) -> bool:
    if event_id is None:
        return False
    teams = await uow.teams.list_by_event(event_id)
    member_ids = await uow.team_members.list_member_ids([t.id for t in teams])
    return user_id in member_ids


def new_invitation(
    team: Team,
    inviter_id: UUID,
    invitee_id: UUID,
    now: datetime,
    ttl: timedelta,
    event_id: Optional[UUID] = None,
) -> TeamInvitation:
    return TeamInvitation(
        team_id=team.id,
        inviter_id=inviter_id,
        invitee_id=invitee_id,
        event_id=event_id or team.event_id,
        token=generate_token(),
        status=InvitationStatus.pending,
        created_at=now,
        expires_at=now + ttl,
    )


async def notify(uow: UnitOfWork, recipient_id: UUID, team: Team, title: str, message: str) -> None:
    await uow.notifications.create(
        Notification(recipient_id=recipient_id, team_id=team.id, title=title, message=message)
    )


async def add_member(uow: UnitOfWork, team: Team, event: Optional[Event], member_id: UUID) -> bool:
    """
    Add member_id to team and register the team once it reaches the
    event's team_size.

    Returns:
        True if this call registered the team
    """
    await uow.team_members.create(TeamMember(team_id=team.id, member_id=member_id))

    if event is None:
        return False

    member_count = await uow.team_members.count_by_team(team.id)
    if member_count < event.team_size:
        return False

    if await uow.team_registrations.get_by_team(team.id) is not None:
        return False

    await uow.team_registrations.create(TeamRegistration(event_id=event.id, team_id=team.id))
    return True


async def team_is_full(uow: UnitOfWork, team: Team, event: Optional[Event]) -> bool:
    if event is None:
        return False
    return await uow.team_members.count_by_team(team.id) >= event.team_size


async def team_info(uow: UnitOfWork, team: Team) -> TeamInfo:
    member_count = await uow.team_members.count_by_team(team.id)
    registration = await uow.team_registrations.get_by_team(team.id)
    return TeamInfo(
        id=str(team.id),
        name=team.name,
        description=team.description,
        leader_id=str(team.leader_id),
        event_id=str(team.event_id) if team.event_id else None,
        points=team.points,
        member_count=member_count,
        is_registered=registration is not None,
    )

"""
Team read use cases: teams looking for members and the caller's teams.
"""

from typing import List
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import MyTeam, TeamNeedingMembers


class ListTeamsNeedingMembersUseCase:
    """Unregistered teams of an event with free seats"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, event_id: UUID) -> Result[List[TeamNeedingMembers]]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(ErrorKind.NOT_FOUND, "EVENT_NOT_FOUND", "Event not found"))

            registered = {r.team_id for r in await self.uow.team_registrations.list_by_event(event.id)}

            items = []
            for team in await self.uow.teams.list_by_event(event.id):
                if team.id in registered:
                    continue
                member_count = await self.uow.team_members.count_by_team(team.id)
                if member_count >= event.team_size:
                    continue
                leader = await self.uow.profiles.get_by_id(team.leader_id)
                application = await self.uow.applications.get_pending(team.id, identity.user_id)
                items.append(
                    TeamNeedingMembers(
                        id=str(team.id),
                        name=team.name,
                        leader_name=leader.full_name if leader else None,
                        member_count=member_count,
                        team_size=event.team_size,
                        spots_left=event.team_size - member_count,
                        has_applied=application is not None,
                    )
                )

            return Return.ok(items)


async def load_my_teams(uow: UnitOfWork, user_id: UUID) -> List[MyTeam]:
    """Teams the user belongs to, read through an already-entered unit of work"""
    memberships = await uow.team_members.list_by_member(user_id)
    teams = await uow.teams.list_by_ids([m.team_id for m in memberships])
    events = {
        e.id: e
        for e in await uow.events.list_by_ids(list({t.event_id for t in teams if t.event_id}))
    }

    items = []
    for team in teams:
        event = events.get(team.event_id)
        items.append(
            MyTeam(
                id=str(team.id),
                name=team.name,
                event_id=str(team.event_id) if team.event_id else None,
                event_title=event.title if event else None,
                is_leader=team.leader_id == user_id,
                member_count=await uow.team_members.count_by_team(team.id),
                points=team.points,
                is_registered=await uow.team_registrations.get_by_team(team.id) is not None,
            )
        )
    return items


class ListMyTeamsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity) -> Result[List[MyTeam]]:
        async with self.uow:
            return Return.ok(await load_my_teams(self.uow, identity.user_id))

from typing import List
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import NOT_AUTHORIZED
from clubhub.domain.base import utcnow
from clubhub.libs.result import Result, Return

from .common import load_led_team
from .dtos import AvailableMember


class GetAvailableMembersUseCase:
    """
    Members the team leader can still invite for an event.

    Excluded:
    - users registered for the event, individually or through any
      registered team
    - current members of the team
    - users holding an active invitation to the team
    - the caller
    - core profiles
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, team_id: UUID, event_id: UUID
    ) -> Result[List[AvailableMember]]:
        async with self.uow:
            team = await load_led_team(self.uow, team_id, identity)
            if team is None:
                return Return.err(NOT_AUTHORIZED)

            excluded = {identity.user_id}

            participants = await self.uow.participants.list_by_event(event_id)
            excluded.update(p.user_id for p in participants)

            registrations = await self.uow.team_registrations.list_by_event(event_id)
            excluded.update(
                await self.uow.team_members.list_member_ids([r.team_id for r in registrations])
            )

            members = await self.uow.team_members.list_by_team(team.id)
            excluded.update(m.member_id for m in members)

            now = utcnow()
            invitations = await self.uow.invitations.list_by_team(team.id)
            excluded.update(i.invitee_id for i in invitations if i.is_active(now))

            profiles = await self.uow.profiles.list_invitable(list(excluded))

            return Return.ok(
                [AvailableMember(id=str(p.id), full_name=p.full_name, email=p.email) for p in profiles]
            )

import logging
from datetime import timedelta

from clubhub.app.repositories.errors import DuplicateRecordError
from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.domain.base import utcnow
from clubhub.domain.entities import (
    EventStatus,
    EventType,
    ProfileRole,
    Team,
    TeamMember,
    TeamRegistration,
)
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .common import is_on_event_team, new_invitation, notify, team_info
from .dtos import CreateTeamCommand, CreateTeamResponse

logger = logging.getLogger(__name__)

TEAM_NAME_TAKEN = Error(ErrorKind.CONFLICT, "TEAM_NAME_TAKEN", "A team with this name already exists for this event")


class CreateTeamUseCase:
    """
    Create a team for a team event and invite its first members.

    Business Rules:
    - Event must exist, be a team event and be open for registration
    - At most team_size - 1 invitees (the leader takes one seat)
    - Team name is unique per event
    - Caller must not already be on a team for the event
    - Invitees must be existing members (not core)
    - Leader becomes the first TeamMember
    - One invitation (7 days) and one notification per invitee
    - Tournament teams are registered immediately
    """

    def __init__(self, uow: UnitOfWork, invitation_ttl_days: int = 7):
        self.uow = uow
        self.invitation_ttl = timedelta(days=invitation_ttl_days)

    async def execute(
        self, identity: Identity, command: CreateTeamCommand
    ) -> Result[CreateTeamResponse]:
        name = command.name.strip()
        if not name:
            return Return.err(Error(ErrorKind.VALIDATION, "INVALID_NAME", "Team name is required"))

        invitee_ids = []
        for member_id in command.member_ids:
            if member_id != identity.user_id and member_id not in invitee_ids:
                invitee_ids.append(member_id)

        async with self.uow:
            event = await self.uow.events.get_by_id(command.event_id)
            if event is None:
                return Return.err(Error(ErrorKind.NOT_FOUND, "EVENT_NOT_FOUND", "Event not found"))

            if event.type != EventType.team:
                return Return.err(
                    Error(ErrorKind.VALIDATION, "NOT_A_TEAM_EVENT", "This event does not accept teams")
                )

            if event.status != EventStatus.registration_open:
                return Return.err(
                    Error(ErrorKind.INVALID_STATE, "REGISTRATION_CLOSED", "Registration is not open for this event")
                )

            now = utcnow()
            if now >= event.registration_deadline:
                return Return.err(
                    Error(ErrorKind.DEADLINE_PASSED, "DEADLINE_PASSED", "Registration deadline has passed")
                )

            if len(invitee_ids) > event.team_size - 1:
                return Return.err(
                    Error(
                        ErrorKind.VALIDATION,
                        "TEAM_TOO_LARGE",
                        f"You can invite at most {event.team_size - 1} members",
                    )
                )

            if await is_on_event_team(self.uow, event.id, identity.user_id):
                return Return.err(
                    Error(ErrorKind.CONFLICT, "ALREADY_IN_TEAM", "You are already on a team for this event")
                )

            if await self.uow.teams.get_by_event_and_name(event.id, name) is not None:
                return Return.err(TEAM_NAME_TAKEN)

            invitees = []
            for invitee_id in invitee_ids:
                profile = await self.uow.profiles.get_by_id(invitee_id)
                if profile is None or profile.role == ProfileRole.core:
                    return Return.err(
                        Error(ErrorKind.NOT_FOUND, "MEMBER_NOT_FOUND", f"Member {invitee_id} not found")
                    )
                invitees.append(profile)

            try:
                team = await self.uow.teams.create(
                    Team(
                        name=name,
                        description=command.description,
                        leader_id=identity.user_id,
                        event_id=event.id,
                        tournament_id=event.tournament_id,
                        is_tournament=event.is_tournament,
                        created_at=now,
                    )
                )
            except DuplicateRecordError:
                return Return.err(TEAM_NAME_TAKEN)

            await self.uow.team_members.create(TeamMember(team_id=team.id, member_id=identity.user_id))

            for invitee in invitees:
                await self.uow.invitations.create(
                    new_invitation(team, identity.user_id, invitee.id, now, self.invitation_ttl)
                )
                await notify(
                    self.uow,
                    invitee.id,
                    team,
                    "Team invitation",
                    f"You have been invited to join {team.name} for {event.title}",
                )

            if event.is_tournament:
                await self.uow.team_registrations.create(
                    TeamRegistration(event_id=event.id, team_id=team.id)
                )

            await self.uow.commit()

            logger.info(
                "Team %s created for event %s with %s invitations",
                team.id,
                event.id,
                len(invitees),
            )

            return Return.ok(
                CreateTeamResponse(
                    team=await team_info(self.uow, team),
                    invitations_sent=len(invitees),
                )
            )

"""
Team Application Use Cases

Members apply to teams that still have room; team leaders accept or
reject; applicants may withdraw while pending.
"""

import logging
from typing import List, Optional
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import NOT_AUTHORIZED
from clubhub.domain.entities import ApplicationStatus, TeamApplication
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .common import add_member, is_on_event_team, notify, team_is_full
from .dtos import ApplicationInfo, StatusResponse

logger = logging.getLogger(__name__)

APPLICATION_NOT_PENDING = Error(
    ErrorKind.INVALID_STATE, "APPLICATION_NOT_PENDING", "Application is no longer pending"
)


def _info(application: TeamApplication, team_name=None, applicant_name=None) -> ApplicationInfo:
    return ApplicationInfo(
        id=str(application.id),
        team_id=str(application.team_id),
        team_name=team_name,
        user_id=str(application.user_id),
        applicant_name=applicant_name,
        event_id=str(application.event_id) if application.event_id else None,
        status=application.status.value,
        created_at=application.created_at.isoformat(),
    )


class ApplyToTeamUseCase:
    """
    Business Rules:
    - Team must exist and not be registered yet
    - Caller must not already be a member, nor on another team for the event
    - At most one pending application per (team, user)
    - The team leader is notified
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, team_id: UUID) -> Result[ApplicationInfo]:
        async with self.uow:
            team = await self.uow.teams.get_by_id(team_id)
            if team is None:
                return Return.err(Error(ErrorKind.NOT_FOUND, "TEAM_NOT_FOUND", "Team not found"))

            if await self.uow.team_registrations.get_by_team(team.id) is not None:
                return Return.err(
                    Error(ErrorKind.INVALID_STATE, "TEAM_REGISTERED", "Team is already registered")
                )

            if await self.uow.team_members.get(team.id, identity.user_id) is not None:
                return Return.err(
                    Error(ErrorKind.CONFLICT, "ALREADY_MEMBER", "You are already on this team")
                )

            if await is_on_event_team(self.uow, team.event_id, identity.user_id):
                return Return.err(
                    Error(ErrorKind.CONFLICT, "ALREADY_IN_TEAM", "You are already on a team for this event")
                )

            if await self.uow.applications.get_pending(team.id, identity.user_id) is not None:
                return Return.err(
                    Error(ErrorKind.CONFLICT, "APPLICATION_EXISTS", "You have already applied to this team")
                )

            application = await self.uow.applications.create(
                TeamApplication(
                    user_id=identity.user_id,
                    team_id=team.id,
                    event_id=team.event_id,
                    status=ApplicationStatus.pending,
                )
            )

            applicant = await self.uow.profiles.get_by_id(identity.user_id)
            applicant_name = applicant.full_name if applicant else "A member"
            await notify(
                self.uow,
                team.leader_id,
                team,
                "New team application",
                f"{applicant_name} applied to join {team.name}",
            )

            await self.uow.commit()

            return Return.ok(_info(application, team.name, applicant_name))


class RespondApplicationUseCase:
    """
    Business Rules:
    - Only the team leader may respond, only while pending
    - Accepting adds the applicant; the team is registered once full
    - An applicant who joined another team for the event cannot be accepted
    - The applicant is notified
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, application_id: UUID, accept: bool
    ) -> Result[StatusResponse]:
        async with self.uow:
            application = await self.uow.applications.get_by_id(application_id)
            if application is None:
                return Return.err(NOT_AUTHORIZED)

            team = await self.uow.teams.get_by_id(application.team_id)
            if team is None or team.leader_id != identity.user_id:
                return Return.err(NOT_AUTHORIZED)

            if application.status != ApplicationStatus.pending:
                return Return.err(APPLICATION_NOT_PENDING)

            if accept:
                event = await self.uow.events.get_by_id(team.event_id) if team.event_id else None
                if await self.uow.team_members.get(team.id, application.user_id) is None:
                    if await is_on_event_team(self.uow, team.event_id, application.user_id):
                        return Return.err(
                            Error(
                                ErrorKind.CONFLICT,
                                "ALREADY_IN_TEAM",
                                "Applicant is already on a team for this event",
                            )
                        )
                    if await team_is_full(self.uow, team, event):
                        return Return.err(
                            Error(ErrorKind.CONFLICT, "TEAM_FULL", "Team is already full")
                        )
                    await add_member(self.uow, team, event, application.user_id)
                application.status = ApplicationStatus.accepted
            else:
                application.status = ApplicationStatus.rejected

            await self.uow.applications.update(application)

            verb = "accepted" if accept else "rejected"
            await notify(
                self.uow,
                application.user_id,
                team,
                f"Application {verb}",
                f"Your application to join {team.name} was {verb}",
            )

            await self.uow.commit()

            logger.info("Application %s %s by %s", application.id, verb, identity.user_id)

            return Return.ok(StatusResponse(status=application.status.value, message=f"Application {verb}"))


class WithdrawApplicationUseCase:
    """
    Business Rules:
    - Only the applicant may withdraw
    - Only pending applications can be withdrawn
    - The application row is deleted, not marked
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, application_id: UUID) -> Result[StatusResponse]:
        async with self.uow:
            application = await self.uow.applications.get_by_id(application_id)
            if application is None or application.user_id != identity.user_id:
                return Return.err(NOT_AUTHORIZED)

            if application.status != ApplicationStatus.pending:
                return Return.err(APPLICATION_NOT_PENDING)

            await self.uow.applications.delete(application)
            await self.uow.commit()

            return Return.ok(StatusResponse(status="withdrawn", message="Application withdrawn"))


class ListMyApplicationsUseCase:
    """Applications the caller has made, optionally for one event"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, event_id: Optional[UUID] = None
    ) -> Result[List[ApplicationInfo]]:
        async with self.uow:
            applications = await self.uow.applications.list_by_user(identity.user_id, event_id)
            teams = {
                t.id: t
                for t in await self.uow.teams.list_by_ids(list({a.team_id for a in applications}))
            }
            return Return.ok(
                [
                    _info(a, teams[a.team_id].name if a.team_id in teams else None)
                    for a in applications
                ]
            )


class ListTeamApplicationsUseCase:
    """Pending applications to the teams the caller leads"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity) -> Result[List[ApplicationInfo]]:
        async with self.uow:
            teams = {t.id: t for t in await self.uow.teams.list_by_leader(identity.user_id)}
            applications = await self.uow.applications.list_pending_by_teams(list(teams))

            items = []
            for application in applications:
                applicant = await self.uow.profiles.get_by_id(application.user_id)
                items.append(
                    _info(
                        application,
                        teams[application.team_id].name,
                        applicant.full_name if applicant else None,
                    )
                )
            return Return.ok(items)

"""
Team Invitation Use Cases

Leader side: send, cancel, reinvite, status overview.
Invitee side: respond, list open invitations.

State machine:
    pending -> accepted | declined   (invitee, while unexpired)
    pending -> cancelled             (leader, while persisted pending)
    expired is derived at read time (pending and now > expires_at)
Leader-side operations answer missing resources and foreign callers
with the same generic "Not authorized" error.
"""

import logging
from datetime import timedelta
from typing import List, Optional
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import NOT_AUTHORIZED
from clubhub.domain.base import utcnow
from clubhub.domain.entities import InvitationStatus, ProfileRole
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .common import add_member, is_on_event_team, load_led_team, new_invitation, notify, team_is_full
from .dtos import InvitationInfo, InvitationResponse, StatusResponse

logger = logging.getLogger(__name__)

ALREADY_MEMBER = Error(ErrorKind.CONFLICT, "ALREADY_MEMBER", "This member is already on the team")
INVITATION_NOT_PENDING = Error(
    ErrorKind.INVALID_STATE, "INVITATION_NOT_PENDING", "Invitation is no longer pending"
)
TEAM_FULL = Error(ErrorKind.CONFLICT, "TEAM_FULL", "Team is already full")
MEMBER_NOT_FOUND = Error(ErrorKind.NOT_FOUND, "MEMBER_NOT_FOUND", "Member not found")


def _response(invitation) -> InvitationResponse:
    return InvitationResponse(
        invitation_id=str(invitation.id),
        status=invitation.status.value,
        expires_at=invitation.expires_at.isoformat(),
    )


class SendInvitationUseCase:
    """
    Business Rules:
    - Caller must lead the team
    - Invitee must be an existing, non-core member not already on the team
    - At most one active (pending, unexpired) invitation per (team, invitee)
    - New invitations expire after 7 days
    """

    def __init__(self, uow: UnitOfWork, invitation_ttl_days: int = 7):
        self.uow = uow
        self.invitation_ttl = timedelta(days=invitation_ttl_days)

    async def execute(
        self,
        identity: Identity,
        team_id: UUID,
        member_id: UUID,
        event_id: Optional[UUID] = None,
    ) -> Result[InvitationResponse]:
        async with self.uow:
            team = await load_led_team(self.uow, team_id, identity)
            if team is None:
                return Return.err(NOT_AUTHORIZED)

            invitee = await self.uow.profiles.get_by_id(member_id)
            if invitee is None or invitee.role == ProfileRole.core:
                return Return.err(MEMBER_NOT_FOUND)

            if await self.uow.team_members.get(team.id, member_id) is not None:
                return Return.err(ALREADY_MEMBER)

            now = utcnow()
            existing = await self.uow.invitations.list_by_team_and_invitee(team.id, member_id)
            if any(invitation.is_active(now) for invitation in existing):
                return Return.err(
                    Error(
                        ErrorKind.CONFLICT,
                        "INVITATION_EXISTS",
                        "An active invitation already exists for this member",
                    )
                )

            invitation = await self.uow.invitations.create(
                new_invitation(team, identity.user_id, member_id, now, self.invitation_ttl, event_id)
            )
            await notify(
                self.uow,
                member_id,
                team,
                "Team invitation",
                f"You have been invited to join {team.name}",
            )

            await self.uow.commit()

            logger.info("Invitation %s sent for team %s to %s", invitation.id, team.id, member_id)

            return Return.ok(_response(invitation))


class CancelInvitationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, invitation_id: UUID) -> Result[InvitationResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(NOT_AUTHORIZED)

            team = await load_led_team(self.uow, invitation.team_id, identity)
            if team is None:
                return Return.err(NOT_AUTHORIZED)

            if invitation.status != InvitationStatus.pending:
                return Return.err(INVITATION_NOT_PENDING)

            invitation.status = InvitationStatus.cancelled
            invitation.responded_at = utcnow()
            invitation = await self.uow.invitations.update(invitation)

            await self.uow.commit()

            return Return.ok(_response(invitation))


class ReinviteMemberUseCase:
    """
    Business Rules:
    - Caller must lead the team, member must not be on the team
    - Member must exist and not be core
    - Every earlier invitation row for (team, member) is deleted
    - The fresh invitation expires after 24 hours
    """

    def __init__(self, uow: UnitOfWork, reinvite_ttl_hours: int = 24):
        self.uow = uow
        self.reinvite_ttl = timedelta(hours=reinvite_ttl_hours)

    async def execute(
        self, identity: Identity, team_id: UUID, member_id: UUID
    ) -> Result[InvitationResponse]:
        async with self.uow:
            team = await load_led_team(self.uow, team_id, identity)
            if team is None:
                return Return.err(NOT_AUTHORIZED)

            invitee = await self.uow.profiles.get_by_id(member_id)
            if invitee is None or invitee.role == ProfileRole.core:
                return Return.err(MEMBER_NOT_FOUND)

            if await self.uow.team_members.get(team.id, member_id) is not None:
                return Return.err(ALREADY_MEMBER)

            await self.uow.invitations.delete_by_team_and_invitee(team.id, member_id)

            invitation = await self.uow.invitations.create(
                new_invitation(team, identity.user_id, member_id, utcnow(), self.reinvite_ttl)
            )
            await notify(
                self.uow,
                member_id,
                team,
                "Team invitation",
                f"You have been invited again to join {team.name}",
            )

            await self.uow.commit()

            logger.info("Member %s reinvited to team %s", member_id, team.id)

            return Return.ok(_response(invitation))


class RespondInvitationUseCase:
    """
    Business Rules:
    - Only the invitee may respond, only while pending and unexpired
    - Accepting adds the invitee to the team; the team is registered for
      its event once it reaches team_size
    - Invitee must not already be on another team for the same event
    - The team leader is notified of the answer
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, invitation_id: UUID, accept: bool
    ) -> Result[StatusResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None or invitation.invitee_id != identity.user_id:
                return Return.err(NOT_AUTHORIZED)

            if invitation.status != InvitationStatus.pending:
                return Return.err(INVITATION_NOT_PENDING)

            now = utcnow()
            if not invitation.is_active(now):
                return Return.err(
                    Error(ErrorKind.INVALID_STATE, "INVITATION_EXPIRED", "Invitation has expired")
                )

            team = await self.uow.teams.get_by_id(invitation.team_id)
            if team is None:
                return Return.err(Error(ErrorKind.NOT_FOUND, "TEAM_NOT_FOUND", "Team not found"))

            event = await self.uow.events.get_by_id(team.event_id) if team.event_id else None
            registered = False

            if accept:
                if await self.uow.team_members.get(team.id, identity.user_id) is None:
                    if await is_on_event_team(self.uow, team.event_id, identity.user_id):
                        return Return.err(
                            Error(
                                ErrorKind.CONFLICT,
                                "ALREADY_IN_TEAM",
                                "You are already on a team for this event",
                            )
                        )
                    if await team_is_full(self.uow, team, event):
                        return Return.err(TEAM_FULL)
                    registered = await add_member(self.uow, team, event, identity.user_id)
                invitation.status = InvitationStatus.accepted
            else:
                invitation.status = InvitationStatus.declined

            invitation.responded_at = now
            await self.uow.invitations.update(invitation)

            invitee = await self.uow.profiles.get_by_id(identity.user_id)
            invitee_name = invitee.full_name if invitee else "A member"
            verb = "accepted" if accept else "declined"
            await notify(
                self.uow,
                team.leader_id,
                team,
                f"Invitation {verb}",
                f"{invitee_name} {verb} your invitation to join {team.name}",
            )

            await self.uow.commit()

            if registered:
                logger.info("Team %s reached full size and was registered", team.id)

            return Return.ok(
                StatusResponse(status=invitation.status.value, message=f"Invitation {verb}")
            )


class GetTeamInvitationStatusUseCase:
    """All invitations of a led team, newest first, with derived status"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, team_id: UUID) -> Result[List[InvitationInfo]]:
        async with self.uow:
            team = await load_led_team(self.uow, team_id, identity)
            if team is None:
                return Return.err(NOT_AUTHORIZED)

            now = utcnow()
            invitations = await self.uow.invitations.list_by_team(team.id)

            items = []
            for invitation in invitations:
                invitee = await self.uow.profiles.get_by_id(invitation.invitee_id)
                items.append(
                    InvitationInfo.build(
                        invitation,
                        invitation.effective_status(now).value,
                        team_name=team.name,
                        invitee_name=invitee.full_name if invitee else None,
                    )
                )

            return Return.ok(items)


class ListMyInvitationsUseCase:
    """Pending, unexpired invitations addressed to the caller"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity) -> Result[List[InvitationInfo]]:
        async with self.uow:
            now = utcnow()
            invitations = [
                i
                for i in await self.uow.invitations.list_pending_by_invitee(identity.user_id)
                if i.is_active(now)
            ]
            teams = {
                t.id: t
                for t in await self.uow.teams.list_by_ids(list({i.team_id for i in invitations}))
            }

            items = []
            for invitation in invitations:
                team = teams.get(invitation.team_id)
                inviter = await self.uow.profiles.get_by_id(invitation.inviter_id)
                items.append(
                    InvitationInfo.build(
                        invitation,
                        InvitationStatus.pending.value,
                        team_name=team.name if team else None,
                        inviter_name=inviter.full_name if inviter else None,
                    )
                )

            return Return.ok(items)

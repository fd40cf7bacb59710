from datetime import timedelta
from uuid import uuid4

import pytest

from clubhub.app.services.identity import Identity
from clubhub.app.use_cases.teams import (
    CancelInvitationUseCase,
    CreateTeamCommand,
    CreateTeamUseCase,
    GetAvailableMembersUseCase,
    GetTeamInvitationStatusUseCase,
    ReinviteMemberUseCase,
    RespondInvitationUseCase,
    SendInvitationUseCase,
)
from clubhub.domain.base import utcnow
from clubhub.domain.entities import (
    EventMode,
    EventType,
    InvitationStatus,
    Profile,
    ProfileRole,
    Team,
    TeamInvitation,
    TeamMember,
    TeamRegistration,
)
from tests.fixtures.factories import make_event, make_participant


@pytest.fixture
def hackathon():
    return make_event(mode=EventMode.event, type=EventType.team, team_size=2, title="Hackathon")


@pytest.fixture
def led_team(mock_uow, member_identity, hackathon):
    team = Team(id=uuid4(), name="Rustaceans", leader_id=member_identity.user_id, event_id=hackathon.id)
    mock_uow.teams.get_by_id.return_value = team
    mock_uow.events.get_by_id.return_value = hackathon
    mock_uow.team_members.get.return_value = None
    mock_uow.invitations.list_by_team_and_invitee.return_value = []
    return team


@pytest.fixture
def invitee(mock_uow):
    profile = Profile(id=uuid4(), full_name="Grace", email="grace@club.org", role=ProfileRole.member)
    mock_uow.profiles.get_by_id.return_value = profile
    return profile


def _invitation(team, invitee_id, status=InvitationStatus.pending, expires_in=timedelta(days=7)):
    now = utcnow()
    return TeamInvitation(
        id=uuid4(),
        team_id=team.id,
        inviter_id=team.leader_id,
        invitee_id=invitee_id,
        token=uuid4().hex,
        status=status,
        created_at=now,
        expires_at=now + expires_in,
    )


@pytest.mark.asyncio
async def test_send_invitation(mock_uow, member_identity, led_team, invitee):
    result = await SendInvitationUseCase(mock_uow).execute(member_identity, led_team.id, invitee.id)

    assert result.is_ok()
    assert result.value.status == "pending"

    invitation = mock_uow.invitations.create.call_args.args[0]
    assert invitation.invitee_id == invitee.id
    assert invitation.expires_at - invitation.created_at == timedelta(days=7)
    notification = mock_uow.notifications.create.call_args.args[0]
    assert notification.recipient_id == invitee.id
    assert notification.team_id == led_team.id
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_second_active_invitation_is_rejected(mock_uow, member_identity, led_team, invitee):
    mock_uow.invitations.list_by_team_and_invitee.return_value = [_invitation(led_team, invitee.id)]

    result = await SendInvitationUseCase(mock_uow).execute(member_identity, led_team.id, invitee.id)

    assert result.error.code == "INVITATION_EXISTS"
    mock_uow.invitations.create.assert_not_called()


@pytest.mark.asyncio
async def test_expired_or_declined_invitations_do_not_block(mock_uow, member_identity, led_team, invitee):
    mock_uow.invitations.list_by_team_and_invitee.return_value = [
        _invitation(led_team, invitee.id, expires_in=timedelta(hours=-1)),
        _invitation(led_team, invitee.id, status=InvitationStatus.declined),
    ]

    result = await SendInvitationUseCase(mock_uow).execute(member_identity, led_team.id, invitee.id)

    assert result.is_ok()


@pytest.mark.asyncio
async def test_foreign_and_missing_teams_look_the_same(mock_uow, member_identity, led_team, invitee):
    led_team.leader_id = uuid4()
    foreign = await SendInvitationUseCase(mock_uow).execute(member_identity, led_team.id, invitee.id)

    mock_uow.teams.get_by_id.return_value = None
    missing = await SendInvitationUseCase(mock_uow).execute(member_identity, uuid4(), invitee.id)

    assert foreign.error == missing.error
    assert foreign.error.code == "NOT_AUTHORIZED"


@pytest.mark.asyncio
async def test_core_profiles_cannot_be_invited(mock_uow, member_identity, led_team, invitee):
    invitee.role = ProfileRole.core

    result = await SendInvitationUseCase(mock_uow).execute(member_identity, led_team.id, invitee.id)

    assert result.error.code == "MEMBER_NOT_FOUND"


@pytest.mark.asyncio
async def test_reinvite_clears_earlier_rows(mock_uow, member_identity, led_team, invitee):
    calls = []
    mock_uow.invitations.delete_by_team_and_invitee.side_effect = lambda *args: calls.append("delete")
    mock_uow.invitations.create.side_effect = lambda invitation: calls.append("create") or invitation

    result = await ReinviteMemberUseCase(mock_uow).execute(member_identity, led_team.id, invitee.id)

    assert result.is_ok()
    assert calls == ["delete", "create"]
    mock_uow.invitations.delete_by_team_and_invitee.assert_called_once_with(led_team.id, invitee.id)
    invitation = mock_uow.invitations.create.call_args.args[0]
    assert invitation.expires_at - invitation.created_at == timedelta(hours=24)


@pytest.mark.asyncio
async def test_reinvite_requires_an_invitable_member(mock_uow, member_identity, led_team, invitee):
    invitee.role = ProfileRole.core
    core = await ReinviteMemberUseCase(mock_uow).execute(member_identity, led_team.id, invitee.id)

    mock_uow.profiles.get_by_id.return_value = None
    missing = await ReinviteMemberUseCase(mock_uow).execute(member_identity, led_team.id, uuid4())

    assert core.error.code == "MEMBER_NOT_FOUND"
    assert missing.error.code == "MEMBER_NOT_FOUND"
    mock_uow.invitations.delete_by_team_and_invitee.assert_not_called()
    mock_uow.invitations.create.assert_not_called()


@pytest.mark.asyncio
async def test_cancel_then_status_shows_cancelled(mock_uow, member_identity, led_team, invitee):
    invitation = _invitation(led_team, invitee.id)
    mock_uow.invitations.get_by_id.return_value = invitation
    mock_uow.invitations.list_by_team.return_value = [invitation]

    cancelled = await CancelInvitationUseCase(mock_uow).execute(member_identity, invitation.id)
    status = await GetTeamInvitationStatusUseCase(mock_uow).execute(member_identity, led_team.id)

    assert cancelled.value.status == "cancelled"
    assert [item.status for item in status.value] == ["cancelled"]
    assert status.value[0].invitee_name == "Grace"


@pytest.mark.asyncio
async def test_cancel_requires_pending(mock_uow, member_identity, led_team, invitee):
    invitation = _invitation(led_team, invitee.id, status=InvitationStatus.accepted)
    mock_uow.invitations.get_by_id.return_value = invitation

    result = await CancelInvitationUseCase(mock_uow).execute(member_identity, invitation.id)

    assert result.error.code == "INVITATION_NOT_PENDING"


@pytest.mark.asyncio
async def test_status_derives_expired(mock_uow, member_identity, led_team, invitee):
    mock_uow.invitations.list_by_team.return_value = [
        _invitation(led_team, invitee.id, expires_in=timedelta(minutes=-5))
    ]

    result = await GetTeamInvitationStatusUseCase(mock_uow).execute(member_identity, led_team.id)

    assert result.value[0].status == "expired"


@pytest.mark.asyncio
async def test_available_members_exclusions(mock_uow, member_identity, led_team, hackathon):
    individual = make_participant(hackathon)
    other_team_id = uuid4()
    registered_member = uuid4()
    teammate = uuid4()
    invited = uuid4()
    expired_invitee = uuid4()

    mock_uow.participants.list_by_event.return_value = [individual]
    mock_uow.team_registrations.list_by_event.return_value = [
        TeamRegistration(event_id=hackathon.id, team_id=other_team_id)
    ]
    mock_uow.team_members.list_member_ids.return_value = [registered_member]
    mock_uow.team_members.list_by_team.return_value = [TeamMember(team_id=led_team.id, member_id=teammate)]
    mock_uow.invitations.list_by_team.return_value = [
        _invitation(led_team, invited),
        _invitation(led_team, expired_invitee, expires_in=timedelta(hours=-1)),
    ]
    mock_uow.profiles.list_invitable.return_value = []

    result = await GetAvailableMembersUseCase(mock_uow).execute(member_identity, led_team.id, hackathon.id)

    assert result.is_ok()
    mock_uow.team_members.list_member_ids.assert_called_once_with([other_team_id])
    excluded = set(mock_uow.profiles.list_invitable.call_args.args[0])
    assert excluded == {member_identity.user_id, individual.user_id, registered_member, teammate, invited}


@pytest.mark.asyncio
async def test_accepting_fills_and_registers_team(mock_uow, led_team, hackathon, invitee):
    identity_of_invitee = Identity(user_id=invitee.id, role=ProfileRole.member)
    invitation = _invitation(led_team, invitee.id)
    mock_uow.invitations.get_by_id.return_value = invitation
    mock_uow.teams.list_by_event.return_value = [led_team]
    mock_uow.team_members.list_member_ids.return_value = [led_team.leader_id]
    mock_uow.team_members.count_by_team.side_effect = [1, 2]
    mock_uow.team_registrations.get_by_team.return_value = None

    result = await RespondInvitationUseCase(mock_uow).execute(identity_of_invitee, invitation.id, True)

    assert result.value.status == "accepted"
    member = mock_uow.team_members.create.call_args.args[0]
    assert member.member_id == invitee.id
    registration = mock_uow.team_registrations.create.call_args.args[0]
    assert registration.team_id == led_team.id
    assert mock_uow.notifications.create.call_args.args[0].recipient_id == led_team.leader_id


@pytest.mark.asyncio
async def test_only_invitee_can_respond(mock_uow, member_identity, led_team, invitee):
    mock_uow.invitations.get_by_id.return_value = _invitation(led_team, invitee.id)

    result = await RespondInvitationUseCase(mock_uow).execute(member_identity, uuid4(), False)

    assert result.error.code == "NOT_AUTHORIZED"


@pytest.mark.asyncio
async def test_create_team_invites_members(mock_uow, member_identity, hackathon, invitee):
    hackathon.team_size = 3
    mock_uow.events.get_by_id.return_value = hackathon
    mock_uow.teams.list_by_event.return_value = []
    mock_uow.team_members.list_member_ids.return_value = []
    mock_uow.teams.get_by_event_and_name.return_value = None
    mock_uow.team_members.count_by_team.return_value = 1
    mock_uow.team_registrations.get_by_team.return_value = None

    command = CreateTeamCommand(
        event_id=hackathon.id,
        name="  Rustaceans ",
        member_ids=[invitee.id, invitee.id, member_identity.user_id],
    )
    result = await CreateTeamUseCase(mock_uow).execute(member_identity, command)

    assert result.is_ok()
    assert result.value.team.name == "Rustaceans"
    assert result.value.invitations_sent == 1
    assert mock_uow.invitations.create.call_count == 1
    leader = mock_uow.team_members.create.call_args.args[0]
    assert leader.member_id == member_identity.user_id


@pytest.mark.asyncio
async def test_create_team_too_many_invitees(mock_uow, member_identity, hackathon):
    mock_uow.events.get_by_id.return_value = hackathon
    command = CreateTeamCommand(event_id=hackathon.id, name="Big", member_ids=[uuid4(), uuid4()])

    result = await CreateTeamUseCase(mock_uow).execute(member_identity, command)

    assert result.error.code == "TEAM_TOO_LARGE"
    mock_uow.teams.create.assert_not_called()

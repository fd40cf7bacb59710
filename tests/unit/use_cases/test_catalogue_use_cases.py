from datetime import timedelta
from uuid import uuid4

import pytest

from clubhub.app.services.identity import Identity
from clubhub.app.use_cases.events import (
    CreateEventCommand,
    CreateEventUseCase,
    CreateWorkshopUseCase,
    DeleteEventUseCase,
    DeleteWorkshopUseCase,
    HostInput,
    UpdateWorkshopUseCase,
    WorkshopCommand,
)
from clubhub.app.use_cases.events.validation import validate_workshop
from clubhub.app.use_cases.leaderboard import AdjustTeamPointsUseCase
from clubhub.domain.base import utcnow
from clubhub.domain.entities import EventMode, EventStatus, ProfileRole, Team
from tests.fixtures.factories import make_event


def _workshop_command(**overrides):
    now = utcnow()
    fields = {
        "title": "Intro to Rust",
        "description": "Ownership, borrowing and lifetimes from scratch.",
        "max_participants": 30,
        "registration_deadline": now + timedelta(days=1),
        "start_date": now + timedelta(days=2),
        "end_date": now + timedelta(days=2, hours=2),
        "hosts": [HostInput(name="Ada Lovelace")],
    }
    fields.update(overrides)
    return WorkshopCommand(**fields)


@pytest.mark.parametrize(
    "overrides, code",
    [
        ({"title": "Rs"}, "INVALID_TITLE"),
        ({"title": "R" * 201}, "INVALID_TITLE"),
        ({"description": "Too short"}, "INVALID_DESCRIPTION"),
        ({"description": "x" * 5001}, "INVALID_DESCRIPTION"),
        ({"max_participants": 0}, "INVALID_CAPACITY"),
        ({"max_participants": 501}, "INVALID_CAPACITY"),
        ({"registration_deadline": utcnow() + timedelta(days=3)}, "INVALID_SCHEDULE"),
        ({"end_date": utcnow() + timedelta(days=1, hours=12)}, "INVALID_SCHEDULE"),
        ({"hosts": []}, "INVALID_HOSTS"),
        ({"hosts": [HostInput(name=f"Host {i}") for i in range(11)]}, "INVALID_HOSTS"),
        ({"hosts": [HostInput(name=" A ")]}, "INVALID_HOSTS"),
    ],
)
def test_workshop_rules(overrides, code):
    error = validate_workshop(_workshop_command(**overrides), utcnow())

    assert error.code == code


def test_workshop_start_in_the_past():
    now = utcnow()
    command = _workshop_command(
        registration_deadline=now - timedelta(days=2),
        start_date=now - timedelta(days=1),
        end_date=now - timedelta(hours=20),
    )

    assert validate_workshop(command, now).code == "INVALID_SCHEDULE"
    assert validate_workshop(command, now, require_future_start=False) is None


@pytest.mark.asyncio
async def test_create_workshop_records_hosts_and_audit(mock_uow, core_identity):
    command = _workshop_command(hosts=[HostInput(name="Ada Lovelace"), HostInput(name="Grace")])

    result = await CreateWorkshopUseCase(mock_uow).execute(core_identity, command)

    assert result.value.mode == "workshop"
    assert result.value.team_size == 1
    assert mock_uow.workshop_hosts.create.call_count == 2
    assert mock_uow.audit_logs.create.call_args.args[0].action == "workshop_created"


@pytest.mark.asyncio
async def test_create_workshop_rejects_invalid_command(mock_uow, core_identity):
    result = await CreateWorkshopUseCase(mock_uow).execute(core_identity, _workshop_command(hosts=[]))

    assert result.error.code == "INVALID_HOSTS"
    mock_uow.events.create.assert_not_called()


@pytest.mark.asyncio
async def test_completed_workshop_is_read_only(mock_uow, core_identity):
    workshop = make_event(status=EventStatus.completed)
    mock_uow.events.get_by_id.return_value = workshop

    result = await UpdateWorkshopUseCase(mock_uow).execute(core_identity, workshop.id, _workshop_command())

    assert result.error.code == "WORKSHOP_COMPLETED"


@pytest.mark.asyncio
async def test_only_president_deletes_workshops(mock_uow):
    treasurer = Identity(user_id=uuid4(), role=ProfileRole.core, member_role="treasurer")

    result = await DeleteWorkshopUseCase(mock_uow).execute(treasurer, uuid4())

    assert result.error.code == "PRESIDENT_ONLY"
    mock_uow.events.delete.assert_not_called()


@pytest.mark.asyncio
async def test_ongoing_event_cannot_be_deleted(mock_uow, core_identity):
    event = make_event(mode=EventMode.event, status=EventStatus.ongoing)
    mock_uow.events.get_by_id.return_value = event

    result = await DeleteEventUseCase(mock_uow).execute(core_identity, event.id)

    assert result.error.code == "EVENT_ONGOING"
    mock_uow.participants.delete_by_event.assert_not_called()
    mock_uow.events.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_event_removes_dependents(mock_uow, core_identity):
    event = make_event(mode=EventMode.event, status=EventStatus.completed)
    mock_uow.events.get_by_id.return_value = event

    result = await DeleteEventUseCase(mock_uow).execute(core_identity, event.id)

    assert result.is_ok()
    mock_uow.participants.delete_by_event.assert_called_once_with(event.id)
    mock_uow.event_winners.delete_by_event.assert_called_once_with(event.id)
    mock_uow.audit_logs.delete_by_event.assert_called_once_with(event.id)
    mock_uow.events.delete.assert_called_once_with(event)


@pytest.mark.asyncio
async def test_event_linked_to_unknown_tournament(mock_uow, core_identity):
    now = utcnow()
    mock_uow.tournaments.get_by_id.return_value = None
    command = CreateEventCommand(
        title="Cup Final",
        max_participants=20,
        registration_deadline=now + timedelta(days=1),
        start_date=now + timedelta(days=2),
        end_date=now + timedelta(days=2, hours=3),
        tournament_id=uuid4(),
    )

    result = await CreateEventUseCase(mock_uow).execute(core_identity, command)

    assert result.error.code == "TOURNAMENT_NOT_FOUND"
    mock_uow.events.create.assert_not_called()


@pytest.mark.asyncio
async def test_points_never_drop_below_zero(mock_uow, core_identity):
    team = Team(id=uuid4(), name="Rustaceans", leader_id=uuid4(), points=30)
    mock_uow.teams.get_by_id.return_value = team

    result = await AdjustTeamPointsUseCase(mock_uow).execute(core_identity, team.id, -50, "penalty")

    assert result.value.points == 0
    audit = mock_uow.audit_logs.create.call_args.args[0]
    assert audit.action == "team_points_adjusted"
    assert audit.event_metadata["delta"] == -50


@pytest.mark.asyncio
async def test_members_cannot_adjust_points(mock_uow, member_identity):
    result = await AdjustTeamPointsUseCase(mock_uow).execute(member_identity, uuid4(), 10)

    assert result.error.code == "CORE_ONLY"
    mock_uow.teams.update.assert_not_called()

from datetime import datetime
from uuid import uuid4

import pytest

from clubhub.app.use_cases.tournaments import (
    CreateTournamentUseCase,
    DeleteTournamentUseCase,
    GetTournamentLeaderboardUseCase,
    ListEventWinnersUseCase,
    ResetTournamentUseCase,
    SetEventWinnersUseCase,
    SetWinnersCommand,
    TournamentCommand,
    UpdateTournamentStatusUseCase,
    WinnerInput,
)
from clubhub.domain.entities import (
    EventMode,
    EventStatus,
    EventType,
    EventWinner,
    Team,
    Tournament,
    TournamentStatus,
)
from tests.fixtures.factories import make_event, make_participant


@pytest.fixture
def tournament(mock_uow):
    tournament = Tournament(id=uuid4(), title="Spring Cup", year=2026)
    mock_uow.tournaments.get_by_id.return_value = tournament
    mock_uow.events.count_by_tournament.return_value = 0
    mock_uow.teams.list_by_tournament.return_value = []
    mock_uow.team_members.count_by_team.return_value = 2
    return tournament


@pytest.fixture
def final(mock_uow):
    event = make_event(
        mode=EventMode.event,
        type=EventType.team,
        status=EventStatus.completed,
        team_size=2,
        title="Cup Final",
    )
    mock_uow.events.get_by_id.return_value = event
    mock_uow.event_winners.list_by_event.return_value = []
    return event


def _team(event, name, points=0):
    return Team(id=uuid4(), name=name, leader_id=uuid4(), event_id=event.id, points=points)


@pytest.mark.asyncio
async def test_create_tournament(mock_uow, core_identity):
    command = TournamentCommand(
        title="  Spring Cup ",
        year=2026,
        start_date=datetime(2026, 3, 1),
        end_date=datetime(2026, 5, 1),
    )

    result = await CreateTournamentUseCase(mock_uow).execute(core_identity, command)

    assert result.is_ok()
    assert result.value.title == "Spring Cup"
    assert result.value.status == "upcoming"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides, code",
    [
        ({"title": "Cu"}, "INVALID_TITLE"),
        ({"year": 1999}, "INVALID_YEAR"),
        ({"start_date": datetime(2026, 5, 1), "end_date": datetime(2026, 3, 1)}, "INVALID_SCHEDULE"),
    ],
)
async def test_create_tournament_validation(mock_uow, core_identity, overrides, code):
    command = TournamentCommand(**{"title": "Spring Cup", "year": 2026, **overrides})

    result = await CreateTournamentUseCase(mock_uow).execute(core_identity, command)

    assert result.error.code == code
    mock_uow.tournaments.create.assert_not_called()


@pytest.mark.asyncio
async def test_members_cannot_create_tournaments(mock_uow, member_identity):
    command = TournamentCommand(title="Spring Cup", year=2026)

    result = await CreateTournamentUseCase(mock_uow).execute(member_identity, command)

    assert result.error.code == "CORE_ONLY"


@pytest.mark.asyncio
async def test_status_advances_one_step(mock_uow, core_identity, tournament):
    result = await UpdateTournamentStatusUseCase(mock_uow).execute(
        core_identity, tournament.id, TournamentStatus.registration_open
    )

    assert result.value.status == "registration_open"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_status_cannot_skip_or_go_back(mock_uow, core_identity, tournament):
    skipped = await UpdateTournamentStatusUseCase(mock_uow).execute(
        core_identity, tournament.id, TournamentStatus.completed
    )
    tournament.status = TournamentStatus.completed
    backwards = await UpdateTournamentStatusUseCase(mock_uow).execute(
        core_identity, tournament.id, TournamentStatus.ongoing
    )

    assert skipped.error.code == "INVALID_STATUS_TRANSITION"
    assert backwards.error.code == "INVALID_STATUS_TRANSITION"
    mock_uow.tournaments.update.assert_not_called()


@pytest.mark.asyncio
async def test_reset_zeroes_points(mock_uow, core_identity, tournament, final):
    tournament.status = TournamentStatus.completed
    teams = [_team(final, "Rustaceans", 175), _team(final, "Gophers", 0)]
    mock_uow.teams.list_by_tournament.return_value = teams

    result = await ResetTournamentUseCase(mock_uow).execute(core_identity, tournament.id)

    assert result.value.status == "upcoming"
    assert result.value.team_count == 2
    assert [t.points for t in teams] == [0, 0]
    mock_uow.teams.update.assert_called_once_with(teams[0])


@pytest.mark.asyncio
async def test_delete_refused_while_in_use(mock_uow, core_identity, tournament):
    mock_uow.events.count_by_tournament.return_value = 1

    result = await DeleteTournamentUseCase(mock_uow).execute(core_identity, tournament.id)

    assert result.error.code == "TOURNAMENT_IN_USE"
    mock_uow.tournaments.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_unused_tournament(mock_uow, core_identity, tournament):
    result = await DeleteTournamentUseCase(mock_uow).execute(core_identity, tournament.id)

    assert result.is_ok()
    mock_uow.tournaments.delete.assert_called_once_with(tournament)


@pytest.mark.asyncio
async def test_tournament_leaderboard_ranks(mock_uow, tournament, final):
    mock_uow.teams.list_by_tournament.return_value = [
        _team(final, "Rustaceans", 175),
        _team(final, "Gophers", 75),
    ]

    result = await GetTournamentLeaderboardUseCase(mock_uow).execute(tournament.id)

    assert [(e.rank, e.name, e.points) for e in result.value] == [
        (1, "Rustaceans", 175),
        (2, "Gophers", 75),
    ]
    mock_uow.teams.list_by_tournament.assert_called_once_with(tournament.id)


@pytest.mark.asyncio
async def test_unknown_tournament_leaderboard(mock_uow):
    mock_uow.tournaments.get_by_id.return_value = None

    result = await GetTournamentLeaderboardUseCase(mock_uow).execute(uuid4())

    assert result.error.code == "TOURNAMENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_winners_award_default_points(mock_uow, core_identity, final):
    first, second = _team(final, "Rustaceans", 10), _team(final, "Gophers")
    mock_uow.teams.get_by_id.side_effect = lambda team_id: {first.id: first, second.id: second}.get(team_id)
    command = SetWinnersCommand(
        winners=[
            WinnerInput(position=2, team_id=second.id),
            WinnerInput(position=1, team_id=first.id, prize="Trophy"),
        ]
    )

    result = await SetEventWinnersUseCase(mock_uow).execute(core_identity, final.id, command)

    assert [(w.position, w.team_name, w.points_awarded) for w in result.value] == [
        (1, "Rustaceans", 100),
        (2, "Gophers", 75),
    ]
    assert (first.points, second.points) == (110, 75)
    mock_uow.event_winners.delete_by_event.assert_called_once_with(final.id)
    audit = mock_uow.audit_logs.create.call_args.args[0]
    assert audit.action == "winners_declared"
    assert audit.event_metadata["winner_count"] == 2


@pytest.mark.asyncio
async def test_declaring_again_takes_back_earlier_points(mock_uow, core_identity, final):
    old_winner, new_winner = _team(final, "Rustaceans", 100), _team(final, "Gophers", 0)
    mock_uow.teams.get_by_id.side_effect = lambda team_id: {
        old_winner.id: old_winner,
        new_winner.id: new_winner,
    }.get(team_id)
    mock_uow.event_winners.list_by_event.return_value = [
        EventWinner(event_id=final.id, position=1, team_id=old_winner.id, points_awarded=100)
    ]
    command = SetWinnersCommand(winners=[WinnerInput(position=1, team_id=new_winner.id, points=40)])

    result = await SetEventWinnersUseCase(mock_uow).execute(core_identity, final.id, command)

    assert result.is_ok()
    assert (old_winner.points, new_winner.points) == (0, 40)


@pytest.mark.asyncio
async def test_winners_need_a_completed_event(mock_uow, core_identity, final):
    final.status = EventStatus.ongoing
    command = SetWinnersCommand(winners=[WinnerInput(position=1, team_id=uuid4())])

    result = await SetEventWinnersUseCase(mock_uow).execute(core_identity, final.id, command)

    assert result.error.code == "EVENT_NOT_COMPLETED"
    mock_uow.event_winners.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "winners",
    [
        [WinnerInput(position=4)],
        [WinnerInput(position=1), WinnerInput(position=1)],
        [WinnerInput(position=1)],
    ],
)
async def test_invalid_winner_lists(mock_uow, core_identity, final, winners):
    result = await SetEventWinnersUseCase(mock_uow).execute(
        core_identity, final.id, SetWinnersCommand(winners=winners)
    )

    assert result.error.code == "INVALID_WINNERS"


@pytest.mark.asyncio
async def test_winning_team_must_belong_to_event(mock_uow, core_identity, final):
    outsider = Team(id=uuid4(), name="Outsiders", leader_id=uuid4(), event_id=uuid4())
    mock_uow.teams.get_by_id.return_value = outsider
    command = SetWinnersCommand(winners=[WinnerInput(position=1, team_id=outsider.id)])

    result = await SetEventWinnersUseCase(mock_uow).execute(core_identity, final.id, command)

    assert result.error.code == "INVALID_WINNERS"
    mock_uow.event_winners.delete_by_event.assert_not_called()


@pytest.mark.asyncio
async def test_individual_event_winners_are_participants(mock_uow, core_identity, final):
    final.type = EventType.individual
    participant = make_participant(final, name="Grace")
    mock_uow.participants.get_by_event_and_user.return_value = participant
    command = SetWinnersCommand(winners=[WinnerInput(position=1, user_id=participant.user_id)])

    result = await SetEventWinnersUseCase(mock_uow).execute(core_identity, final.id, command)

    assert result.value[0].user_name == "Grace"
    assert result.value[0].team_id is None
    mock_uow.teams.update.assert_not_called()


@pytest.mark.asyncio
async def test_list_winners(mock_uow, final):
    team = _team(final, "Rustaceans")
    mock_uow.event_winners.list_by_event.return_value = [
        EventWinner(event_id=final.id, position=1, team_id=team.id, points_awarded=100)
    ]
    mock_uow.teams.list_by_ids.return_value = [team]

    result = await ListEventWinnersUseCase(mock_uow).execute(final.id)

    assert result.value[0].team_name == "Rustaceans"
    assert result.value[0].points_awarded == 100

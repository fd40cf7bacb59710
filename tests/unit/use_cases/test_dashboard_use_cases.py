from unittest.mock import MagicMock

import pytest

from clubhub.app.use_cases.dashboard import GetCoreStatsUseCase, GetMemberStatsUseCase
from clubhub.domain.entities import EventMode
from clubhub.libs.result import ErrorKind
from tests.unit.conftest import build_mock_uow


@pytest.fixture
def uow_factory():
    uow = build_mock_uow()
    factory = MagicMock(return_value=uow)
    factory.uow = uow
    return factory


@pytest.mark.asyncio
async def test_core_stats(uow_factory, core_identity):
    uow = uow_factory.uow

    async def count(mode=None, statuses=None):
        if mode == EventMode.workshop:
            return 4
        return 2 if statuses else 9

    uow.events.count.side_effect = count
    uow.profiles.count_by_role.return_value = 30

    result = await GetCoreStatsUseCase(uow_factory).execute(core_identity)

    assert result.is_ok()
    assert result.value.total_events == 9
    assert result.value.upcoming_events == 2
    assert result.value.completed_events == 2
    assert result.value.total_workshops == 4
    assert result.value.active_members == 30
    # one unit of work per figure
    assert uow_factory.call_count == 5


@pytest.mark.asyncio
async def test_failing_figure_falls_back_to_default(uow_factory, core_identity):
    uow = uow_factory.uow
    uow.events.count.return_value = 5
    uow.profiles.count_by_role.side_effect = RuntimeError("database is locked")

    result = await GetCoreStatsUseCase(uow_factory).execute(core_identity)

    assert result.is_ok()
    assert result.value.active_members == 0
    assert result.value.total_events == 5


@pytest.mark.asyncio
async def test_core_stats_for_members_is_forbidden(uow_factory, member_identity):
    result = await GetCoreStatsUseCase(uow_factory).execute(member_identity)

    assert result.error.kind == ErrorKind.FORBIDDEN
    uow_factory.assert_not_called()


@pytest.mark.asyncio
async def test_member_stats_survive_failures(uow_factory, member_identity):
    uow = uow_factory.uow
    uow.participants.count_by_user.return_value = 3
    uow.team_members.list_by_member.side_effect = RuntimeError("boom")
    uow.invitations.list_pending_by_invitee.return_value = []
    uow.applications.list_by_user.return_value = []
    uow.teams.list_by_leader.return_value = []
    uow.applications.list_pending_by_teams.return_value = []

    result = await GetMemberStatsUseCase(uow_factory).execute(member_identity)

    assert result.is_ok()
    assert result.value.events_participated == 3
    assert result.value.my_teams == []
    assert result.value.team_points == 0
    assert result.value.pending_actions == 0

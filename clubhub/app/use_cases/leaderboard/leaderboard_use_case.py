"""
Leaderboard Use Cases

Team ranking by points, and core-team point adjustments.
"""

import logging
from typing import List
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import core_only
from clubhub.domain.entities import EventAuditLog, Team
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import LeaderboardEntry, TeamPointsResponse

logger = logging.getLogger(__name__)


async def rank_teams(uow: UnitOfWork, teams: List[Team]) -> List[LeaderboardEntry]:
    """Entries for teams already ordered by points; ranks are 1-based"""
    entries = []
    for rank, team in enumerate(teams, start=1):
        entries.append(
            LeaderboardEntry(
                rank=rank,
                team_id=str(team.id),
                name=team.name,
                points=team.points,
                member_count=await uow.team_members.count_by_team(team.id),
            )
        )
    return entries


class GetLeaderboardUseCase:
    """Teams by points desc, then name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, limit: int = 50) -> Result[List[LeaderboardEntry]]:
        async with self.uow:
            teams = await self.uow.teams.list_ranked(limit)
            return Return.ok(await rank_teams(self.uow, teams))


class AdjustTeamPointsUseCase:
    """
    Business Rules:
    - Core team only
    - Points never drop below zero
    - Audit: team_points_adjusted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, team_id: UUID, delta: int, reason: str = ""
    ) -> Result[TeamPointsResponse]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            team = await self.uow.teams.get_by_id(team_id)
            if team is None:
                return Return.err(Error(ErrorKind.NOT_FOUND, "TEAM_NOT_FOUND", "Team not found"))

            team.points = max(0, team.points + delta)
            team = await self.uow.teams.update(team)

            await self.uow.audit_logs.create(
                EventAuditLog(
                    event_id=team.event_id,
                    performed_by=identity.user_id,
                    action="team_points_adjusted",
                    event_metadata={
                        "team_id": str(team.id),
                        "delta": delta,
                        "points": team.points,
                        "reason": reason,
                    },
                )
            )

            await self.uow.commit()

            logger.info("Team %s points adjusted by %s to %s", team.id, delta, team.points)

            return Return.ok(TeamPointsResponse(team_id=str(team.id), points=team.points))

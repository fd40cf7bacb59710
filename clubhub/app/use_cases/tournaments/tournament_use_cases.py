"""
Tournament Use Cases

Core-team management of tournaments and the per-tournament standings.
Teams join a tournament through the tournament's events; their points
are what the standings rank.
"""

import logging
from typing import List, Optional
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.events.validation import with_naive_dates
from clubhub.app.use_cases.guards import core_only
from clubhub.app.use_cases.leaderboard import LeaderboardEntry, rank_teams
from clubhub.domain.base import utcnow
from clubhub.domain.entities import Tournament, TournamentStatus
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import TournamentCommand, TournamentDetails, TournamentInfo

logger = logging.getLogger(__name__)

TOURNAMENT_NOT_FOUND = Error(ErrorKind.NOT_FOUND, "TOURNAMENT_NOT_FOUND", "Tournament not found")

# Each status may only advance to the next one; a reset goes back to upcoming
NEXT_STATUS = {
    TournamentStatus.upcoming: TournamentStatus.registration_open,
    TournamentStatus.registration_open: TournamentStatus.ongoing,
    TournamentStatus.ongoing: TournamentStatus.completed,
}

MIN_YEAR = 2000
MAX_YEAR = 2100


def _invalid(code: str, message: str) -> Error:
    return Error(ErrorKind.VALIDATION, code, message)


def validate_tournament(command: TournamentCommand) -> Optional[Error]:
    if not 3 <= len(command.title.strip()) <= 200:
        return _invalid("INVALID_TITLE", "Title must be between 3 and 200 characters")
    if not MIN_YEAR <= command.year <= MAX_YEAR:
        return _invalid("INVALID_YEAR", f"Year must be between {MIN_YEAR} and {MAX_YEAR}")
    if command.start_date and command.end_date and command.end_date < command.start_date:
        return _invalid("INVALID_SCHEDULE", "End date must not be before the start date")
    return None


async def _info(uow: UnitOfWork, tournament: Tournament) -> TournamentInfo:
    teams = await uow.teams.list_by_tournament(tournament.id)
    event_count = await uow.events.count_by_tournament(tournament.id)
    return TournamentInfo.from_entity(tournament, len(teams), event_count)


class CreateTournamentUseCase:
    """
    Business Rules:
    - Core team only
    - Title 3-200 characters, year within range, end not before start
    - New tournaments start as upcoming
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, command: TournamentCommand) -> Result[TournamentInfo]:
        command = with_naive_dates(command)
        error = core_only(identity) or validate_tournament(command)
        if error:
            return Return.err(error)

        async with self.uow:
            tournament = await self.uow.tournaments.create(
                Tournament(
                    title=command.title.strip(),
                    description=command.description.strip(),
                    year=command.year,
                    start_date=command.start_date,
                    end_date=command.end_date,
                    status=TournamentStatus.upcoming,
                    created_by=identity.user_id,
                )
            )
            await self.uow.commit()

            logger.info("Tournament %s created by %s", tournament.id, identity.user_id)

            return Return.ok(TournamentInfo.from_entity(tournament))


class ListTournamentsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity) -> Result[List[TournamentInfo]]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            tournaments = await self.uow.tournaments.list_all()
            return Return.ok([await _info(self.uow, t) for t in tournaments])


class GetTournamentDetailsUseCase:
    """Tournament with its team and event counts and its standings"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, tournament_id: UUID) -> Result[TournamentDetails]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            tournament = await self.uow.tournaments.get_by_id(tournament_id)
            if tournament is None:
                return Return.err(TOURNAMENT_NOT_FOUND)

            teams = await self.uow.teams.list_by_tournament(tournament.id)
            event_count = await self.uow.events.count_by_tournament(tournament.id)
            return Return.ok(
                TournamentDetails(
                    tournament=TournamentInfo.from_entity(tournament, len(teams), event_count),
                    leaderboard=await rank_teams(self.uow, teams),
                )
            )


class UpdateTournamentStatusUseCase:
    """
    Business Rules:
    - Core team only
    - upcoming -> registration_open -> ongoing -> completed, one step at a time
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, tournament_id: UUID, status: TournamentStatus
    ) -> Result[TournamentInfo]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            tournament = await self.uow.tournaments.get_by_id(tournament_id)
            if tournament is None:
                return Return.err(TOURNAMENT_NOT_FOUND)

            if NEXT_STATUS.get(tournament.status) != status:
                return Return.err(
                    Error(
                        ErrorKind.INVALID_STATE,
                        "INVALID_STATUS_TRANSITION",
                        f"Tournament cannot move from {tournament.status.value} to {status.value}",
                    )
                )

            previous = tournament.status
            tournament.status = status
            tournament.updated_at = utcnow()
            tournament = await self.uow.tournaments.update(tournament)
            info = await _info(self.uow, tournament)
            await self.uow.commit()

            logger.info(
                "Tournament %s moved from %s to %s by %s",
                tournament.id,
                previous.value,
                status.value,
                identity.user_id,
            )

            return Return.ok(info)


class ResetTournamentUseCase:
    """
    Business Rules:
    - Core team only
    - Every tournament team goes back to 0 points
    - Status returns to upcoming
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, tournament_id: UUID) -> Result[TournamentInfo]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            tournament = await self.uow.tournaments.get_by_id(tournament_id)
            if tournament is None:
                return Return.err(TOURNAMENT_NOT_FOUND)

            teams = await self.uow.teams.list_by_tournament(tournament.id)
            for team in teams:
                if team.points:
                    team.points = 0
                    await self.uow.teams.update(team)

            tournament.status = TournamentStatus.upcoming
            tournament.updated_at = utcnow()
            tournament = await self.uow.tournaments.update(tournament)

            event_count = await self.uow.events.count_by_tournament(tournament.id)
            await self.uow.commit()

            logger.info("Tournament %s reset by %s", tournament.id, identity.user_id)

            return Return.ok(TournamentInfo.from_entity(tournament, len(teams), event_count))


class DeleteTournamentUseCase:
    """
    Business Rules:
    - Core team only
    - Refused while any event or team belongs to the tournament
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, tournament_id: UUID) -> Result[None]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            tournament = await self.uow.tournaments.get_by_id(tournament_id)
            if tournament is None:
                return Return.err(TOURNAMENT_NOT_FOUND)

            if (
                await self.uow.events.count_by_tournament(tournament.id)
                or await self.uow.teams.list_by_tournament(tournament.id)
            ):
                return Return.err(
                    Error(
                        ErrorKind.CONFLICT,
                        "TOURNAMENT_IN_USE",
                        "Cannot delete a tournament that has events or teams",
                    )
                )

            await self.uow.tournaments.delete(tournament)
            await self.uow.commit()

            logger.info("Tournament %s deleted by %s", tournament_id, identity.user_id)

            return Return.ok()


class GetTournamentLeaderboardUseCase:
    """Standings of one tournament, open to every signed-in profile"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tournament_id: UUID) -> Result[List[LeaderboardEntry]]:
        async with self.uow:
            tournament = await self.uow.tournaments.get_by_id(tournament_id)
            if tournament is None:
                return Return.err(TOURNAMENT_NOT_FOUND)

            teams = await self.uow.teams.list_by_tournament(tournament.id)
            return Return.ok(await rank_teams(self.uow, teams))

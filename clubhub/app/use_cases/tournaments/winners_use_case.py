"""
Event Winner Use Cases

Declaring the podium of a completed event. Winning teams receive the
points of their place; declaring again replaces the earlier podium and
takes its points back first.
"""

import logging
from typing import Dict, List, Optional
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import core_only
from clubhub.domain.entities import (
    Event,
    EventAuditLog,
    EventMode,
    EventStatus,
    EventType,
    EventWinner,
    Team,
)
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import SetWinnersCommand, WinnerInfo, WinnerInput

logger = logging.getLogger(__name__)

EVENT_NOT_FOUND = Error(ErrorKind.NOT_FOUND, "EVENT_NOT_FOUND", "Event does not exist")

DEFAULT_POINTS = {1: 100, 2: 75, 3: 50}


def _invalid(message: str) -> Error:
    return Error(ErrorKind.VALIDATION, "INVALID_WINNERS", message)


def validate_winners(event: Event, winners: List[WinnerInput]) -> Optional[Error]:
    positions = [w.position for w in winners]
    if any(p not in DEFAULT_POINTS for p in positions):
        return _invalid("Positions must be 1, 2 or 3")
    if len(set(positions)) != len(positions):
        return _invalid("Each position can only be given once")
    if any(w.points is not None and w.points < 0 for w in winners):
        return _invalid("Points cannot be negative")

    if event.type == EventType.team:
        team_ids = [w.team_id for w in winners]
        if None in team_ids:
            return _invalid("Every winner of a team event needs a team")
        if len(set(team_ids)) != len(team_ids):
            return _invalid("A team can only win one position")
    else:
        user_ids = [w.user_id for w in winners]
        if None in user_ids:
            return _invalid("Every winner of an individual event needs a participant")
        if len(set(user_ids)) != len(user_ids):
            return _invalid("A participant can only win one position")
    return None


class SetEventWinnersUseCase:
    """
    Business Rules:
    - Core team only, for completed competitive events
    - Positions 1-3, each at most once; points default to 100/75/50
    - Team events name teams of the event, individual events name participants
    - Points of an earlier podium are taken back before the new one is awarded
    - Team points never drop below zero
    - Audit: winners_declared
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, event_id: UUID, command: SetWinnersCommand
    ) -> Result[List[WinnerInfo]]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None or event.mode != EventMode.event:
                return Return.err(EVENT_NOT_FOUND)

            if event.status != EventStatus.completed:
                return Return.err(
                    Error(
                        ErrorKind.INVALID_STATE,
                        "EVENT_NOT_COMPLETED",
                        "Winners can only be declared for a completed event",
                    )
                )

            error = validate_winners(event, command.winners)
            if error:
                return Return.err(error)

            teams: Dict[UUID, Team] = {}
            names: Dict[UUID, str] = {}
            for winner in command.winners:
                if event.type == EventType.team:
                    team = await self.uow.teams.get_by_id(winner.team_id)
                    if team is None or team.event_id != event.id:
                        return Return.err(_invalid("Winning teams must belong to the event"))
                    teams[team.id] = team
                else:
                    participant = await self.uow.participants.get_by_event_and_user(
                        event.id, winner.user_id
                    )
                    if participant is None:
                        return Return.err(_invalid("Winners must be registered for the event"))
                    names[winner.user_id] = participant.name

            for previous in await self.uow.event_winners.list_by_event(event.id):
                if previous.team_id is None or not previous.points_awarded:
                    continue
                team = teams.get(previous.team_id) or await self.uow.teams.get_by_id(previous.team_id)
                if team is not None:
                    team.points = max(0, team.points - previous.points_awarded)
                    teams[team.id] = team
            await self.uow.event_winners.delete_by_event(event.id)

            results = []
            for winner in sorted(command.winners, key=lambda w: w.position):
                points = winner.points if winner.points is not None else DEFAULT_POINTS[winner.position]
                row = await self.uow.event_winners.create(
                    EventWinner(
                        event_id=event.id,
                        position=winner.position,
                        team_id=winner.team_id if event.type == EventType.team else None,
                        user_id=winner.user_id if event.type != EventType.team else None,
                        points_awarded=points,
                        prize=winner.prize,
                    )
                )
                team = teams.get(row.team_id) if row.team_id else None
                if team is not None:
                    team.points += points
                results.append(
                    WinnerInfo(
                        position=row.position,
                        team_id=str(row.team_id) if row.team_id else None,
                        team_name=team.name if team else None,
                        user_id=str(row.user_id) if row.user_id else None,
                        user_name=names.get(row.user_id) if row.user_id else None,
                        points_awarded=row.points_awarded,
                        prize=row.prize,
                    )
                )

            for team in teams.values():
                await self.uow.teams.update(team)

            await self.uow.audit_logs.create(
                EventAuditLog(
                    event_id=event.id,
                    performed_by=identity.user_id,
                    action="winners_declared",
                    event_metadata={
                        "winner_count": len(results),
                        "winners": [r.model_dump() for r in results],
                    },
                )
            )

            await self.uow.commit()

            logger.info("%s winners declared for event %s by %s", len(results), event.id, identity.user_id)

            return Return.ok(results)


class ListEventWinnersUseCase:
    """Podium of an event, by position"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, event_id: UUID) -> Result[List[WinnerInfo]]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None or event.mode != EventMode.event:
                return Return.err(EVENT_NOT_FOUND)

            winners = await self.uow.event_winners.list_by_event(event.id)
            teams = {
                t.id: t
                for t in await self.uow.teams.list_by_ids([w.team_id for w in winners if w.team_id])
            }

            items = []
            for winner in winners:
                user_name = None
                if winner.user_id:
                    profile = await self.uow.profiles.get_by_id(winner.user_id)
                    user_name = profile.full_name if profile else None
                team = teams.get(winner.team_id) if winner.team_id else None
                items.append(
                    WinnerInfo(
                        position=winner.position,
                        team_id=str(winner.team_id) if winner.team_id else None,
                        team_name=team.name if team else None,
                        user_id=str(winner.user_id) if winner.user_id else None,
                        user_name=user_name,
                        points_awarded=winner.points_awarded,
                        prize=winner.prize,
                    )
                )
            return Return.ok(items)

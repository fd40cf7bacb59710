"""
Dashboard Use Cases

Read-only aggregates. Stats sub-queries run concurrently, each in its
own unit of work; a failing sub-query is logged and reported as its
default value so the rest of the dashboard still renders.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, List

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork, UnitOfWorkFactory
from clubhub.app.use_cases.events.dtos import EventInfo
from clubhub.app.use_cases.guards import core_only
from clubhub.app.use_cases.teams.team_queries_use_case import load_my_teams
from clubhub.domain.base import utcnow
from clubhub.domain.entities import ApplicationStatus, EventMode, EventStatus, ProfileRole
from clubhub.libs.result import Result, Return

from .dtos import ActivityItem, CoreStats, MemberStats, UpcomingEvents

logger = logging.getLogger(__name__)

Query = Callable[[UnitOfWork], Awaitable[Any]]

OPEN_STATUSES = [EventStatus.upcoming, EventStatus.registration_open]


async def run_isolated(uow_factory: UnitOfWorkFactory, name: str, query: Query, default: Any):
    try:
        async with uow_factory() as uow:
            return await query(uow)
    except Exception:
        logger.warning("Dashboard query %s failed, using %r", name, default, exc_info=True)
        return default


class GetCoreStatsUseCase:
    def __init__(self, uow_factory: UnitOfWorkFactory):
        self.uow_factory = uow_factory

    async def execute(self, identity: Identity) -> Result[CoreStats]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        queries = {
            "total_events": lambda uow: uow.events.count(mode=EventMode.event),
            "upcoming_events": lambda uow: uow.events.count(
                mode=EventMode.event, statuses=OPEN_STATUSES
            ),
            "active_members": lambda uow: uow.profiles.count_by_role(ProfileRole.member),
            "total_workshops": lambda uow: uow.events.count(mode=EventMode.workshop),
            "completed_events": lambda uow: uow.events.count(
                mode=EventMode.event, statuses=[EventStatus.completed]
            ),
        }

        values = await asyncio.gather(
            *[run_isolated(self.uow_factory, name, query, 0) for name, query in queries.items()]
        )

        return Return.ok(CoreStats(**dict(zip(queries, values))))


class GetMemberStatsUseCase:
    def __init__(self, uow_factory: UnitOfWorkFactory):
        self.uow_factory = uow_factory

    async def execute(self, identity: Identity) -> Result[MemberStats]:
        user_id = identity.user_id

        async def pending_invitations(uow: UnitOfWork):
            now = utcnow()
            invitations = await uow.invitations.list_pending_by_invitee(user_id)
            return sum(1 for i in invitations if i.is_active(now))

        async def pending_applications(uow: UnitOfWork):
            applications = await uow.applications.list_by_user(user_id)
            return sum(1 for a in applications if a.status == ApplicationStatus.pending)

        async def applications_to_review(uow: UnitOfWork):
            teams = await uow.teams.list_by_leader(user_id)
            return len(await uow.applications.list_pending_by_teams([t.id for t in teams]))

        (
            events_participated,
            workshops_attended,
            teams,
            invitations,
            applications,
            to_review,
        ) = await asyncio.gather(
            run_isolated(
                self.uow_factory,
                "events_participated",
                lambda uow: uow.participants.count_by_user(user_id, mode=EventMode.event),
                0,
            ),
            run_isolated(
                self.uow_factory,
                "workshops_attended",
                lambda uow: uow.participants.count_by_user(
                    user_id, mode=EventMode.workshop, attended=True
                ),
                0,
            ),
            run_isolated(self.uow_factory, "my_teams", lambda uow: load_my_teams(uow, user_id), []),
            run_isolated(self.uow_factory, "pending_invitations", pending_invitations, 0),
            run_isolated(self.uow_factory, "pending_applications", pending_applications, 0),
            run_isolated(self.uow_factory, "applications_to_review", applications_to_review, 0),
        )

        return Return.ok(
            MemberStats(
                events_participated=events_participated,
                workshops_attended=workshops_attended,
                team_points=sum(t.points for t in teams),
                my_teams=teams,
                pending_invitations=invitations,
                pending_applications=applications,
                pending_actions=invitations + to_review,
            )
        )


class GetRecentActivityUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, limit: int = 10) -> Result[List[ActivityItem]]:
        async with self.uow:
            logs = await self.uow.audit_logs.list_recent(limit)
            events = {
                e.id: e
                for e in await self.uow.events.list_by_ids(
                    list({log.event_id for log in logs if log.event_id})
                )
            }

            return Return.ok(
                [
                    ActivityItem(
                        id=str(log.id),
                        action=log.action,
                        event_id=str(log.event_id) if log.event_id else None,
                        event_title=events[log.event_id].title if log.event_id in events else None,
                        performed_by=str(log.performed_by) if log.performed_by else None,
                        metadata=log.event_metadata or {},
                        performed_at=log.performed_at.isoformat(),
                    )
                    for log in logs
                ]
            )


class GetUpcomingEventsUseCase:
    """Events and workshops starting in the future, soonest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, limit: int = 5) -> Result[UpcomingEvents]:
        now = utcnow()
        async with self.uow:
            events = [
                e for e in await self.uow.events.list_all(statuses=OPEN_STATUSES) if e.start_date > now
            ][:limit]

            items = []
            for event in events:
                count = await self.uow.participants.count_by_event(event.id)
                items.append(EventInfo.from_entity(event, count))

            return Return.ok(UpcomingEvents(events=items))

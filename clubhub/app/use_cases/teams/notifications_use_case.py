from typing import List
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import NOT_AUTHORIZED
from clubhub.libs.result import Result, Return

from .dtos import NotificationInfo, StatusResponse


class ListNotificationsUseCase:
    """The caller's notifications, newest first, with team names joined by team_id"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity) -> Result[List[NotificationInfo]]:
        async with self.uow:
            notifications = await self.uow.notifications.list_by_recipient(identity.user_id)
            teams = {
                t.id: t
                for t in await self.uow.teams.list_by_ids(
                    list({n.team_id for n in notifications if n.team_id})
                )
            }

            return Return.ok(
                [
                    NotificationInfo(
                        id=str(n.id),
                        title=n.title,
                        message=n.message,
                        type=n.type,
                        read=n.read,
                        created_at=n.created_at.isoformat(),
                        team_id=str(n.team_id) if n.team_id else None,
                        team_name=teams[n.team_id].name if n.team_id in teams else None,
                    )
                    for n in notifications
                ]
            )


class MarkNotificationReadUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, notification_id: UUID) -> Result[StatusResponse]:
        async with self.uow:
            notification = await self.uow.notifications.get_by_id(notification_id)
            if notification is None or notification.recipient_id != identity.user_id:
                return Return.err(NOT_AUTHORIZED)

            notification.read = True
            await self.uow.notifications.update(notification)
            await self.uow.commit()

            return Return.ok(StatusResponse(status="read", message="Notification marked as read"))

"""
Pending User Use Cases

Core-team approval list: only emails on it may sign up.
"""

import logging
from typing import List
from uuid import UUID

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import core_only
from clubhub.domain.entities import PendingUser, ProfileRole
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import CreatePendingUserCommand, PendingUserInfo, UpdatePendingUserCommand

logger = logging.getLogger(__name__)

PENDING_USER_NOT_FOUND = Error(ErrorKind.NOT_FOUND, "PENDING_USER_NOT_FOUND", "Pending user not found")


class ListPendingUsersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity) -> Result[List[PendingUserInfo]]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            pending_users = await self.uow.pending_users.list_all()
            return Return.ok([PendingUserInfo.from_entity(p) for p in pending_users])


class CreatePendingUserUseCase:
    """
    Approve an email for signup.

    Business Rules:
    - Name and email are required
    - Email must not belong to a Profile or another PendingUser
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, command: CreatePendingUserCommand
    ) -> Result[PendingUserInfo]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        full_name = command.full_name.strip()
        email = command.email.strip().lower()
        if not full_name or not email:
            return Return.err(
                Error(ErrorKind.VALIDATION, "MISSING_FIELDS", "Full name and email are required")
            )

        async with self.uow:
            if await self.uow.profiles.get_by_email(email) is not None:
                return Return.err(
                    Error(ErrorKind.CONFLICT, "PROFILE_EXISTS", "A member with this email already exists")
                )

            if await self.uow.pending_users.get_by_email(email) is not None:
                return Return.err(
                    Error(ErrorKind.CONFLICT, "PENDING_USER_EXISTS", "This email is already pending approval")
                )

            pending_user = PendingUser(
                full_name=full_name,
                email=email,
                role=command.role,
                member_role=command.member_role,
                is_core_team=command.role == ProfileRole.core,
            )
            pending_user = await self.uow.pending_users.create(pending_user)

            await self.uow.commit()

            logger.info("Pending user %s approved by %s", email, identity.user_id)

            return Return.ok(PendingUserInfo.from_entity(pending_user))


class UpdatePendingUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Identity, pending_user_id: UUID, command: UpdatePendingUserCommand
    ) -> Result[PendingUserInfo]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            pending_user = await self.uow.pending_users.get_by_id(pending_user_id)
            if pending_user is None:
                return Return.err(PENDING_USER_NOT_FOUND)

            if command.full_name is not None:
                if not command.full_name.strip():
                    return Return.err(
                        Error(ErrorKind.VALIDATION, "MISSING_FIELDS", "Full name cannot be empty")
                    )
                pending_user.full_name = command.full_name.strip()
            if command.role is not None:
                pending_user.role = command.role
                pending_user.is_core_team = command.role == ProfileRole.core
            if command.member_role is not None:
                pending_user.member_role = command.member_role or None

            pending_user = await self.uow.pending_users.update(pending_user)
            await self.uow.commit()

            return Return.ok(PendingUserInfo.from_entity(pending_user))


class DeletePendingUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, pending_user_id: UUID) -> Result[None]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            pending_user = await self.uow.pending_users.get_by_id(pending_user_id)
            if pending_user is None:
                return Return.err(PENDING_USER_NOT_FOUND)

            await self.uow.pending_users.delete(pending_user)
            await self.uow.commit()

            logger.info("Pending user %s removed by %s", pending_user.email, identity.user_id)

            return Return.ok()

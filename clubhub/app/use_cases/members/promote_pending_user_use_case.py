import logging
from uuid import UUID, uuid4

from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.guards import core_only
from clubhub.domain.entities import Profile, ProfileRole
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import ProfileInfo

logger = logging.getLogger(__name__)


class PromotePendingUserUseCase:
    """
    Manual promotion of a pending user to a Profile.

    Business Rules:
    - Core team only
    - No Profile may exist for the email yet
    - The PendingUser row is deleted in the same transaction
    - When the user already signed up, the Profile reuses the Account id
      and the account is marked confirmed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity, pending_user_id: UUID) -> Result[ProfileInfo]:
        error = core_only(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            pending_user = await self.uow.pending_users.get_by_id(pending_user_id)
            if pending_user is None:
                return Return.err(
                    Error(ErrorKind.NOT_FOUND, "PENDING_USER_NOT_FOUND", "Pending user not found")
                )

            if await self.uow.profiles.get_by_email(pending_user.email) is not None:
                return Return.err(
                    Error(ErrorKind.CONFLICT, "PROFILE_EXISTS", "A member with this email already exists")
                )

            account = await self.uow.accounts.get_by_email(pending_user.email)

            role = ProfileRole(pending_user.role.value.lower())
            profile = Profile(
                id=account.id if account else uuid4(),
                full_name=pending_user.full_name,
                email=pending_user.email,
                role=role,
                member_role=pending_user.member_role,
                is_core_team=role == ProfileRole.core,
            )
            profile = await self.uow.profiles.create(profile)
            await self.uow.pending_users.delete(pending_user)

            if account is not None and not account.email_confirmed:
                account.email_confirmed = True
                account.verification_token_hash = None
                account.verification_expires_at = None
                await self.uow.accounts.update(account)

            await self.uow.commit()

            logger.info("Pending user %s promoted by %s", profile.email, identity.user_id)

            return Return.ok(ProfileInfo.from_entity(profile))

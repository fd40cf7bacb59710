import logging
from typing import Optional

from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.domain.base import utcnow
from clubhub.domain.entities import Profile, ProfileRole
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import ConfirmEmailResponse
from .signup_use_case import hash_verification_token

logger = logging.getLogger(__name__)

CONFIRMABLE_TYPES = ("signup", "email")


class ConfirmEmailUseCase:
    """
    Email verification callback.

    Business Rules:
    - token_hash and type are both required, type is signup or email
    - Token must match an unexpired, unconfirmed Account
    - A PendingUser must exist for the account email
    - PendingUser is promoted to Profile (id = Account id) and deleted
      in the same transaction, so the two never coexist
    - Account is marked confirmed and the token is consumed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, token_hash: Optional[str], verification_type: Optional[str]
    ) -> Result[ConfirmEmailResponse]:
        if not token_hash or not verification_type:
            return Return.err(
                Error(ErrorKind.VALIDATION, "MISSING_PARAMETERS", "token_hash and type are required")
            )

        if verification_type not in CONFIRMABLE_TYPES:
            return Return.err(
                Error(ErrorKind.VALIDATION, "INVALID_TYPE", f"Unsupported verification type: {verification_type}")
            )

        async with self.uow:
            account = await self.uow.accounts.get_by_verification_token_hash(
                hash_verification_token(token_hash)
            )
            if (
                account is None
                or account.verification_expires_at is None
                or utcnow() > account.verification_expires_at
            ):
                return Return.err(
                    Error(ErrorKind.UNAUTHORIZED, "INVALID_TOKEN", "Verification link is invalid or expired")
                )

            pending_user = await self.uow.pending_users.get_by_email(account.email)
            if pending_user is None:
                return Return.err(
                    Error(ErrorKind.NOT_FOUND, "PENDING_USER_NOT_FOUND", "No pending approval for this email")
                )

            role = ProfileRole(pending_user.role.value.lower())
            profile = Profile(
                id=account.id,
                full_name=pending_user.full_name,
                email=account.email,
                role=role,
                member_role=pending_user.member_role,
                is_core_team=role == ProfileRole.core,
            )
            await self.uow.profiles.create(profile)
            await self.uow.pending_users.delete(pending_user)

            account.email_confirmed = True
            account.verification_token_hash = None
            account.verification_expires_at = None
            await self.uow.accounts.update(account)

            await self.uow.commit()

            logger.info("Email confirmed, profile %s created with role %s", profile.id, role.value)

            return Return.ok(
                ConfirmEmailResponse(
                    user_id=str(profile.id),
                    role=role.value,
                    redirect_to=f"/{role.value}",
                )
            )

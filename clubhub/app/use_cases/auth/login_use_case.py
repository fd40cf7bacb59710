"""
Login Use Case

Checks credentials and issues a role-carrying JWT.
"""

import bcrypt

from clubhub.api.utils.jwt import generate_jwt
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import LoginResponse


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - A Profile must exist for the email
    - Password must verify against the Account hash
    - Email must be confirmed
    - Redirect target follows the profile role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        email = email.strip().lower()

        async with self.uow:
            profile = await self.uow.profiles.get_by_email(email)
            if profile is None:
                return Return.err(
                    Error(ErrorKind.UNAUTHORIZED, "ACCOUNT_NOT_FOUND", "No account found")
                )

            account = await self.uow.accounts.get_by_email(email)
            if account is None or not bcrypt.checkpw(
                password.encode("utf-8"), account.password_hash.encode("utf-8")
            ):
                return Return.err(
                    Error(ErrorKind.UNAUTHORIZED, "INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not account.email_confirmed:
                return Return.err(
                    Error(ErrorKind.FORBIDDEN, "EMAIL_NOT_CONFIRMED", "Please confirm your email first")
                )

            access_token = generate_jwt(profile.id, profile.role.value)

            return Return.ok(
                LoginResponse(
                    access_token=access_token,
                    role=profile.role.value,
                    redirect_to=f"/{profile.role.value}",
                )
            )

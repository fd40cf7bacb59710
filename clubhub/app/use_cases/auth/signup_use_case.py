import hashlib
import logging
import re
from datetime import timedelta

import bcrypt

from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.domain.base import generate_token, utcnow
from clubhub.domain.entities import Account
from clubhub.libs.result import Error, ErrorKind, Result, Return

from .dtos import SignupCommand, SignupResponse

logger = logging.getLogger(__name__)

_PASSWORD_RULES = (
    (re.compile(r".{8,}"), "at least 8 characters"),
    (re.compile(r"[A-Z]"), "an uppercase letter"),
    (re.compile(r"[a-z]"), "a lowercase letter"),
    (re.compile(r"\d"), "a digit"),
    (re.compile(r"[^A-Za-z0-9]"), "a special character"),
)


def hash_verification_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def password_problems(password: str) -> list:
    return [label for pattern, label in _PASSWORD_RULES if not pattern.search(password)]


class SignupUseCase:
    """
    Signup Use Case

    Only emails approved as PendingUser by the core team may sign up.

    Business Logic:
    1. Email and password are required, passwords must match
    2. Password must be strong (length, upper, lower, digit, symbol)
    3. A PendingUser with the email must exist
    4. No Account may already exist for the email
    5. Hash password with bcrypt cost factor 12
    6. Store the hash of a single-use verification token (24h)
    7. Return the verification link payload
    """

    def __init__(self, uow: UnitOfWork, verification_ttl_hours: int = 24):
        self.uow = uow
        self.verification_ttl_hours = verification_ttl_hours

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        email = command.email.strip().lower()

        if not email or not command.password:
            return Return.err(
                Error(ErrorKind.VALIDATION, "MISSING_FIELDS", "Email and password are required")
            )

        if command.password != command.confirm_password:
            return Return.err(
                Error(ErrorKind.VALIDATION, "PASSWORDS_DO_NOT_MATCH", "Passwords do not match")
            )

        problems = password_problems(command.password)
        if problems:
            return Return.err(
                Error(
                    ErrorKind.VALIDATION,
                    "WEAK_PASSWORD",
                    "Password must contain " + ", ".join(problems),
                )
            )

        async with self.uow:
            pending_user = await self.uow.pending_users.get_by_email(email)
            if pending_user is None:
                return Return.err(
                    Error(
                        ErrorKind.FORBIDDEN,
                        "EMAIL_NOT_ELIGIBLE",
                        "This email is not eligible to sign up",
                    )
                )

            existing = await self.uow.accounts.get_by_email(email)
            if existing is not None:
                return Return.err(
                    Error(ErrorKind.CONFLICT, "EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            password_hash = bcrypt.hashpw(command.password.encode("utf-8"), bcrypt.gensalt(12))

            # The plain token leaves with the response; only its hash is stored
            token = generate_token()
            account = Account(
                email=email,
                password_hash=password_hash.decode("utf-8"),
                email_confirmed=False,
                verification_token_hash=hash_verification_token(token),
                verification_expires_at=utcnow() + timedelta(hours=self.verification_ttl_hours),
            )
            await self.uow.accounts.create(account)

            await self.uow.commit()

            logger.info("Signup started for %s", email)

            return Return.ok(SignupResponse(email=email, token_hash=token))

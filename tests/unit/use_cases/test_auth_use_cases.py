from datetime import timedelta
from uuid import uuid4

import bcrypt
import pytest

from clubhub.app.use_cases.auth import (
    ConfirmEmailUseCase,
    LoginUseCase,
    SignupCommand,
    SignupUseCase,
)
from clubhub.app.use_cases.auth.signup_use_case import hash_verification_token
from clubhub.domain.base import utcnow
from clubhub.domain.entities import Account, PendingUser, Profile, ProfileRole
from clubhub.libs.result import ErrorKind

PASSWORD = "SecurePass123!"


def _signup(password=PASSWORD, confirm=None, email="new@club.org"):
    return SignupCommand(email=email, password=password, confirm_password=confirm or password)


@pytest.mark.asyncio
async def test_signup_for_approved_email(mock_uow):
    mock_uow.pending_users.get_by_email.return_value = PendingUser(full_name="New Member", email="new@club.org")
    mock_uow.accounts.get_by_email.return_value = None

    result = await SignupUseCase(mock_uow).execute(_signup(email="  New@Club.org "))

    assert result.is_ok()
    assert result.value.email == "new@club.org"
    assert result.value.type == "signup"
    assert result.value.redirect_to == "/pending-verification"

    account = mock_uow.accounts.create.call_args.args[0]
    assert bcrypt.checkpw(PASSWORD.encode(), account.password_hash.encode())
    assert account.email_confirmed is False
    # Only the hash of the emailed token is stored
    assert account.verification_token_hash == hash_verification_token(result.value.token_hash)
    assert account.verification_expires_at > utcnow() + timedelta(hours=23)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_signup_rejects_unapproved_email(mock_uow):
    mock_uow.pending_users.get_by_email.return_value = None

    result = await SignupUseCase(mock_uow).execute(_signup())

    assert result.error.code == "EMAIL_NOT_ELIGIBLE"
    assert result.error.kind == ErrorKind.FORBIDDEN
    mock_uow.accounts.create.assert_not_called()


@pytest.mark.asyncio
async def test_signup_existing_account(mock_uow):
    mock_uow.pending_users.get_by_email.return_value = PendingUser(full_name="New Member", email="new@club.org")
    mock_uow.accounts.get_by_email.return_value = Account(email="new@club.org", password_hash="x")

    result = await SignupUseCase(mock_uow).execute(_signup())

    assert result.error.code == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "password,confirm,code",
    [
        ("", "", "MISSING_FIELDS"),
        (PASSWORD, "Different123!", "PASSWORDS_DO_NOT_MATCH"),
        ("short", "short", "WEAK_PASSWORD"),
        ("alllowercase1!", "alllowercase1!", "WEAK_PASSWORD"),
    ],
)
async def test_signup_validation(mock_uow, password, confirm, code):
    command = SignupCommand(email="new@club.org", password=password, confirm_password=confirm)

    result = await SignupUseCase(mock_uow).execute(command)

    assert result.error.code == code
    assert result.error.kind == ErrorKind.VALIDATION
    mock_uow.pending_users.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_confirm_promotes_pending_user(mock_uow):
    token = "raw-token"
    account = Account(
        id=uuid4(),
        email="new@club.org",
        password_hash="x",
        verification_token_hash=hash_verification_token(token),
        verification_expires_at=utcnow() + timedelta(hours=1),
    )
    pending = PendingUser(full_name="New Member", email="new@club.org", role=ProfileRole.core)
    mock_uow.accounts.get_by_verification_token_hash.return_value = account
    mock_uow.pending_users.get_by_email.return_value = pending

    result = await ConfirmEmailUseCase(mock_uow).execute(token, "signup")

    assert result.is_ok()
    assert result.value.role == "core"
    assert result.value.redirect_to == "/core"

    profile = mock_uow.profiles.create.call_args.args[0]
    assert profile.id == account.id
    assert profile.is_core_team is True
    mock_uow.pending_users.delete.assert_called_once_with(pending)
    assert account.email_confirmed is True
    assert account.verification_token_hash is None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_confirm_expired_token(mock_uow):
    mock_uow.accounts.get_by_verification_token_hash.return_value = Account(
        email="new@club.org",
        password_hash="x",
        verification_expires_at=utcnow() - timedelta(minutes=1),
    )

    result = await ConfirmEmailUseCase(mock_uow).execute("raw-token", "signup")

    assert result.error.code == "INVALID_TOKEN"
    mock_uow.profiles.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "token,verification_type,code",
    [(None, "signup", "MISSING_PARAMETERS"), ("t", None, "MISSING_PARAMETERS"), ("t", "recovery", "INVALID_TYPE")],
)
async def test_confirm_parameter_checks(mock_uow, token, verification_type, code):
    result = await ConfirmEmailUseCase(mock_uow).execute(token, verification_type)

    assert result.error.code == code


@pytest.fixture
def confirmed_member(mock_uow):
    profile = Profile(id=uuid4(), full_name="Ada Member", email="ada@club.org", role=ProfileRole.member)
    account = Account(
        id=profile.id,
        email=profile.email,
        password_hash=bcrypt.hashpw(PASSWORD.encode(), bcrypt.gensalt(4)).decode(),
        email_confirmed=True,
    )
    mock_uow.profiles.get_by_email.return_value = profile
    mock_uow.accounts.get_by_email.return_value = account
    return account


@pytest.mark.asyncio
async def test_login_success(mock_uow, confirmed_member):
    result = await LoginUseCase(mock_uow).execute("ADA@club.org", PASSWORD)

    assert result.is_ok()
    assert result.value.role == "member"
    assert result.value.redirect_to == "/member"
    assert result.value.access_token
    mock_uow.profiles.get_by_email.assert_called_once_with("ada@club.org")


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow, confirmed_member):
    result = await LoginUseCase(mock_uow).execute("ada@club.org", "WrongPass123!")

    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.kind == ErrorKind.UNAUTHORIZED


@pytest.mark.asyncio
async def test_login_unconfirmed_email(mock_uow, confirmed_member):
    confirmed_member.email_confirmed = False

    result = await LoginUseCase(mock_uow).execute("ada@club.org", PASSWORD)

    assert result.error.code == "EMAIL_NOT_CONFIRMED"


@pytest.mark.asyncio
async def test_login_without_profile(mock_uow):
    mock_uow.profiles.get_by_email.return_value = None

    result = await LoginUseCase(mock_uow).execute("ghost@club.org", PASSWORD)

    assert result.error.code == "ACCOUNT_NOT_FOUND"
    assert result.error.message == "No account found"

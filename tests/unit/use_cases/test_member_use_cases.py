from uuid import uuid4

import pytest

from clubhub.app.use_cases.members import (
    CreatePendingUserCommand,
    CreatePendingUserUseCase,
    DeletePendingUserUseCase,
    PromotePendingUserUseCase,
    UpdatePendingUserCommand,
    UpdatePendingUserUseCase,
)
from clubhub.domain.entities import Account, PendingUser, Profile, ProfileRole


@pytest.fixture
def pending_user(mock_uow):
    pending_user = PendingUser(id=uuid4(), full_name="Grace Hopper", email="grace@club.org")
    mock_uow.pending_users.get_by_id.return_value = pending_user
    return pending_user


@pytest.mark.asyncio
async def test_create_pending_user_normalizes_email(mock_uow, core_identity):
    mock_uow.profiles.get_by_email.return_value = None
    mock_uow.pending_users.get_by_email.return_value = None
    command = CreatePendingUserCommand(
        full_name=" Grace Hopper ", email=" Grace@Club.org ", role=ProfileRole.core
    )

    result = await CreatePendingUserUseCase(mock_uow).execute(core_identity, command)

    assert result.value.email == "grace@club.org"
    assert result.value.full_name == "Grace Hopper"
    created = mock_uow.pending_users.create.call_args.args[0]
    assert created.is_core_team is True
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_pending_user_for_existing_profile(mock_uow, core_identity, member_profile):
    mock_uow.profiles.get_by_email.return_value = member_profile
    command = CreatePendingUserCommand(full_name="Ada", email=member_profile.email)

    result = await CreatePendingUserUseCase(mock_uow).execute(core_identity, command)

    assert result.error.code == "PROFILE_EXISTS"
    mock_uow.pending_users.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_pending_user_twice(mock_uow, core_identity, pending_user):
    mock_uow.profiles.get_by_email.return_value = None
    mock_uow.pending_users.get_by_email.return_value = pending_user
    command = CreatePendingUserCommand(full_name="Grace", email=pending_user.email)

    result = await CreatePendingUserUseCase(mock_uow).execute(core_identity, command)

    assert result.error.code == "PENDING_USER_EXISTS"


@pytest.mark.asyncio
async def test_members_cannot_approve_emails(mock_uow, member_identity):
    command = CreatePendingUserCommand(full_name="Grace", email="grace@club.org")

    result = await CreatePendingUserUseCase(mock_uow).execute(member_identity, command)

    assert result.error.code == "CORE_ONLY"


@pytest.mark.asyncio
async def test_update_pending_user_role(mock_uow, core_identity, pending_user):
    command = UpdatePendingUserCommand(role=ProfileRole.core, member_role="treasurer")

    result = await UpdatePendingUserUseCase(mock_uow).execute(core_identity, pending_user.id, command)

    assert result.value.role == "core"
    assert result.value.member_role == "treasurer"
    assert pending_user.is_core_team is True


@pytest.mark.asyncio
async def test_update_and_delete_missing_pending_user(mock_uow, core_identity):
    mock_uow.pending_users.get_by_id.return_value = None

    updated = await UpdatePendingUserUseCase(mock_uow).execute(
        core_identity, uuid4(), UpdatePendingUserCommand(full_name="Grace")
    )
    deleted = await DeletePendingUserUseCase(mock_uow).execute(core_identity, uuid4())

    assert updated.error.code == "PENDING_USER_NOT_FOUND"
    assert deleted.error.code == "PENDING_USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_pending_user(mock_uow, core_identity, pending_user):
    result = await DeletePendingUserUseCase(mock_uow).execute(core_identity, pending_user.id)

    assert result.is_ok()
    mock_uow.pending_users.delete.assert_called_once_with(pending_user)


@pytest.mark.asyncio
async def test_promote_reuses_account_id(mock_uow, core_identity, pending_user):
    account = Account(id=uuid4(), email=pending_user.email, password_hash="x" * 60)
    mock_uow.profiles.get_by_email.return_value = None
    mock_uow.accounts.get_by_email.return_value = account

    result = await PromotePendingUserUseCase(mock_uow).execute(core_identity, pending_user.id)

    assert result.value.id == str(account.id)
    assert result.value.role == "member"
    assert account.email_confirmed is True
    mock_uow.pending_users.delete.assert_called_once_with(pending_user)
    mock_uow.accounts.update.assert_called_once_with(account)


@pytest.mark.asyncio
async def test_promote_without_signup(mock_uow, core_identity, pending_user):
    mock_uow.profiles.get_by_email.return_value = None
    mock_uow.accounts.get_by_email.return_value = None

    result = await PromotePendingUserUseCase(mock_uow).execute(core_identity, pending_user.id)

    assert result.value.email == pending_user.email
    mock_uow.accounts.update.assert_not_called()


@pytest.mark.asyncio
async def test_promote_when_profile_exists(mock_uow, core_identity, pending_user):
    mock_uow.profiles.get_by_email.return_value = Profile(
        id=uuid4(), full_name="Grace Hopper", email=pending_user.email
    )

    result = await PromotePendingUserUseCase(mock_uow).execute(core_identity, pending_user.id)

    assert result.error.code == "PROFILE_EXISTS"
    mock_uow.profiles.create.assert_not_called()
    mock_uow.pending_users.delete.assert_not_called()


@pytest.mark.asyncio
async def test_promote_missing_pending_user(mock_uow, core_identity):
    mock_uow.pending_users.get_by_id.return_value = None

    result = await PromotePendingUserUseCase(mock_uow).execute(core_identity, uuid4())

    assert result.error.code == "PENDING_USER_NOT_FOUND"

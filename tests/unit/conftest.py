from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from clubhub.app.services.identity import Identity
from clubhub.domain.entities import Profile, ProfileRole

REPOSITORIES = {
    "accounts": ["get_by_email", "get_by_verification_token_hash", "create", "update"],
    "profiles": [
        "get_by_id",
        "get_by_email",
        "list_all",
        "list_invitable",
        "count_by_role",
        "create",
        "update",
    ],
    "pending_users": ["get_by_id", "get_by_email", "list_all", "create", "update", "delete"],
    "events": [
        "get_by_id",
        "list_all",
        "list_by_ids",
        "count",
        "count_by_tournament",
        "create",
        "update",
        "delete",
    ],
    "workshop_hosts": ["list_by_event", "create", "delete_by_event"],
    "participants": [
        "get_by_id",
        "get_by_event_and_user",
        "list_by_event",
        "list_by_user",
        "count_by_event",
        "count_by_user",
        "create_within_capacity",
        "update",
        "delete",
        "delete_by_event",
    ],
    "audit_logs": ["create", "list_recent", "delete_by_event"],
    "teams": [
        "get_by_id",
        "get_by_event_and_name",
        "list_by_ids",
        "list_by_event",
        "list_by_leader",
        "list_ranked",
        "list_by_tournament",
        "create",
        "update",
    ],
    "team_members": ["get", "list_by_team", "list_by_member", "list_member_ids", "count_by_team", "create"],
    "team_registrations": ["get_by_team", "list_by_event", "create"],
    "invitations": [
        "get_by_id",
        "list_by_team",
        "list_by_team_and_invitee",
        "list_pending_by_invitee",
        "create",
        "update",
        "delete_by_team_and_invitee",
    ],
    "applications": [
        "get_by_id",
        "get_pending",
        "list_by_user",
        "list_pending_by_teams",
        "create",
        "update",
        "delete",
    ],
    "notifications": ["get_by_id", "list_by_recipient", "create", "update"],
    "announcements": ["get_by_id", "list_all", "count_since", "create", "update", "delete"],
    "tournaments": ["get_by_id", "list_all", "create", "update", "delete"],
    "event_winners": ["list_by_event", "create", "delete_by_event"],
}


def build_mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for name, methods in REPOSITORIES.items():
        repository = MagicMock()
        for method in methods:
            setattr(repository, method, AsyncMock())
        setattr(uow, name, repository)

    # create/update hand back what they were given
    for name in REPOSITORIES:
        repository = getattr(uow, name)
        for method in ("create", "update"):
            if method in REPOSITORIES[name]:
                getattr(repository, method).side_effect = lambda entity: entity

    return uow


@pytest.fixture
def mock_uow():
    return build_mock_uow()


@pytest.fixture
def member_profile():
    return Profile(id=uuid4(), full_name="Ada Member", email="ada@club.org", role=ProfileRole.member)


@pytest.fixture
def member_identity(member_profile):
    return Identity(user_id=member_profile.id, role=ProfileRole.member)


@pytest.fixture
def core_identity():
    return Identity(user_id=uuid4(), role=ProfileRole.core, member_role="president")


import pytest
from httpx import AsyncClient

from clubhub.domain.entities import PendingUser, ProfileRole

PASSWORD = "SecurePass123!"


@pytest.mark.asyncio
async def test_signup_confirm_login_flow(client: AsyncClient, db_session):
    """An approved email signs up, confirms and lands on the member dashboard"""
    db_session.add(PendingUser(full_name="Ada Lovelace", email="ada@club.org", role=ProfileRole.member))
    await db_session.commit()

    signup = await client.post(
        "/api/auth/signup",
        json={"email": "ada@club.org", "password": PASSWORD, "confirm_password": PASSWORD},
    )
    assert signup.status_code == 201
    token = signup.json()["token_hash"]

    early_login = await client.post("/api/auth/login", json={"email": "ada@club.org", "password": PASSWORD})
    assert early_login.status_code == 401
    assert early_login.json()["error"]["code"] == "ACCOUNT_NOT_FOUND"

    confirm = await client.get(
        "/api/auth/confirm",
        params={"token_hash": token, "type": "signup"},
        follow_redirects=False,
    )
    assert confirm.status_code == 303
    assert confirm.headers["location"] == "/member"

    login = await client.post("/api/auth/login", json={"email": "ada@club.org", "password": PASSWORD})
    assert login.status_code == 200
    data = login.json()
    assert data["role"] == "member"
    assert data["redirect_to"] == "/member"

    events = await client.get(
        "/api/member/events", headers={"Authorization": f"Bearer {data['access_token']}"}
    )
    assert events.status_code == 200


@pytest.mark.asyncio
async def test_confirm_with_bad_token_redirects_to_error(client: AsyncClient):
    response = await client.get(
        "/api/auth/confirm",
        params={"token_hash": "nope", "type": "signup"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/error"


@pytest.mark.asyncio
async def test_signup_requires_approval(client: AsyncClient):
    response = await client.post(
        "/api/auth/signup",
        json={"email": "stranger@club.org", "password": PASSWORD, "confirm_password": PASSWORD},
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "EMAIL_NOT_ELIGIBLE"


@pytest.mark.asyncio
async def test_weak_password(client: AsyncClient):
    response = await client.post(
        "/api/auth/signup",
        json={"email": "ada@club.org", "password": "weak", "confirm_password": "weak"},
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "WEAK_PASSWORD"


@pytest.mark.asyncio
async def test_role_gating(client: AsyncClient, create_profile):
    _, member_headers = await create_profile("member@club.org")
    _, core_headers = await create_profile("core@club.org", role=ProfileRole.core)

    assert (await client.get("/api/core/members", headers=member_headers)).status_code == 403
    assert (await client.get("/api/member/events", headers=core_headers)).status_code == 403
    assert (await client.get("/api/core/members", headers=core_headers)).status_code == 200
    assert (await client.get("/api/core/members")).status_code == 401
    assert (
        await client.get("/api/core/members", headers={"Authorization": "Bearer garbage"})
    ).status_code == 401

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient

from clubhub.domain.entities import ProfileRole


def _workshop_payload(max_participants=1):
    now = datetime.now(timezone.utc)
    return {
        "title": "Intro to Rust",
        "description": "Ownership, borrowing and lifetimes from scratch.",
        "max_participants": max_participants,
        "registration_deadline": (now + timedelta(days=1)).isoformat(),
        "start_date": (now + timedelta(days=2)).isoformat(),
        "end_date": (now + timedelta(days=2, hours=2)).isoformat(),
        "hosts": [{"name": "Grace Hopper", "designation": "Mentor"}],
    }


@pytest_asyncio.fixture
async def core(create_profile):
    return await create_profile("core@club.org", role=ProfileRole.core, member_role="president")


@pytest_asyncio.fixture
async def workshop_id(client: AsyncClient, core):
    _, headers = core
    response = await client.post("/api/core/workshops", json=_workshop_payload(), headers=headers)
    assert response.status_code == 201
    data = response.json()
    assert data["mode"] == "workshop"
    assert data["status"] == "upcoming"
    return data["id"]


@pytest.mark.asyncio
async def test_single_seat_workshop(client: AsyncClient, create_profile, workshop_id):
    _, ada = await create_profile("ada@club.org")
    _, linus = await create_profile("linus@club.org")

    first = await client.post(f"/api/member/workshops/{workshop_id}/registration", headers=ada)
    assert first.status_code == 201
    assert first.json()["success"] is True

    again = await client.post(f"/api/member/workshops/{workshop_id}/registration", headers=ada)
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "ALREADY_REGISTERED"

    second = await client.post(f"/api/member/workshops/{workshop_id}/registration", headers=linus)
    assert second.status_code == 409
    assert second.json()["error"]["message"] == "Workshop is full"

    details = await client.get(f"/api/member/workshops/{workshop_id}", headers=ada)
    assert details.status_code == 200


@pytest.mark.asyncio
async def test_cancel_twice(client: AsyncClient, create_profile, workshop_id):
    _, ada = await create_profile("ada@club.org")
    await client.post(f"/api/member/workshops/{workshop_id}/registration", headers=ada)

    first = await client.delete(f"/api/member/workshops/{workshop_id}/registration", headers=ada)
    second = await client.delete(f"/api/member/workshops/{workshop_id}/registration", headers=ada)

    assert first.status_code == 200
    assert second.status_code == 404
    assert second.json()["error"]["code"] == "REGISTRATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_export_and_attendance(client: AsyncClient, create_profile, core, workshop_id):
    _, core_headers = core
    _, ada = await create_profile("ada@club.org", name="Ada Lovelace")
    await client.post(f"/api/member/workshops/{workshop_id}/registration", headers=ada)

    export = await client.get(
        f"/api/core/events/{workshop_id}/registrations/export", headers=core_headers
    )
    assert export.status_code == 200
    assert export.headers["content-type"].startswith("text/csv")
    assert "intro-to-rust-registrations.csv" in export.headers["content-disposition"]
    lines = export.text.split("\n")
    assert len(lines) == 2
    assert lines[1].startswith('1,"Ada Lovelace","ada@club.org",')
    assert lines[1].endswith(',"registered",No')

    sheet = await client.get(f"/api/core/workshops/{workshop_id}/attendance", headers=core_headers)
    participant_id = sheet.json()["participants"][0]["id"]

    updated = await client.put(
        f"/api/core/workshops/{workshop_id}/attendance",
        json=[{"participant_id": participant_id, "attended": True}],
        headers=core_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["attendance_rate"] == 100

    activity = await client.get("/api/core/dashboard/activity", headers=core_headers)
    actions = [item["action"] for item in activity.json()]
    assert "attendance_updated" in actions
    assert "workshop_created" in actions


@pytest.mark.asyncio
async def test_core_dashboard_stats(client: AsyncClient, core, create_profile, workshop_id):
    _, core_headers = core
    await create_profile("ada@club.org")

    response = await client.get("/api/core/dashboard/stats", headers=core_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["total_workshops"] == 1
    assert data["active_members"] == 1

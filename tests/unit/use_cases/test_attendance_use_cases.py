from datetime import datetime
from uuid import uuid4

import pytest

from clubhub.app.use_cases.attendance import (
    AttendanceUpdate,
    ExportRegistrationsCsvUseCase,
    UpdateAttendanceUseCase,
)
from clubhub.app.use_cases.attendance.registrations_use_case import build_registrations_csv
from clubhub.domain.entities import ParticipantStatus
from clubhub.libs.result import ErrorKind
from tests.fixtures.factories import make_event, make_participant


@pytest.fixture
def workshop_with_participants(mock_uow):
    workshop = make_event()
    participants = [
        make_participant(workshop, name="Ada", email="ada@club.org"),
        make_participant(workshop, name="Grace", email="grace@club.org"),
        make_participant(workshop, name="Linus", email="linus@club.org"),
    ]
    mock_uow.events.get_by_id.return_value = workshop
    mock_uow.participants.list_by_event.return_value = participants
    return workshop, participants


@pytest.mark.asyncio
async def test_update_attendance(mock_uow, core_identity, workshop_with_participants):
    workshop, participants = workshop_with_participants
    updates = [
        AttendanceUpdate(participant_id=participants[0].id, attended=True),
        AttendanceUpdate(participant_id=participants[1].id, attended=True),
    ]

    result = await UpdateAttendanceUseCase(mock_uow).execute(core_identity, workshop.id, updates)

    assert result.is_ok()
    assert result.value.updated == 2
    assert result.value.total_participants == 3
    assert result.value.attended_count == 2
    assert result.value.attendance_rate == 67
    assert participants[0].status == ParticipantStatus.confirmed
    assert participants[2].status == ParticipantStatus.registered

    audit = mock_uow.audit_logs.create.call_args.args[0]
    assert audit.action == "attendance_updated"
    assert audit.event_metadata["attended_count"] == 2
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_unknown_participant_rejects_whole_batch(mock_uow, core_identity, workshop_with_participants):
    workshop, participants = workshop_with_participants
    stranger = uuid4()
    updates = [
        AttendanceUpdate(participant_id=participants[0].id, attended=True),
        AttendanceUpdate(participant_id=stranger, attended=True),
    ]

    result = await UpdateAttendanceUseCase(mock_uow).execute(core_identity, workshop.id, updates)

    assert result.error.code == "PARTICIPANTS_NOT_FOUND"
    assert str(stranger) in result.error.message
    assert participants[0].attended is False
    mock_uow.participants.update.assert_not_called()
    mock_uow.audit_logs.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_empty_batch(mock_uow, core_identity):
    result = await UpdateAttendanceUseCase(mock_uow).execute(core_identity, uuid4(), [])

    assert result.error.code == "EMPTY_BATCH"
    assert result.error.kind == ErrorKind.VALIDATION


@pytest.mark.asyncio
async def test_members_cannot_update_attendance(mock_uow, member_identity):
    result = await UpdateAttendanceUseCase(mock_uow).execute(
        member_identity, uuid4(), [AttendanceUpdate(participant_id=uuid4(), attended=True)]
    )

    assert result.error.kind == ErrorKind.FORBIDDEN


def test_csv_has_header_plus_one_line_per_registration():
    workshop = make_event()
    registrations = [
        make_participant(workshop, name="Zed", registered_at=datetime(2026, 3, 2, 9, 30, 0)),
        make_participant(workshop, name='Ada "Countess"', attended=True, registered_at=datetime(2026, 3, 1, 8, 0, 0)),
    ]

    lines = build_registrations_csv(registrations).split("\n")

    assert len(lines) == 3
    assert lines[0] == "#,Name,Email,Registered At,Status,Attended"
    assert lines[1] == '1,"Zed","ada@club.org","2026-03-02 09:30:00","registered",No'
    assert lines[2] == '2,"Ada ""Countess""","ada@club.org","2026-03-01 08:00:00","confirmed",Yes'


def test_csv_without_registrations_is_header_only():
    assert build_registrations_csv([]) == "#,Name,Email,Registered At,Status,Attended"


@pytest.mark.asyncio
async def test_export_filename(mock_uow, core_identity):
    event = make_event(title="Rust & Friends: Intro!")
    mock_uow.events.get_by_id.return_value = event
    mock_uow.participants.list_by_event.return_value = []

    result = await ExportRegistrationsCsvUseCase(mock_uow).execute(core_identity, event.id)

    assert result.value.filename == "rust-friends-intro-registrations.csv"

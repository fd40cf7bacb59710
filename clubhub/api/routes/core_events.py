from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from clubhub.api.error import raise_error
from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.attendance import (
    AttendanceSheet,
    AttendanceUpdate,
    ExportRegistrationsCsvUseCase,
    GetAttendanceSheetUseCase,
    ListRegistrationsUseCase,
    UpdateAttendanceResponse,
    UpdateAttendanceUseCase,
)
from clubhub.app.use_cases.events import (
    CompleteWorkshopUseCase,
    CreateEventCommand,
    CreateEventUseCase,
    CreateWorkshopUseCase,
    DeleteEventUseCase,
    DeleteWorkshopUseCase,
    EventInfo,
    GetWorkshopAdminDetailsUseCase,
    ParticipantInfo,
    UpdateEventCommand,
    UpdateEventUseCase,
    UpdateWorkshopUseCase,
    WorkshopAdminDetails,
    WorkshopCommand,
)
from clubhub.depends import get_unit_of_work, require_core

router = APIRouter(prefix="/core", tags=["Core Events"])


# ============================================================================
# Events
# ============================================================================


@router.post("/events", status_code=status.HTTP_201_CREATED, response_model=EventInfo)
async def create_event(
    request: CreateEventCommand,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateEventUseCase(uow).execute(identity, request)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.put("/events/{event_id}", response_model=EventInfo)
async def update_event(
    event_id: UUID,
    request: UpdateEventCommand,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateEventUseCase(uow).execute(identity, event_id, request)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.delete("/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: UUID,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: EVENT_NOT_FOUND
        - 409 Conflict: EVENT_ONGOING
    """
    result = await DeleteEventUseCase(uow).execute(identity, event_id)
    if result.is_err():
        raise_error(result.error)


@router.get("/events/{event_id}/registrations", response_model=List[ParticipantInfo])
async def list_registrations(
    event_id: UUID,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListRegistrationsUseCase(uow).execute(identity, event_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/events/{event_id}/registrations/export")
async def export_registrations(
    event_id: UUID,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Registrations as CSV, newest first"""
    result = await ExportRegistrationsCsvUseCase(uow).execute(identity, event_id)
    if result.is_err():
        raise_error(result.error)

    export = result.value
    return Response(
        content=export.content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


# ============================================================================
# Workshops
# ============================================================================


@router.post("/workshops", status_code=status.HTTP_201_CREATED, response_model=EventInfo)
async def create_workshop(
    request: WorkshopCommand,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 422: INVALID_TITLE, INVALID_DESCRIPTION, INVALID_CAPACITY,
               INVALID_SCHEDULE, INVALID_HOSTS
    """
    result = await CreateWorkshopUseCase(uow).execute(identity, request)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/workshops/{workshop_id}", response_model=WorkshopAdminDetails)
async def get_workshop(
    workshop_id: UUID,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetWorkshopAdminDetailsUseCase(uow).execute(identity, workshop_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.put("/workshops/{workshop_id}", response_model=EventInfo)
async def update_workshop(
    workshop_id: UUID,
    request: WorkshopCommand,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateWorkshopUseCase(uow).execute(identity, workshop_id, request)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post("/workshops/{workshop_id}/complete", response_model=EventInfo)
async def complete_workshop(
    workshop_id: UUID,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CompleteWorkshopUseCase(uow).execute(identity, workshop_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.delete("/workshops/{workshop_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workshop(
    workshop_id: UUID,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 403 Forbidden: PRESIDENT_ONLY
        - 409 Conflict: WORKSHOP_COMPLETED
    """
    result = await DeleteWorkshopUseCase(uow).execute(identity, workshop_id)
    if result.is_err():
        raise_error(result.error)


@router.get("/workshops/{workshop_id}/attendance", response_model=AttendanceSheet)
async def get_attendance_sheet(
    workshop_id: UUID,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetAttendanceSheetUseCase(uow).execute(identity, workshop_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.put("/workshops/{workshop_id}/attendance", response_model=UpdateAttendanceResponse)
async def update_attendance(
    workshop_id: UUID,
    updates: List[AttendanceUpdate],
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Record attendance for a batch of participants, all or nothing.

    Raises:
        - 404 Not Found: WORKSHOP_NOT_FOUND, PARTICIPANTS_NOT_FOUND
        - 422: EMPTY_BATCH
    """
    result = await UpdateAttendanceUseCase(uow).execute(identity, workshop_id, updates)
    if result.is_err():
        raise_error(result.error)
    return result.value

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from clubhub.api.error import raise_error
from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.events import (
    AvailableWorkshop,
    CancelRegistrationUseCase,
    GetWorkshopDetailsUseCase,
    GroupedEventsResponse,
    ListAvailableWorkshopsUseCase,
    ListEventsUseCase,
    ListMyWorkshopsUseCase,
    MyWorkshop,
    RegisterUseCase,
    RegistrationResponse,
    WorkshopDetails,
)
from clubhub.depends import get_unit_of_work, require_member
from clubhub.domain.entities import EventMode

router = APIRouter(prefix="/member", tags=["Member Events"])


@router.get("/events", response_model=GroupedEventsResponse)
async def list_events(
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListEventsUseCase(uow).execute()
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post(
    "/events/{event_id}/registration",
    status_code=status.HTTP_201_CREATED,
    response_model=RegistrationResponse,
)
async def register_for_event(
    event_id: UUID,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Individual registration for an individual event"""
    result = await RegisterUseCase(uow).execute(identity, event_id, EventMode.event)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.delete("/events/{event_id}/registration", response_model=RegistrationResponse)
async def cancel_event_registration(
    event_id: UUID,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CancelRegistrationUseCase(uow).execute(identity, event_id, EventMode.event)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/workshops", response_model=List[AvailableWorkshop])
async def list_available_workshops(
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListAvailableWorkshopsUseCase(uow).execute(identity)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/workshops/mine", response_model=List[MyWorkshop])
async def list_my_workshops(
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListMyWorkshopsUseCase(uow).execute(identity)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/workshops/{workshop_id}", response_model=WorkshopDetails)
async def get_workshop_details(
    workshop_id: UUID,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetWorkshopDetailsUseCase(uow).execute(identity, workshop_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post(
    "/workshops/{workshop_id}/registration",
    status_code=status.HTTP_201_CREATED,
    response_model=RegistrationResponse,
)
async def register_for_workshop(
    workshop_id: UUID,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register for a workshop.

    Raises:
        - 404 Not Found: EVENT_NOT_FOUND
        - 409 Conflict: ALREADY_REGISTERED, EVENT_FULL, EVENT_COMPLETED
        - 422: DEADLINE_PASSED
    """
    result = await RegisterUseCase(uow).execute(identity, workshop_id, EventMode.workshop)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.delete("/workshops/{workshop_id}/registration", response_model=RegistrationResponse)
async def cancel_workshop_registration(
    workshop_id: UUID,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: REGISTRATION_NOT_FOUND
        - 409 Conflict: EVENT_COMPLETED
        - 422: DEADLINE_PASSED
    """
    result = await CancelRegistrationUseCase(uow).execute(identity, workshop_id, EventMode.workshop)
    if result.is_err():
        raise_error(result.error)
    return result.value

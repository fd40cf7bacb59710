from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from clubhub.api.error import raise_error
from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.announcements import (
    AnnouncementCommand,
    AnnouncementInfo,
    CreateAnnouncementUseCase,
    DeleteAnnouncementUseCase,
    GetUnseenCountUseCase,
    ListAnnouncementsUseCase,
    MarkAnnouncementsSeenUseCase,
    UnseenCountResponse,
    UpdateAnnouncementUseCase,
)
from clubhub.depends import get_identity, get_unit_of_work, require_core

router = APIRouter(tags=["Announcements"])


@router.get("/announcements", response_model=List[AnnouncementInfo])
async def list_announcements(
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Announcements targeted at the caller's role, newest first"""
    result = await ListAnnouncementsUseCase(uow).execute(identity)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/announcements/unseen-count", response_model=UnseenCountResponse)
async def get_unseen_count(
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetUnseenCountUseCase(uow).execute(identity)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post("/announcements/seen", response_model=UnseenCountResponse)
async def mark_announcements_seen(
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await MarkAnnouncementsSeenUseCase(uow).execute(identity)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/core/announcements", response_model=List[AnnouncementInfo])
async def list_all_announcements(
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListAnnouncementsUseCase(uow).execute(identity, manage=True)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post(
    "/core/announcements",
    status_code=status.HTTP_201_CREATED,
    response_model=AnnouncementInfo,
)
async def create_announcement(
    request: AnnouncementCommand,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateAnnouncementUseCase(uow).execute(identity, request)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.put("/core/announcements/{announcement_id}", response_model=AnnouncementInfo)
async def update_announcement(
    announcement_id: UUID,
    request: AnnouncementCommand,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateAnnouncementUseCase(uow).execute(identity, announcement_id, request)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.delete("/core/announcements/{announcement_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_announcement(
    announcement_id: UUID,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteAnnouncementUseCase(uow).execute(identity, announcement_id)
    if result.is_err():
        raise_error(result.error)

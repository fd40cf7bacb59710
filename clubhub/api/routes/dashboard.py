from typing import List

from fastapi import APIRouter, Depends

from clubhub.api.error import raise_error
from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork, UnitOfWorkFactory
from clubhub.app.use_cases.dashboard import (
    ActivityItem,
    CoreStats,
    GetCoreStatsUseCase,
    GetMemberStatsUseCase,
    GetRecentActivityUseCase,
    GetUpcomingEventsUseCase,
    MemberStats,
    UpcomingEvents,
)
from clubhub.depends import get_unit_of_work, get_unit_of_work_factory, require_core, require_member

router = APIRouter(tags=["Dashboard"])


@router.get("/core/dashboard/stats", response_model=CoreStats)
async def get_core_stats(
    identity: Identity = Depends(require_core),
    uow_factory: UnitOfWorkFactory = Depends(get_unit_of_work_factory),
):
    """
    Each figure is computed independently; a failing query reports its
    default instead of failing the whole response.
    """
    result = await GetCoreStatsUseCase(uow_factory).execute(identity)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/core/dashboard/activity", response_model=List[ActivityItem])
async def get_recent_activity(
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetRecentActivityUseCase(uow).execute()
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/core/dashboard/upcoming", response_model=UpcomingEvents)
async def get_core_upcoming(
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetUpcomingEventsUseCase(uow).execute()
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/member/dashboard/stats", response_model=MemberStats)
async def get_member_stats(
    identity: Identity = Depends(require_member),
    uow_factory: UnitOfWorkFactory = Depends(get_unit_of_work_factory),
):
    result = await GetMemberStatsUseCase(uow_factory).execute(identity)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/member/dashboard/upcoming", response_model=UpcomingEvents)
async def get_member_upcoming(
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetUpcomingEventsUseCase(uow).execute()
    if result.is_err():
        raise_error(result.error)
    return result.value

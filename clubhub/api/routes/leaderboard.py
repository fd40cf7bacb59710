from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from clubhub.api.error import raise_error
from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.leaderboard import (
    AdjustTeamPointsUseCase,
    GetLeaderboardUseCase,
    LeaderboardEntry,
    TeamPointsResponse,
)
from clubhub.depends import get_identity, get_unit_of_work, require_core

router = APIRouter(tags=["Leaderboard"])


class AdjustPointsRequest(BaseModel):
    delta: int
    reason: str = ""


@router.get("/leaderboard", response_model=List[LeaderboardEntry])
async def get_leaderboard(
    limit: int = Query(50, ge=1, le=200),
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetLeaderboardUseCase(uow).execute(limit)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post("/core/teams/{team_id}/points", response_model=TeamPointsResponse)
async def adjust_team_points(
    team_id: UUID,
    request: AdjustPointsRequest,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Points never drop below zero"""
    result = await AdjustTeamPointsUseCase(uow).execute(identity, team_id, request.delta, request.reason)
    if result.is_err():
        raise_error(result.error)
    return result.value

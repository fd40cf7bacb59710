from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from clubhub.api.error import raise_error
from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.leaderboard import LeaderboardEntry
from clubhub.app.use_cases.tournaments import (
    CreateTournamentUseCase,
    DeleteTournamentUseCase,
    GetTournamentDetailsUseCase,
    GetTournamentLeaderboardUseCase,
    ListEventWinnersUseCase,
    ListTournamentsUseCase,
    ResetTournamentUseCase,
    SetEventWinnersUseCase,
    SetWinnersCommand,
    TournamentCommand,
    TournamentDetails,
    TournamentInfo,
    TournamentStatusCommand,
    UpdateTournamentStatusUseCase,
    WinnerInfo,
)
from clubhub.depends import get_identity, get_unit_of_work, require_core

router = APIRouter(tags=["Tournaments"])


@router.get("/core/tournaments", response_model=List[TournamentInfo])
async def list_tournaments(
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTournamentsUseCase(uow).execute(identity)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post(
    "/core/tournaments",
    status_code=status.HTTP_201_CREATED,
    response_model=TournamentInfo,
)
async def create_tournament(
    request: TournamentCommand,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateTournamentUseCase(uow).execute(identity, request)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/core/tournaments/{tournament_id}", response_model=TournamentDetails)
async def get_tournament(
    tournament_id: UUID,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTournamentDetailsUseCase(uow).execute(identity, tournament_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.put("/core/tournaments/{tournament_id}/status", response_model=TournamentInfo)
async def update_tournament_status(
    tournament_id: UUID,
    request: TournamentStatusCommand,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Statuses advance one step at a time"""
    result = await UpdateTournamentStatusUseCase(uow).execute(identity, tournament_id, request.status)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post("/core/tournaments/{tournament_id}/reset", response_model=TournamentInfo)
async def reset_tournament(
    tournament_id: UUID,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ResetTournamentUseCase(uow).execute(identity, tournament_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.delete("/core/tournaments/{tournament_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tournament(
    tournament_id: UUID,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteTournamentUseCase(uow).execute(identity, tournament_id)
    if result.is_err():
        raise_error(result.error)


@router.get("/tournaments/{tournament_id}/leaderboard", response_model=List[LeaderboardEntry])
async def get_tournament_leaderboard(
    tournament_id: UUID,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTournamentLeaderboardUseCase(uow).execute(tournament_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.put("/core/events/{event_id}/winners", response_model=List[WinnerInfo])
async def set_event_winners(
    event_id: UUID,
    request: SetWinnersCommand,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Replaces the podium; winning teams get the points of their place"""
    result = await SetEventWinnersUseCase(uow).execute(identity, event_id, request)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/events/{event_id}/winners", response_model=List[WinnerInfo])
async def list_event_winners(
    event_id: UUID,
    identity: Identity = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListEventWinnersUseCase(uow).execute(event_id)
    if result.is_err():
        raise_error(result.error)
    return result.value

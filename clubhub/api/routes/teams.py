from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from config import ApplicationConfig
from clubhub.api.error import raise_error
from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.teams import (
    ApplicationInfo,
    ApplyToTeamUseCase,
    AvailableMember,
    CancelInvitationUseCase,
    CreateTeamCommand,
    CreateTeamResponse,
    CreateTeamUseCase,
    GetAvailableMembersUseCase,
    GetTeamInvitationStatusUseCase,
    InvitationInfo,
    InvitationResponse,
    ListMyApplicationsUseCase,
    ListMyInvitationsUseCase,
    ListMyTeamsUseCase,
    ListNotificationsUseCase,
    ListTeamApplicationsUseCase,
    ListTeamsNeedingMembersUseCase,
    MarkNotificationReadUseCase,
    MyTeam,
    NotificationInfo,
    ReinviteMemberUseCase,
    RespondApplicationUseCase,
    RespondInvitationUseCase,
    SendInvitationUseCase,
    StatusResponse,
    TeamNeedingMembers,
    WithdrawApplicationUseCase,
)
from clubhub.depends import get_unit_of_work, require_member

router = APIRouter(prefix="/member", tags=["Teams"])


class SendInvitationRequest(BaseModel):
    member_id: UUID
    event_id: Optional[UUID] = None


class ReinviteRequest(BaseModel):
    member_id: UUID


class RespondRequest(BaseModel):
    accept: bool


# ============================================================================
# Teams
# ============================================================================


@router.post("/teams", status_code=status.HTTP_201_CREATED, response_model=CreateTeamResponse)
async def create_team(
    request: CreateTeamCommand,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: EVENT_NOT_FOUND, MEMBER_NOT_FOUND
        - 409 Conflict: TEAM_NAME_TAKEN, ALREADY_IN_TEAM, REGISTRATION_CLOSED
        - 422: TEAM_TOO_LARGE, NOT_A_TEAM_EVENT, DEADLINE_PASSED
    """
    use_case = CreateTeamUseCase(uow, invitation_ttl_days=ApplicationConfig.INVITATION_TTL_DAYS)
    result = await use_case.execute(identity, request)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/teams", response_model=List[MyTeam])
async def list_my_teams(
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListMyTeamsUseCase(uow).execute(identity)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/events/{event_id}/teams/open", response_model=List[TeamNeedingMembers])
async def list_teams_needing_members(
    event_id: UUID,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTeamsNeedingMembersUseCase(uow).execute(identity, event_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/teams/{team_id}/available-members", response_model=List[AvailableMember])
async def list_available_members(
    team_id: UUID,
    event_id: UUID,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetAvailableMembersUseCase(uow).execute(identity, team_id, event_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


# ============================================================================
# Invitations
# ============================================================================


@router.get("/teams/{team_id}/invitations", response_model=List[InvitationInfo])
async def get_team_invitation_status(
    team_id: UUID,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTeamInvitationStatusUseCase(uow).execute(identity, team_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post(
    "/teams/{team_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=InvitationResponse,
)
async def send_invitation(
    team_id: UUID,
    request: SendInvitationRequest,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 403 Forbidden: NOT_AUTHORIZED
        - 409 Conflict: INVITATION_EXISTS, ALREADY_MEMBER
    """
    use_case = SendInvitationUseCase(uow, invitation_ttl_days=ApplicationConfig.INVITATION_TTL_DAYS)
    result = await use_case.execute(identity, team_id, request.member_id, request.event_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post(
    "/teams/{team_id}/reinvite",
    status_code=status.HTTP_201_CREATED,
    response_model=InvitationResponse,
)
async def reinvite_member(
    team_id: UUID,
    request: ReinviteRequest,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ReinviteMemberUseCase(uow, reinvite_ttl_hours=ApplicationConfig.REINVITE_TTL_HOURS)
    result = await use_case.execute(identity, team_id, request.member_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/invitations", response_model=List[InvitationInfo])
async def list_my_invitations(
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListMyInvitationsUseCase(uow).execute(identity)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post("/invitations/{invitation_id}/cancel", response_model=InvitationResponse)
async def cancel_invitation(
    invitation_id: UUID,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CancelInvitationUseCase(uow).execute(identity, invitation_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post("/invitations/{invitation_id}/respond", response_model=StatusResponse)
async def respond_invitation(
    invitation_id: UUID,
    request: RespondRequest,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RespondInvitationUseCase(uow).execute(identity, invitation_id, request.accept)
    if result.is_err():
        raise_error(result.error)
    return result.value


# ============================================================================
# Applications
# ============================================================================


@router.post(
    "/teams/{team_id}/applications",
    status_code=status.HTTP_201_CREATED,
    response_model=ApplicationInfo,
)
async def apply_to_team(
    team_id: UUID,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ApplyToTeamUseCase(uow).execute(identity, team_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/applications", response_model=List[ApplicationInfo])
async def list_my_applications(
    event_id: Optional[UUID] = None,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListMyApplicationsUseCase(uow).execute(identity, event_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/applications/received", response_model=List[ApplicationInfo])
async def list_received_applications(
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTeamApplicationsUseCase(uow).execute(identity)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post("/applications/{application_id}/respond", response_model=StatusResponse)
async def respond_application(
    application_id: UUID,
    request: RespondRequest,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RespondApplicationUseCase(uow).execute(identity, application_id, request.accept)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.delete("/applications/{application_id}", response_model=StatusResponse)
async def withdraw_application(
    application_id: UUID,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await WithdrawApplicationUseCase(uow).execute(identity, application_id)
    if result.is_err():
        raise_error(result.error)
    return result.value


# ============================================================================
# Notifications
# ============================================================================


@router.get("/notifications", response_model=List[NotificationInfo])
async def list_notifications(
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListNotificationsUseCase(uow).execute(identity)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post("/notifications/{notification_id}/read", response_model=StatusResponse)
async def mark_notification_read(
    notification_id: UUID,
    identity: Identity = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await MarkNotificationReadUseCase(uow).execute(identity, notification_id)
    if result.is_err():
        raise_error(result.error)
    return result.value

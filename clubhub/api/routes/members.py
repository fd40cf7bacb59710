from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from clubhub.api.error import raise_error
from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.members import (
    AssignMemberRoleUseCase,
    CreatePendingUserCommand,
    CreatePendingUserUseCase,
    DeletePendingUserUseCase,
    ListPendingUsersUseCase,
    ListProfilesUseCase,
    PendingUserInfo,
    ProfileInfo,
    PromotePendingUserUseCase,
    UpdatePendingUserCommand,
    UpdatePendingUserUseCase,
    UpdateProfileRoleUseCase,
)
from clubhub.depends import get_unit_of_work, require_core
from clubhub.domain.entities import ProfileRole

router = APIRouter(prefix="/core/members", tags=["Members"])


class RoleRequest(BaseModel):
    role: ProfileRole


class MemberRoleRequest(BaseModel):
    member_role: Optional[str] = None


@router.get("", response_model=List[ProfileInfo])
async def list_profiles(
    role: Optional[ProfileRole] = None,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListProfilesUseCase(uow).execute(identity, role)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.put("/{profile_id}/role", response_model=ProfileInfo)
async def update_role(
    profile_id: UUID,
    request: RoleRequest,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateProfileRoleUseCase(uow).execute(identity, profile_id, request.role)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.put("/{profile_id}/member-role", response_model=ProfileInfo)
async def assign_member_role(
    profile_id: UUID,
    request: MemberRoleRequest,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await AssignMemberRoleUseCase(uow).execute(identity, profile_id, request.member_role)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.get("/pending", response_model=List[PendingUserInfo])
async def list_pending_users(
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListPendingUsersUseCase(uow).execute(identity)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.post("/pending", status_code=status.HTTP_201_CREATED, response_model=PendingUserInfo)
async def create_pending_user(
    request: CreatePendingUserCommand,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Approve an email for signup.

    Raises:
        - 409 Conflict: PROFILE_EXISTS, PENDING_USER_EXISTS
    """
    result = await CreatePendingUserUseCase(uow).execute(identity, request)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.put("/pending/{pending_user_id}", response_model=PendingUserInfo)
async def update_pending_user(
    pending_user_id: UUID,
    request: UpdatePendingUserCommand,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdatePendingUserUseCase(uow).execute(identity, pending_user_id, request)
    if result.is_err():
        raise_error(result.error)
    return result.value


@router.delete("/pending/{pending_user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pending_user(
    pending_user_id: UUID,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeletePendingUserUseCase(uow).execute(identity, pending_user_id)
    if result.is_err():
        raise_error(result.error)


@router.post(
    "/pending/{pending_user_id}/promote",
    status_code=status.HTTP_201_CREATED,
    response_model=ProfileInfo,
)
async def promote_pending_user(
    pending_user_id: UUID,
    identity: Identity = Depends(require_core),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await PromotePendingUserUseCase(uow).execute(identity, pending_user_id)
    if result.is_err():
        raise_error(result.error)
    return result.value

from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from clubhub.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from clubhub.api.error import ClientError
from clubhub.api.utils.jwt import verify_jwt
from clubhub.app.services.identity import Identity
from clubhub.app.services.unit_of_work import UnitOfWork, UnitOfWorkFactory
from clubhub.domain.entities import ProfileRole
from clubhub.libs.result import Error, ErrorKind

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_unit_of_work_factory() -> UnitOfWorkFactory:
    """Factory handing out a fresh session per unit of work, for concurrent reads"""

    def factory() -> UnitOfWork:
        return SqlAlchemyUnitOfWork(AsyncSessionLocal(), owns_session=True)

    return factory


def _unauthorized(message: str) -> ClientError:
    return ClientError(Error(ErrorKind.UNAUTHORIZED, "UNAUTHORIZED", message), status_code=401)


async def get_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Identity:
    """
    Resolve the caller from the bearer token.

    The role is read from the Profile on every request, so role changes
    take effect without reissuing tokens.

    Raises:
        ClientError: 401 if the token is missing, invalid or expired,
            or the profile no longer exists
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    payload = verify_jwt(credentials.credentials)
    if payload is None or "user_id" not in payload:
        raise _unauthorized("Invalid or expired token")

    try:
        user_id = UUID(payload["user_id"])
    except ValueError:
        raise _unauthorized("Invalid or expired token")

    async with uow:
        profile = await uow.profiles.get_by_id(user_id)
        if profile is None:
            raise _unauthorized("Profile not found")

        return Identity(user_id=profile.id, role=profile.role, member_role=profile.member_role)


def _require_role(role: ProfileRole):
    async def dependency(identity: Identity = Depends(get_identity)) -> Identity:
        if identity.role != role:
            raise ClientError(
                Error(ErrorKind.FORBIDDEN, "FORBIDDEN", f"This area is restricted to {role.value} users"),
                status_code=403,
            )
        return identity

    return dependency


require_core = _require_role(ProfileRole.core)
require_member = _require_role(ProfileRole.member)

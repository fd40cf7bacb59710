from uuid import uuid4

import bcrypt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import clubhub.domain.entities  # noqa: F401
from clubhub.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from clubhub.api.utils.jwt import generate_jwt
from clubhub.depends import get_unit_of_work, get_unit_of_work_factory
from clubhub.domain.entities import Account, Profile, ProfileRole


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, session_maker):
    from clubhub.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    def override_get_unit_of_work_factory():
        return lambda: SqlAlchemyUnitOfWork(session_maker(), owns_session=True)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_unit_of_work_factory] = override_get_unit_of_work_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def create_profile(db_session):
    """Seed a confirmed profile and return (profile_id, auth headers)"""

    async def _create(email: str, role: ProfileRole = ProfileRole.member, member_role=None, name=None):
        profile_id = uuid4()
        db_session.add(
            Profile(
                id=profile_id,
                full_name=name or email.split("@")[0].title(),
                email=email,
                role=role,
                member_role=member_role,
                is_core_team=role == ProfileRole.core,
            )
        )
        db_session.add(
            Account(
                id=profile_id,
                email=email,
                password_hash=bcrypt.hashpw(b"SecurePass123!", bcrypt.gensalt(4)).decode(),
                email_confirmed=True,
            )
        )
        await db_session.commit()
        token = generate_jwt(profile_id, role.value)
        return profile_id, {"Authorization": f"Bearer {token}"}

    return _create
